# services/api/adapters/sheets/__init__.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

import gspread

from ..base import SpreadsheetAdapter
from core.credentials import SCOPES, CredentialSource

logger = logging.getLogger(__name__)

# ========== Logical sheet ranges ==========

SELLERS_SHEET = "sellers"
CLIENTS_SHEET = "clients"
SELLS_SHEET = "sells"

SELLERS_READ_RANGE = "B:B"
CLIENTS_READ_RANGE = "B:D"
CLIENTS_APPEND_RANGE = "A:D"
SELLS_APPEND_RANGE = "A:I"


def a1_range(sheet_name: str, columns: str) -> str:
    return f"{sheet_name}!{columns}"


def updated_rows(response: Dict[str, Any]) -> int:
    """Rows written by an append call, as reported by the Sheets API."""
    updates = (response or {}).get("updates") or {}
    return int(updates.get("updatedRows") or 0)


class SheetsAdapter(SpreadsheetAdapter):
    """
    Google Sheets implementation:
    - Authorizes a fresh gspread client on every call (no token caching)
    - One values.get / values.append request per operation
    - No retries; API errors propagate to the caller
    """

    def __init__(self, credential_source: CredentialSource, spreadsheet_id: str) -> None:
        if not spreadsheet_id:
            raise ValueError("SheetsAdapter requires SHEETS_SPREADSHEET_ID")

        self.credential_source = credential_source
        self.spreadsheet_id = spreadsheet_id

    def _client(self) -> gspread.Client:
        creds = self.credential_source.load(SCOPES)
        return gspread.authorize(creds)

    # ========== SpreadsheetAdapter API ==========

    def read_range(self, sheet_name: str, columns: str) -> Dict[str, Any]:
        rng = a1_range(sheet_name, columns)
        logger.debug(f"values.get {rng}")
        return self._client().http_client.values_get(self.spreadsheet_id, rng)

    def append_rows(self, sheet_name: str, columns: str, values: List[List[Any]]) -> Dict[str, Any]:
        rng = a1_range(sheet_name, columns)
        logger.debug(f"values.append {rng} ({len(values)} row(s))")
        return self._client().http_client.values_append(
            self.spreadsheet_id,
            rng,
            params={"valueInputOption": "USER_ENTERED"},
            body={"values": values},
        )
