# services/api/dependencies.py
"""
DI helpers shared by routers/*.

The credential source is resolved once (process start); the adapter it feeds
still authenticates on every request.
"""
import logging
from typing import Annotated

from fastapi import Depends

from adapters.base import SpreadsheetAdapter
from adapters.sheets import SheetsAdapter
from core.credentials import resolve_credential_source
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

_adapter_instance = None


def build_sheets_adapter(settings: Settings) -> SheetsAdapter:
    source = resolve_credential_source(settings)
    logger.info(f"Spreadsheet ID: {settings.sheets_spreadsheet_id}")
    logger.info(f"Credentials: {source.mode}")
    return SheetsAdapter(
        credential_source=source,
        spreadsheet_id=settings.sheets_spreadsheet_id,
    )


def get_sheets_adapter() -> SpreadsheetAdapter:
    """Singleton pattern for the spreadsheet adapter."""
    global _adapter_instance
    if _adapter_instance is None:
        _adapter_instance = build_sheets_adapter(get_settings())
    return _adapter_instance


# ---- DI aliases (no default value allowed) ----
Sheets = Annotated[SpreadsheetAdapter, Depends(get_sheets_adapter)]
AppSettings = Annotated[Settings, Depends(get_settings)]
