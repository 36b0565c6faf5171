"""
Shared fixtures for the API tests.

Run with: pytest services/api/tests -v
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dependencies import get_sheets_adapter
from settings import Settings, get_settings

SELLERS_RESPONSE = {
    "range": "sellers!B1:B3",
    "majorDimension": "ROWS",
    "values": [["Vendedor"], ["Ana Torres"], ["Luis Rojas"]],
}

CLIENTS_RESPONSE = {
    "range": "clients!B1:D3",
    "majorDimension": "ROWS",
    "values": [["DNI", "Cliente", "Cantidad"], ["45879612", "Maria Quispe", "3"], ["70112233", "Jose Huaman", "0"]],
}


class FakeSheets:
    """In-memory stand-in for SheetsAdapter that records every call."""

    def __init__(self, reads=None, error=None):
        self.reads = reads or {}
        self.error = error
        self.appended = []

    def read_range(self, sheet_name, columns):
        if self.error:
            raise self.error
        return self.reads[f"{sheet_name}!{columns}"]

    def append_rows(self, sheet_name, columns, values):
        if self.error:
            raise self.error
        self.appended.append((sheet_name, columns, values))
        return {
            "spreadsheetId": "test-spreadsheet",
            "tableRange": f"{sheet_name}!A1:I10",
            "updates": {
                "spreadsheetId": "test-spreadsheet",
                "updatedRange": f"{sheet_name}!A11:I11",
                "updatedRows": len(values),
                "updatedColumns": len(values[0]) if values else 0,
                "updatedCells": sum(len(v) for v in values),
            },
        }


@pytest.fixture
def fake_sheets():
    return FakeSheets(
        reads={
            "sellers!B:B": SELLERS_RESPONSE,
            "clients!B:D": CLIENTS_RESPONSE,
        }
    )


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, timestamp_timezone="America/Lima")


@pytest.fixture
def client(fake_sheets, test_settings):
    from main import app

    app.dependency_overrides[get_sheets_adapter] = lambda: fake_sheets
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
