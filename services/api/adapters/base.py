"""
Spreadsheet adapter interface for the sales API.
Defines the contract the routers rely on, so tests (or another backend)
can stand in for Google Sheets.
"""

from typing import Protocol, List, Dict, Any


class SpreadsheetAdapter(Protocol):
    """
    Protocol for the two operations the API performs against the spreadsheet.

    Both return the provider's response body untouched; callers pick out
    what they need (e.g. updates.updatedRows).
    """

    def read_range(self, sheet_name: str, columns: str) -> Dict[str, Any]:
        """
        Read an A1 column range (e.g. "B:D") from a sheet.

        Returns:
            Dict with "range", "majorDimension" and (when not empty) "values".
        """
        ...

    def append_rows(self, sheet_name: str, columns: str, values: List[List[Any]]) -> Dict[str, Any]:
        """
        Append rows after the last non-empty row of the given column range.

        Args:
            sheet_name: Tab name ("clients", "sells", ...)
            columns: A1 column range, e.g. "A:I"
            values: Rows to write, one list of cell values per row

        Returns:
            Dict with "spreadsheetId", "tableRange" and "updates".
        """
        ...
