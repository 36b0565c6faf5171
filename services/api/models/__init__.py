"""
Domain models for rows stored in the spreadsheet.
"""
from .client import Client
from .sale import PAID_STATUS, PLACEHOLDER, UNPAID_STATUS, CellValue, Sale

__all__ = [
    "CellValue",
    "Client",
    "PAID_STATUS",
    "PLACEHOLDER",
    "Sale",
    "UNPAID_STATUS",
]
