"""
Pydantic schemas for API request/response validation.
"""
from .client import CellValue, ClientAppendOut, ClientCreate
from .sale import SaleCreate, SaleOut

__all__ = [
    "CellValue",
    "ClientAppendOut",
    "ClientCreate",
    "SaleCreate",
    "SaleOut",
]
