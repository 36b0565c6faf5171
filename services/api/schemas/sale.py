# services/api/schemas/sale.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .client import CellValue


class SaleCreate(BaseModel):
    """Payload for recording a sale in the sells sheet."""
    sellerName: Optional[CellValue] = Field(None, description="Seller name")
    dni: Optional[CellValue] = Field(None, description="Client national ID (DNI)")
    clientName: Optional[CellValue] = Field(None, description="Client full name")
    quantity: Optional[CellValue] = Field(None, description="Units sold (0 allowed)")
    price: Optional[CellValue] = Field(None, description="Sale price (0 allowed)")
    paymentStatus: Optional[CellValue] = Field(None, description='"Si Pago" or "No Pago"')
    paymentMethod: Optional[CellValue] = Field(
        None, description='Required when paymentStatus is "Si Pago"'
    )
    timestamp: Optional[CellValue] = Field(
        None, description="Client-side timestamp; server time is used when absent"
    )
    remarkText: Optional[CellValue] = Field(None, description="Free-text remark")


class SaleOut(BaseModel):
    """Echo of the stored sale, with defaults applied."""
    message: str
    sellerName: CellValue
    dni: CellValue
    clientName: CellValue
    quantity: CellValue
    price: CellValue
    paymentStatus: CellValue
    paymentMethod: CellValue
    timestamp: CellValue
    remarkText: CellValue
    updatedRows: int
