# services/api/schemas/client.py
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from models.sale import CellValue


class ClientCreate(BaseModel):
    """
    Payload for registering a client under a seller.
    All fields are optional at parse time; core.validation decides what is missing
    so the API can answer with a field-specific 400.
    """
    dni: Optional[CellValue] = Field(None, description="Client national ID (DNI)")
    clientName: Optional[CellValue] = Field(None, description="Client full name")
    quantity: Optional[CellValue] = Field(None, description="Quantity (0 allowed)")
    sellerName: Optional[CellValue] = Field(None, description="Seller who registered the client")


class ClientAppendOut(BaseModel):
    """Upstream append response plus the number of rows written."""
    data: Dict[str, Any]
    updatedRows: int
