# services/api/models/client.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .sale import CellValue


@dataclass
class Client:
    """
    One row of the `clients` sheet.
    Column A is the seller; the GET /clients read starts at column B.
    """
    seller_name: CellValue
    dni: CellValue
    client_name: CellValue
    quantity: CellValue

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Client":
        return cls(
            seller_name=payload["sellerName"],
            dni=payload["dni"],
            client_name=payload["clientName"],
            quantity=payload["quantity"],
        )

    def to_row(self) -> List[CellValue]:
        return [self.seller_name, self.dni, self.client_name, self.quantity]
