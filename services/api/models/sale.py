# services/api/models/sale.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

# Cells arrive as JSON numbers or strings and are echoed as given
CellValue = Union[int, float, str]

PAID_STATUS = "Si Pago"
UNPAID_STATUS = "No Pago"

# Written to the sheet instead of an empty cell
PLACEHOLDER = "none"


@dataclass
class Sale:
    """
    One row of the `sells` sheet (columns A..I), defaults already applied.
    """
    seller_name: CellValue
    dni: CellValue
    client_name: CellValue
    quantity: CellValue
    price: CellValue
    payment_status: CellValue
    payment_method: CellValue
    timestamp: CellValue
    remark_text: CellValue

    @classmethod
    def from_api(cls, payload: Dict[str, Any], server_timestamp: str) -> "Sale":
        """
        Build from a validated request payload (camelCase keys).

        - paymentMethod is forced to the placeholder for unpaid sales
        - timestamp falls back to the server-generated one
        - remarkText falls back to the placeholder
        """
        status = payload["paymentStatus"]
        if status == UNPAID_STATUS:
            method = PLACEHOLDER
        else:
            method = payload.get("paymentMethod") or PLACEHOLDER

        return cls(
            seller_name=payload["sellerName"],
            dni=payload["dni"],
            client_name=payload["clientName"],
            quantity=payload["quantity"],
            price=payload["price"],
            payment_status=status,
            payment_method=method,
            timestamp=payload.get("timestamp") or server_timestamp,
            remark_text=payload.get("remarkText") or PLACEHOLDER,
        )

    def to_row(self) -> List[CellValue]:
        return [
            self.seller_name,
            self.dni,
            self.client_name,
            self.quantity,
            self.price,
            self.payment_status,
            self.payment_method,
            self.timestamp,
            self.remark_text,
        ]

    def to_api(self) -> Dict[str, Any]:
        return {
            "sellerName": self.seller_name,
            "dni": self.dni,
            "clientName": self.client_name,
            "quantity": self.quantity,
            "price": self.price,
            "paymentStatus": self.payment_status,
            "paymentMethod": self.payment_method,
            "timestamp": self.timestamp,
            "remarkText": self.remark_text,
        }
