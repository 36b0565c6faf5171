"""
Validation utilities for client and sale payloads.
Checks run in a fixed order and stop at the first missing field,
so the caller always gets one clear message.
"""
from typing import Any
from fastapi import HTTPException

from models.sale import PAID_STATUS
from schemas.client import ClientCreate
from schemas.sale import SaleCreate


def _missing(value: Any) -> bool:
    """Empty text, None and 0 all count as not provided."""
    return not value


def _missing_amount(value: Any) -> bool:
    """Amounts may legitimately be 0; only None and "" count as not provided."""
    return value is None or value == ""


def _require(condition_missing: bool, message: str) -> None:
    if condition_missing:
        raise HTTPException(status_code=400, detail=message)


def validate_client(payload: ClientCreate) -> None:
    """
    Validate a client registration.

    Raises:
        HTTPException: 400 naming the first missing field
    """
    _require(_missing(payload.dni), "DNI is required")
    _require(_missing(payload.clientName), "Client name is required")
    _require(_missing_amount(payload.quantity), "Quantity is required")
    _require(_missing(payload.sellerName), "Seller name is required")


def validate_sale(payload: SaleCreate) -> None:
    """
    Validate a sale before it is written to the sells sheet.

    Rules:
    - sellerName, dni, clientName, paymentStatus must be non-empty
    - quantity and price must be present (0 is allowed)
    - paymentMethod is mandatory only when paymentStatus is "Si Pago"

    Raises:
        HTTPException: 400 naming the first failing field
    """
    _require(_missing(payload.sellerName), "Seller name is required")
    _require(_missing(payload.dni), "DNI is required")
    _require(_missing(payload.clientName), "Client name is required")
    _require(_missing_amount(payload.quantity), "Quantity is required")
    _require(_missing_amount(payload.price), "Price is required")
    _require(_missing(payload.paymentStatus), "Payment status is required")

    if payload.paymentStatus == PAID_STATUS:
        method = payload.paymentMethod
        _require(
            _missing(method) or str(method).strip() == "",
            f'Payment method is required when payment status is "{PAID_STATUS}"',
        )
