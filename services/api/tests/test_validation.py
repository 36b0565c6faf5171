"""
Tests for validation functions.

Run with: pytest tests/test_validation.py -v
"""
import pytest
from fastapi import HTTPException

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.validation import validate_client, validate_sale
from schemas.client import ClientCreate
from schemas.sale import SaleCreate


def _valid_sale(**overrides):
    data = {
        "sellerName": "Ana Torres",
        "dni": "45879612",
        "clientName": "Maria Quispe",
        "quantity": 2,
        "price": 35.5,
        "paymentStatus": "Si Pago",
        "paymentMethod": "Yape",
    }
    data.update(overrides)
    return SaleCreate(**data)


def _valid_client(**overrides):
    data = {
        "dni": "45879612",
        "clientName": "Maria Quispe",
        "quantity": 3,
        "sellerName": "Ana Torres",
    }
    data.update(overrides)
    return ClientCreate(**data)


def _detail(fn, payload):
    with pytest.raises(HTTPException) as exc:
        fn(payload)
    assert exc.value.status_code == 400
    return exc.value.detail


class TestValidateClient:
    """Tests for client registration validation."""

    def test_valid_client(self):
        """Complete payload should not raise."""
        validate_client(_valid_client())

    @pytest.mark.parametrize(
        "field,message",
        [
            ("dni", "DNI is required"),
            ("clientName", "Client name is required"),
            ("quantity", "Quantity is required"),
            ("sellerName", "Seller name is required"),
        ],
    )
    def test_missing_field(self, field, message):
        """Each missing field is reported by name."""
        assert _detail(validate_client, _valid_client(**{field: None})) == message
        assert _detail(validate_client, _valid_client(**{field: ""})) == message

    def test_zero_quantity_allowed(self):
        """Quantity 0 is a real value, not a missing one."""
        validate_client(_valid_client(quantity=0))

    def test_first_missing_field_wins(self):
        """With everything missing, dni is checked first."""
        assert _detail(validate_client, ClientCreate()) == "DNI is required"


class TestValidateSale:
    """Tests for sale validation."""

    def test_valid_sale(self):
        """Complete paid sale should not raise."""
        validate_sale(_valid_sale())

    @pytest.mark.parametrize(
        "field,message",
        [
            ("sellerName", "Seller name is required"),
            ("dni", "DNI is required"),
            ("clientName", "Client name is required"),
            ("quantity", "Quantity is required"),
            ("price", "Price is required"),
            ("paymentStatus", "Payment status is required"),
        ],
    )
    def test_missing_field(self, field, message):
        """Each required field is reported by name, for None and empty string."""
        assert _detail(validate_sale, _valid_sale(**{field: None})) == message
        assert _detail(validate_sale, _valid_sale(**{field: ""})) == message

    def test_zero_amounts_allowed(self):
        """quantity and price may be 0 (numeric or text)."""
        validate_sale(_valid_sale(quantity=0, price=0))
        validate_sale(_valid_sale(quantity="0", price="0"))

    def test_zero_dni_rejected(self):
        """A numeric 0 dni counts as missing."""
        assert _detail(validate_sale, _valid_sale(dni=0)) == "DNI is required"

    def test_order_of_checks(self):
        """sellerName is reported before the other fields."""
        assert _detail(validate_sale, SaleCreate()) == "Seller name is required"
        assert _detail(validate_sale, _valid_sale(dni=None, price=None)) == "DNI is required"

    @pytest.mark.parametrize("method", [None, "", "   ", "\t"])
    def test_paid_requires_payment_method(self, method):
        """A paid sale without a usable payment method should raise."""
        detail = _detail(validate_sale, _valid_sale(paymentMethod=method))
        assert detail == 'Payment method is required when payment status is "Si Pago"'

    def test_unpaid_does_not_require_payment_method(self):
        """Unpaid sales never need a payment method."""
        validate_sale(_valid_sale(paymentStatus="No Pago", paymentMethod=None))

    def test_other_status_does_not_require_payment_method(self):
        """Only the exact "Si Pago" literal triggers the payment method check."""
        validate_sale(_valid_sale(paymentStatus="Parcial", paymentMethod=""))
