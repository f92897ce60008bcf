"""Unit tests for input validation schemas."""

from datetime import date

import pytest
from pydantic import ValidationError

from bookkeeper.application.schemas import (
    ClientCreate,
    InvoiceCreate,
    InvoiceItemSchema,
    PaymentCreate,
    ProductCreate,
)


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "quantity": 1},
        {"name": "x", "quantity": 0},
        {"name": "x", "price": -1},
        {"name": "x", "tax_rate": -1},
        {"name": "x", "tax_rate": 101},
    ],
)
def test_invalid_line_items(fields):
    with pytest.raises(ValidationError):
        InvoiceItemSchema(**fields)


def test_line_item_defaults():
    item = InvoiceItemSchema(name="Row")
    assert (item.quantity, item.price, item.tax_rate) == (1, 0.0, 15.0)


def test_invoice_needs_items_and_sane_dates():
    with pytest.raises(ValidationError):
        InvoiceCreate(client_id="c1", items=[], date=date(2024, 1, 1), due_date=date(2024, 2, 1))
    with pytest.raises(ValidationError):
        InvoiceCreate(
            client_id="c1",
            items=[InvoiceItemSchema(name="x")],
            date=date(2024, 2, 1),
            due_date=date(2024, 1, 1),
        )


def test_client_phone_format():
    ClientCreate(name="Acme", email="a@acme.com", phone="+27 11 123 4567")
    ClientCreate(name="Acme", email="a@acme.com", phone="")
    with pytest.raises(ValidationError):
        ClientCreate(name="Acme", email="a@acme.com", phone="555-1234")
    with pytest.raises(ValidationError):
        ClientCreate(name="Acme", email="not-an-email")


def test_product_and_payment_bounds():
    with pytest.raises(ValidationError):
        ProductCreate(name="x", price=10, tax_rate=150)
    with pytest.raises(ValidationError):
        PaymentCreate(invoice_id="i1", amount=0, method="Cash", date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        PaymentCreate(invoice_id="i1", amount=10, method="Bitcoin", date=date(2024, 1, 1))
