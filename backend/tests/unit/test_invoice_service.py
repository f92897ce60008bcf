"""Unit tests for the InvoiceService."""

from datetime import date

import pytest
from pydantic import ValidationError

from bookkeeper.application.schemas import (
    ClientCreate,
    InvoiceCreate,
    InvoiceItemSchema,
    InvoiceUpdate,
)
from bookkeeper.domain.entities import InvoiceStatus
from bookkeeper.domain.exceptions import EntityNotFoundError


@pytest.fixture
def client(services):
    return services.clients.create_client(
        "u1", ClientCreate(name="Acme Corp", email="billing@acme.com")
    )


def _invoice(client_id: str, *items: InvoiceItemSchema) -> InvoiceCreate:
    return InvoiceCreate(
        client_id=client_id,
        items=list(items) or [InvoiceItemSchema(name="Web Development", quantity=2, price=15000, tax_rate=15)],
        date=date(2024, 1, 15),
        due_date=date(2024, 2, 15),
    )


def test_create_invoice_derives_totals(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))

    assert invoice.subtotal == 30000
    assert invoice.tax == 4500
    assert invoice.total == 34500
    assert invoice.status == InvoiceStatus.DRAFT
    assert invoice.number == "INV-001"


def test_create_invoice_snapshots_client(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))
    assert invoice.client_name == "Acme Corp"
    assert invoice.client_email == "billing@acme.com"


def test_create_invoice_unknown_client(services):
    with pytest.raises(EntityNotFoundError):
        services.invoices.create_invoice("u1", _invoice("ghost"))


def test_numbers_increase_per_user(services, client):
    first = services.invoices.create_invoice("u1", _invoice(client.id))
    second = services.invoices.create_invoice("u1", _invoice(client.id))

    assert (first.number, second.number) == ("INV-001", "INV-002")
    assert services.invoices.next_number("u1") == "INV-003"
    assert services.invoices.next_number("u2") == "INV-001"


def test_update_items_recomputes_totals(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))
    updated = services.invoices.update_invoice(
        invoice.id,
        InvoiceUpdate(items=[
            InvoiceItemSchema(name="Consulting", quantity=1, price=1500, tax_rate=15),
            InvoiceItemSchema(name="Training", quantity=2, price=800, tax_rate=15),
        ]),
    )

    assert updated.subtotal == pytest.approx(3100)
    assert updated.tax == pytest.approx(465)
    assert updated.total == pytest.approx(3565)
    assert updated.id == invoice.id
    assert updated.created_at == invoice.created_at


def test_update_without_items_keeps_totals(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))
    updated = services.invoices.update_invoice(invoice.id, InvoiceUpdate(notes="Thanks!"))

    assert updated.notes == "Thanks!"
    assert updated.total == invoice.total


def test_totals_cannot_be_patched():
    with pytest.raises(ValidationError):
        InvoiceUpdate(total=1)
    with pytest.raises(ValidationError):
        InvoiceUpdate(id="other")


def test_set_status(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))
    paid = services.invoices.set_status(invoice.id, InvoiceStatus.PAID)
    assert paid.status == InvoiceStatus.PAID


def test_list_invoices_filters(services, client):
    draft = services.invoices.create_invoice("u1", _invoice(client.id))
    pending = services.invoices.create_invoice("u1", _invoice(client.id))
    services.invoices.set_status(pending.id, InvoiceStatus.PENDING)

    assert [i.id for i in services.invoices.list_invoices("u1", status=InvoiceStatus.DRAFT)] == [draft.id]
    assert len(services.invoices.list_invoices("u1", client_id=client.id)) == 2
    assert services.invoices.list_invoices("u2") == []


def test_delete_invoice(services, client):
    invoice = services.invoices.create_invoice("u1", _invoice(client.id))
    assert services.invoices.delete_invoice(invoice.id) is True
    with pytest.raises(EntityNotFoundError):
        services.invoices.get_invoice(invoice.id)
    with pytest.raises(EntityNotFoundError):
        services.invoices.delete_invoice(invoice.id)


def test_update_missing_invoice(services):
    with pytest.raises(EntityNotFoundError):
        services.invoices.update_invoice("missing", InvoiceUpdate(notes="x"))


def test_item_prefilled_from_product(services, client):
    from bookkeeper.application.schemas import ProductCreate

    product = services.products.create_product(
        "u1", ProductCreate(name="Consulting", price=2500, tax_rate=15)
    )
    item = services.products.to_invoice_item(product.id, quantity=6)
    invoice = services.invoices.create_invoice("u1", _invoice(client.id, item))

    assert invoice.items[0].product_id == product.id
    assert invoice.total == pytest.approx(17250)
