"""Unit tests for the client, product and template services."""

import pytest

from bookkeeper.application.schemas import (
    ClientCreate,
    ClientUpdate,
    ProductCreate,
    ProductUpdate,
    TemplateCreate,
    TemplateUpdate,
)
from bookkeeper.domain.entities import ClientStatus
from bookkeeper.domain.exceptions import EntityNotFoundError


def test_client_crud(services):
    client = services.clients.create_client(
        "u1", ClientCreate(name="Acme", email="a@acme.com", phone="+27 11 123 4567")
    )
    assert services.clients.get_client(client.id) == client

    updated = services.clients.update_client(client.id, ClientUpdate(company="Acme Corporation"))
    assert updated.company == "Acme Corporation"
    assert updated.email == "a@acme.com"

    assert services.clients.delete_client(client.id) is True
    with pytest.raises(EntityNotFoundError):
        services.clients.get_client(client.id)


def test_list_clients_filters(services):
    services.clients.create_client("u1", ClientCreate(name="Acme", email="a@acme.com"))
    services.clients.create_client(
        "u1", ClientCreate(name="Dormant", email="d@x.io", status=ClientStatus.INACTIVE)
    )
    services.clients.create_client("u2", ClientCreate(name="Other", email="o@x.io"))

    assert [c.name for c in services.clients.list_clients("u1")] == ["Acme", "Dormant"]
    assert [c.name for c in services.clients.list_clients("u1", status=ClientStatus.ACTIVE)] == ["Acme"]
    assert [c.name for c in services.clients.list_clients("u1", search="x.io")] == ["Dormant"]


def test_update_missing_client(services):
    with pytest.raises(EntityNotFoundError):
        services.clients.update_client("missing", ClientUpdate(name="X"))


def test_product_crud(services):
    product = services.products.create_product(
        "u1", ProductCreate(name="Consulting", price=2500, category="Services")
    )
    assert product.tax_rate == 15

    updated = services.products.update_product(product.id, ProductUpdate(price=3000))
    assert updated.price == 3000
    assert services.products.list_products("u1", category="Services") == [updated]
    assert services.products.list_products("u1", category="Training") == []

    services.products.delete_product(product.id)
    with pytest.raises(EntityNotFoundError):
        services.products.delete_product(product.id)


def test_single_default_template(services):
    first = services.templates.create_template("u1", TemplateCreate(name="Standard", is_default=True))
    second = services.templates.create_template("u1", TemplateCreate(name="Modern"))
    assert services.templates.get_default("u1") == first

    services.templates.set_default(second.id)

    defaults = [t for t in services.templates.list_templates("u1") if t.is_default]
    assert [t.id for t in defaults] == [second.id]


def test_template_update_and_delete(services):
    template = services.templates.create_template("u1", TemplateCreate(name="Minimal"))
    updated = services.templates.update_template(template.id, TemplateUpdate(description="Bare"))
    assert updated.description == "Bare"
    assert services.templates.delete_template(template.id) is True
    assert services.templates.list_templates("u1") == []
