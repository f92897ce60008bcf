"""Pydantic DTOs (Data Transfer Objects) for invoices and line items."""

import datetime as dt

from pydantic import BaseModel, Field, model_validator

from bookkeeper.domain.entities import InvoiceStatus


class InvoiceItemSchema(BaseModel):
    """One line item as entered on the invoice form."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Web Development"])
    quantity: int = Field(1, ge=1)
    price: float = Field(0.0, ge=0)
    tax_rate: float = Field(15.0, ge=0, le=100)
    product_id: str | None = None
    description: str | None = None


class InvoiceCreate(BaseModel):
    """Schema for creating a new invoice. Totals are derived, never supplied."""

    client_id: str = Field(..., min_length=1)
    items: list[InvoiceItemSchema] = Field(..., min_length=1)
    date: dt.date
    due_date: dt.date
    status: InvoiceStatus = InvoiceStatus.DRAFT
    template_id: str | None = None
    notes: str | None = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _due_after_issue(self) -> "InvoiceCreate":
        if self.due_date < self.date:
            raise ValueError("Due date must not be before the invoice date")
        return self


class InvoiceUpdate(BaseModel):
    """Schema for patching an invoice — all fields optional.

    ``id``, ``created_at`` and the derived totals are not patchable.
    """

    client_id: str | None = Field(None, min_length=1)
    items: list[InvoiceItemSchema] | None = Field(None, min_length=1)
    date: dt.date | None = None
    due_date: dt.date | None = None
    status: InvoiceStatus | None = None
    template_id: str | None = None
    notes: str | None = None

    model_config = {"extra": "forbid"}
