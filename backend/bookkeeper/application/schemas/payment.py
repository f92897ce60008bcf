"""Pydantic DTOs for the Payment feature."""

import datetime as dt

from pydantic import BaseModel, Field

from bookkeeper.domain.entities import PaymentMethod


class PaymentCreate(BaseModel):
    """Schema for recording a payment. Invoice number and client are looked up."""

    invoice_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0.01)
    method: PaymentMethod
    date: dt.date
    notes: str | None = Field(None, max_length=500)

    model_config = {"extra": "forbid"}
