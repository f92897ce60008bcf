"""Pydantic DTOs for the Product feature."""

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    tax_rate: float = Field(15.0, ge=0, le=100)
    description: str = Field("", max_length=500)
    category: str = Field("", max_length=50)

    model_config = {"extra": "forbid"}


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    price: float | None = Field(None, ge=0)
    tax_rate: float | None = Field(None, ge=0, le=100)
    description: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=50)

    model_config = {"extra": "forbid"}
