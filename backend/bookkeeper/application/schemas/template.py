"""Pydantic DTOs for invoice templates."""

from pydantic import BaseModel, Field


class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    is_default: bool = False

    model_config = {"extra": "forbid"}


class TemplateUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)

    model_config = {"extra": "forbid"}
