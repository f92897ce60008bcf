"""Pydantic DTOs for the Client feature."""

from pydantic import BaseModel, Field

from bookkeeper.domain.entities import ClientStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PHONE_PATTERN = r"^(\+27\s?\d{2}\s?\d{3}\s?\d{4})?$"


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Acme Corp"])
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone: str = Field("", pattern=PHONE_PATTERN, examples=["+27 11 123 4567"])
    company: str = Field("", max_length=100)
    address: str | None = Field(None, max_length=500)
    status: ClientStatus = ClientStatus.ACTIVE

    model_config = {"extra": "forbid"}


class ClientUpdate(BaseModel):
    """Schema for patching a client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    company: str | None = Field(None, max_length=100)
    address: str | None = Field(None, max_length=500)
    status: ClientStatus | None = None

    model_config = {"extra": "forbid"}
