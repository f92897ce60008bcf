"""Pydantic DTOs for registration and login."""

from pydantic import BaseModel, Field

from bookkeeper.application.schemas.client import EMAIL_PATTERN
from bookkeeper.domain.entities import PlanType


class UserCreate(BaseModel):
    """Schema for registering a new account."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=72)
    business_name: str | None = Field(None, max_length=100)
    plan: PlanType = PlanType.FREE

    model_config = {"extra": "forbid"}


class UserLogin(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1)
