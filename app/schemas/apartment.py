"""Apartment Pydantic schemas for request/response validation.

Write requests arrive wrapped in an ``{"apartment": {...}}`` envelope. The
inner schemas are the allow-list: only the fields declared here are read
from the body, anything else is dropped.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Largest value a SQL INTEGER column holds
MAX_INTEGER = 2**63 - 1

APARTMENT_FIELDS = (
    "street",
    "city",
    "state",
    "manager",
    "email",
    "price",
    "bedrooms",
    "bathrooms",
    "pets",
    "user_id",
)


class ApartmentCreate(BaseModel):
    """Permitted fields for creating an apartment.

    ``user_id`` is accepted for compatibility but the owner is always the
    authenticated user.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    manager: str = Field(min_length=1)
    email: EmailStr
    price: int = Field(ge=0, le=MAX_INTEGER)
    bedrooms: int = Field(ge=0, le=MAX_INTEGER)
    bathrooms: int = Field(ge=0, le=MAX_INTEGER)
    pets: bool
    user_id: int | None = Field(default=None, ge=1, le=MAX_INTEGER)


class ApartmentUpdate(BaseModel):
    """Permitted fields for updating an apartment. All fields are optional."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    street: str | None = Field(default=None, min_length=1)
    city: str | None = Field(default=None, min_length=1)
    state: str | None = Field(default=None, min_length=1)
    manager: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    price: int | None = Field(default=None, ge=0, le=MAX_INTEGER)
    bedrooms: int | None = Field(default=None, ge=0, le=MAX_INTEGER)
    bathrooms: int | None = Field(default=None, ge=0, le=MAX_INTEGER)
    pets: bool | None = None
    user_id: int | None = Field(default=None, ge=1, le=MAX_INTEGER)

    @field_validator(*APARTMENT_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v):
        """A supplied field may not be null; omit it to leave it unchanged."""
        if v is None:
            raise ValueError("can't be blank")
        return v


class ApartmentCreateRequest(BaseModel):
    """Request body for creating an apartment."""

    apartment: ApartmentCreate

    @field_validator("apartment", mode="before")
    @classmethod
    def require_apartment(cls, v):
        """An empty envelope is treated as missing."""
        if v == {}:
            raise ValueError("param is missing or the value is empty")
        return v


class ApartmentUpdateRequest(BaseModel):
    """Request body for updating an apartment."""

    apartment: ApartmentUpdate

    @field_validator("apartment", mode="before")
    @classmethod
    def require_apartment(cls, v):
        """An empty envelope is treated as missing."""
        if v == {}:
            raise ValueError("param is missing or the value is empty")
        return v


class ApartmentResponse(BaseModel):
    """Schema for apartment response."""

    id: int
    street: str
    city: str
    state: str
    manager: str
    email: str
    price: int
    bedrooms: int
    bathrooms: int
    pets: bool
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
