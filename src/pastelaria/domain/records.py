"""Pydantic models for the three record kinds.

Entities (``Customer``, ``ProductType``, ``Product``) are frozen snapshots
of stored rows. Input models validate caller-supplied fields before they
reach a repository: ``*Input`` for creation, ``*Patch`` for partial
updates (only fields explicitly set are applied).
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

from pastelaria.domain.lifecycle import RecordState, state_of

# Fields a caller can never overwrite.
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at", "deleted_at"})


# --- Entities ---


class Entity(BaseModel):
    """Common record shape: surrogate id, timestamps, soft-delete marker."""

    model_config = {"frozen": True}

    id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def state(self) -> RecordState:
        return state_of(self.deleted_at)


class Customer(Entity):
    name: str
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    address: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    zip_code: str | None = None


class ProductType(Entity):
    name: str


class Product(Entity):
    name: str
    price: Decimal
    product_type_id: int
    photo: str | None = None


# --- Inputs ---


def _reject_null(value: Any) -> Any:
    """Patch fields default to None when omitted; an explicit None is an error."""
    if value is None:
        raise ValueError("may not be null")
    return value


class CustomerInput(BaseModel):
    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=255)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str | None = Field(default=None, max_length=20)
    date_of_birth: date | None = None
    address: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    zip_code: str | None = Field(default=None, max_length=10)


class CustomerPatch(BaseModel):
    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str | None = Field(default=None, max_length=20)
    date_of_birth: date | None = None
    address: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    zip_code: str | None = Field(default=None, max_length=10)

    @field_validator("name", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ProductTypeInput(BaseModel):
    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=255)


class ProductTypePatch(BaseModel):
    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class ProductInput(BaseModel):
    """Product creation fields. ``photo`` is a base64 payload or a stored reference."""

    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    product_type_id: int = Field(gt=0)
    photo: str | None = None


class ProductPatch(BaseModel):
    model_config = {"extra": "forbid", "str_strip_whitespace": True}

    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    product_type_id: int | None = Field(default=None, gt=0)
    photo: str | None = None

    @field_validator("name", "price", "product_type_id", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


def validated_fields(model: type[BaseModel], data: dict[str, Any], *, partial: bool) -> dict[str, Any]:
    """Validate *data* against *model* and return the fields to persist.

    With *partial*, only keys the caller actually supplied are returned.

    Raises:
        pydantic.ValidationError: If *data* violates the model.
    """
    parsed = model.model_validate(data)
    return parsed.model_dump(exclude_unset=partial)
