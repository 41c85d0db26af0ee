from pydantic import BaseModel, ConfigDict
from typing import Optional


class OwnerBase(BaseModel):
    """Shared fields for owner schemas.

    Values are accepted loosely here; the owner rule list decides what
    may be stored.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str | int] = None
    email: Optional[str] = None


class OwnerCreate(OwnerBase):
    """Schema for creating new owner."""

    active: bool = True


class OwnerUpdate(OwnerBase):
    """Schema for updating owner (all fields optional)."""

    active: Optional[bool] = None


class OwnerOut(BaseModel):
    """Schema for returning an owner with ID."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: str
    email: str
    active: Optional[bool] = None
