"""
Pydantic schemas for customers.

JSON payloads use camelCase keys (``customerName``, ``createdDate``,
``lastModifiedDate``); the Python attributes are snake_case.  Both
spellings are accepted on input.  Unknown keys are ignored, which
means a client‑supplied ``id`` or timestamp on create is dropped
before it reaches the service layer.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerBase(BaseModel):
    # ``version`` is an opaque stamp; clients may send it as a JSON number.
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class CustomerCreate(CustomerBase):
    """Schema for creating a new customer."""

    customer_name: str = Field(..., alias="customerName", description="Display name of the customer")
    version: Optional[str] = Field(None, description="Opaque version stamp")


class CustomerUpdate(CustomerBase):
    """Schema for a full update (PUT).

    Both mutable fields are replaced; an omitted field clears the
    stored value.  Nothing is required, so an update of an unknown
    customer is reported as not found rather than as invalid input.
    """

    customer_name: Optional[str] = Field(None, alias="customerName")
    version: Optional[str] = None


class CustomerPatch(CustomerBase):
    """Schema for a partial update (PATCH).

    All fields are optional; only values that are present (and, for
    strings, not blank) are applied.
    """

    customer_name: Optional[str] = Field(None, alias="customerName")
    version: Optional[str] = None


class CustomerRead(CustomerBase):
    """Schema for reading a customer."""

    id: uuid.UUID
    customer_name: Optional[str] = Field(None, alias="customerName")
    version: Optional[str] = None
    created_date: datetime = Field(..., alias="createdDate")
    last_modified_date: datetime = Field(..., alias="lastModifiedDate")
