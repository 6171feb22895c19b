"""
Pydantic models for product data.

``ProductWrite`` is the request body for both create and update: any
``id`` in the body is ignored because the store assigns ids on create
and the path decides the id on update.  ``ProductRead`` is the
response shape, ``{"id", "name", "price"}`` in that order.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ProductWrite(BaseModel):
    """Request body for ``POST /products`` and ``PUT /products/{id}``.

    Types are checked strictly: ``"10"`` is not a price and ``5`` is
    not a name.  Missing or ``null`` fields take their zero values and
    unknown fields are dropped.
    """

    name: str = Field("", examples=["Keyboard"])
    price: int = Field(0, examples=[4999])

    model_config = {
        "strict": True,
        "extra": "ignore",
    }

    @field_validator("name", "price", mode="before")
    @classmethod
    def null_is_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    name: str
    price: int

    model_config = {
        "from_attributes": True,
    }
