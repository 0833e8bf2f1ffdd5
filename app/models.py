# app/models.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional

# Identifiers and counts are 32-bit signed on the wire.
MAX_INT32 = 2**31 - 1
MIN_INT32 = -(2**31)

PRODUCT_FIELDS = frozenset({"id", "name", "description", "price", "stock", "category", "imageUrl"})


class Product(BaseModel):
    # Request bodies are decoded strictly: unknown fields and type coercion
    # are both rejected.
    model_config = ConfigDict(extra="forbid", strict=True, allow_inf_nan=False)

    id: int = Field(default=0, ge=MIN_INT32, le=MAX_INT32)
    name: str = ""
    description: str = ""
    price: float = 0.0
    stock: int = Field(default=0, ge=MIN_INT32, le=MAX_INT32)
    category: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_fields(cls, data):
        # extra="forbid" lets the attribute name of an aliased field slip through
        if isinstance(data, dict):
            unknown = sorted(set(data) - PRODUCT_FIELDS)
            if unknown:
                raise ValueError(f"unknown field {unknown[0]!r}")
        return data

    @field_validator("*", mode="before")
    @classmethod
    def null_means_missing(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ErrorResponse(BaseModel):
    code: int
    message: str
