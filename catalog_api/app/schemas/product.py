"""
Pydantic schema for the product transfer object.

``ProductDto`` is the JSON shape exchanged over the API for both
requests and responses.  Clients leave ``id`` empty when creating a
product; MongoDB assigns it.  ``price`` is a ``Decimal`` and is
rendered as a JSON string (``"9.99"``) so that monetary values are
never rounded through a binary float.  It must fit a BSON
``Decimal128``: at most 34 significant digits and an exponent within
the type's range.
"""

from decimal import Decimal, DecimalException
from typing import Optional

from bson import Decimal128
from pydantic import BaseModel, Field, field_validator

# Identifiers follow the MongoDB ObjectId convention.
OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"


class ProductDto(BaseModel):
    """Schema for reading and writing a product."""

    id: Optional[str] = Field(
        None, pattern=OBJECT_ID_PATTERN, examples=["65f1c0a4e4b0a1b2c3d4e5f6"]
    )
    name: str = Field(..., examples=["Widget"])
    price: Decimal = Field(..., examples=["9.99"])
    category: str = Field(..., examples=["Tools"])
    description: str = Field(..., examples=["A widget"])

    model_config = {
        "from_attributes": True,
    }

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float_text(cls, v):
        # JSON numbers arrive as floats; go through their shortest text
        # form so 9.99 becomes Decimal("9.99"), not its binary expansion.
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("price")
    @classmethod
    def price_fits_decimal128(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("price must be a finite number")
        try:
            Decimal128(v)
        except DecimalException as exc:
            raise ValueError(
                "price must have at most 34 significant digits and a representable exponent"
            ) from exc
        return v
