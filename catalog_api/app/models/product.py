"""
Persistence model for products.

A ``Product`` mirrors one document of the products collection.  The
identifier is kept as a 24-character hex string in Python and stored
as the native ``_id`` ObjectId; the price is a ``Decimal`` stored as
BSON ``Decimal128`` so monetary values never pass through a binary
float.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from bson import Decimal128, ObjectId


@dataclass
class Product:
    """A stored product record."""

    name: str
    price: Decimal
    category: str
    description: str
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this record.

        ``_id`` is omitted while ``id`` is unset so that MongoDB assigns
        one on insert.
        """
        document: Dict[str, Any] = {}
        if self.id:
            document["_id"] = ObjectId(self.id)
        document.update(
            {
                "name": self.name,
                "price": Decimal128(self.price),
                "category": self.category,
                "description": self.description,
            }
        )
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Product":
        """Build a ``Product`` from a document read from MongoDB."""
        price = document["price"]
        if isinstance(price, Decimal128):
            price = price.to_decimal()
        elif not isinstance(price, Decimal):
            # Documents written by other clients may carry a plain number.
            price = Decimal(str(price))
        return cls(
            id=str(document["_id"]),
            name=document["name"],
            price=price,
            category=document["category"],
            description=document["description"],
        )
