"""
Persistence models.

These classes mirror the documents stored in MongoDB.  They are kept
apart from the Pydantic schemas in ``schemas`` so that the storage
shape can evolve independently of the API representation.
"""

from .product import Product  # noqa: F401
