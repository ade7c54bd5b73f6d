"""
Data access gateway for the products collection.

``ProductGateway`` is the narrow contract the repository depends on;
``MongoProductGateway`` is the implementation bound at startup.  Tests
substitute an in-memory implementation of the same protocol.

Write operations report MongoDB's acknowledgment flag, not whether a
document matched: replacing or deleting an unknown id is not an error.
Driver errors (``pymongo.errors.PyMongoError``) propagate unchanged.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from catalog_api.app.models.product import Product


class ProductGateway(Protocol):
    """Operations over a single collection of ``Product`` records."""

    async def find_all(self) -> List[Product]:
        ...

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        ...

    async def insert(self, product: Product) -> str:
        ...

    async def replace(self, product_id: str, product: Product) -> bool:
        ...

    async def delete(self, product_id: str) -> bool:
        ...


class MongoProductGateway:
    """``ProductGateway`` backed by a motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def find_all(self) -> List[Product]:
        """Return every stored product in database-native order."""
        documents = await self._collection.find({}).to_list(None)
        return [Product.from_document(doc) for doc in documents]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product with ``product_id`` or ``None``."""
        document = await self._collection.find_one({"_id": ObjectId(product_id)})
        if document is None:
            return None
        return Product.from_document(document)

    async def insert(self, product: Product) -> str:
        """Insert ``product`` and return its id.

        The id assigned by MongoDB is also written back onto
        ``product``.
        """
        result = await self._collection.insert_one(product.to_document())
        product.id = str(result.inserted_id)
        return product.id

    async def replace(self, product_id: str, product: Product) -> bool:
        """Overwrite the document with ``product_id`` by ``product``."""
        document = product.to_document()
        document["_id"] = ObjectId(product_id)
        result = await self._collection.replace_one(
            {"_id": ObjectId(product_id)}, document
        )
        return result.acknowledged

    async def delete(self, product_id: str) -> bool:
        """Delete the document with ``product_id``."""
        result = await self._collection.delete_one({"_id": ObjectId(product_id)})
        return result.acknowledged
