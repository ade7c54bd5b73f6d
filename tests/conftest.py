"""Shared fixtures: an in-memory gateway and an app wired to it."""

from dataclasses import replace
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from catalog_api.app.main import create_app
from catalog_api.app.models.product import Product
from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.schemas.product import ProductDto


class InMemoryProductGateway:
    """``ProductGateway`` keeping products in a dict, in insertion order.

    Writes still build the MongoDB document so that values the real
    collection would refuse fail here as well.
    """

    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}

    async def find_all(self) -> List[Product]:
        return [replace(product) for product in self.products.values()]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        product = self.products.get(product_id)
        return replace(product) if product is not None else None

    async def insert(self, product: Product) -> str:
        product.to_document()
        if not product.id:
            product.id = str(ObjectId())
        self.products[product.id] = replace(product)
        return product.id

    async def replace(self, product_id: str, product: Product) -> bool:
        product.to_document()
        if product_id in self.products:
            self.products[product_id] = replace(product, id=product_id)
        return True

    async def delete(self, product_id: str) -> bool:
        self.products.pop(product_id, None)
        return True


class UnavailableProductGateway:
    """``ProductGateway`` whose every call fails like an unreachable server."""

    async def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("No servers found yet")

    find_all = _fail
    find_by_id = _fail
    insert = _fail
    replace = _fail
    delete = _fail


@pytest.fixture
def gateway():
    return InMemoryProductGateway()


@pytest.fixture
def repository(gateway):
    return ProductRepository(gateway)


@pytest.fixture
def widget_dto():
    return ProductDto(
        id=None,
        name="Widget",
        price=Decimal("9.99"),
        category="Tools",
        description="A widget",
    )


@pytest.fixture
def client(gateway):
    app = create_app(gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unavailable_gateway():
    return UnavailableProductGateway()


@pytest.fixture
def failing_client(unavailable_gateway):
    app = create_app(gateway=unavailable_gateway)
    with TestClient(app) as test_client:
        yield test_client
