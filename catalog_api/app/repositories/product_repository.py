"""
Repository for products.

``ProductRepository`` presents DTO-level CRUD to the API layer by
applying ``product_mapper`` around each gateway call.  Every method
is a single gateway operation; nothing is cached between calls and
database errors are not caught here.
"""

import logging
from typing import List, Optional

from catalog_api.app.repositories.gateway import ProductGateway
from catalog_api.app.schemas import product_mapper
from catalog_api.app.schemas.product import ProductDto

logger = logging.getLogger(__name__)


class ProductRepository:
    """DTO-level CRUD over a ``ProductGateway``."""

    def __init__(self, gateway: ProductGateway) -> None:
        if gateway is None:
            raise ValueError("gateway is required")
        self._gateway = gateway

    async def list_products(self) -> List[ProductDto]:
        """Return all products; the list may be empty."""
        products = await self._gateway.find_all()
        return [product_mapper.to_dto(product) for product in products]

    async def get_product(self, product_id: str) -> Optional[ProductDto]:
        """Return a single product, or ``None`` if it does not exist."""
        product = await self._gateway.find_by_id(product_id)
        if product is None:
            return None
        return product_mapper.to_dto(product)

    async def create_product(self, dto: ProductDto) -> ProductDto:
        """Insert a new product and return it with the assigned id.

        Any id carried by ``dto`` is ignored; MongoDB always assigns one.
        """
        product = product_mapper.to_model(dto)
        product.id = None
        product_id = await self._gateway.insert(product)
        logger.info("Created product %s", product_id)
        return product_mapper.to_dto(product)

    async def update_product(self, dto: ProductDto) -> bool:
        """Replace the product identified by ``dto.id``.

        Returns the storage acknowledgment, which is ``True`` even when
        no document carried that id.
        """
        if not dto.id:
            raise ValueError("update_product requires a DTO carrying the target id")
        product = product_mapper.to_model(dto)
        acknowledged = await self._gateway.replace(dto.id, product)
        logger.info("Replaced product %s (acknowledged=%s)", dto.id, acknowledged)
        return acknowledged

    async def remove_product(self, product_id: str) -> bool:
        """Delete a product and return the storage acknowledgment."""
        acknowledged = await self._gateway.delete(product_id)
        logger.info("Deleted product %s (acknowledged=%s)", product_id, acknowledged)
        return acknowledged
