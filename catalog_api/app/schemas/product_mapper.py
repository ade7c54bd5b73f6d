"""Conversion between the ``Product`` persistence model and ``ProductDto``."""

from catalog_api.app.models.product import Product
from catalog_api.app.schemas.product import ProductDto


def to_dto(product: Product) -> ProductDto:
    return ProductDto(
        id=product.id,
        name=product.name,
        price=product.price,
        category=product.category,
        description=product.description,
    )


def to_model(dto: ProductDto) -> Product:
    return Product(
        id=dto.id,
        name=dto.name,
        price=dto.price,
        category=dto.category,
        description=dto.description,
    )
