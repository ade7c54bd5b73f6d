"""
Product endpoints for API v1.

These routes expose CRUD operations for the product catalog.  Each
handler performs exactly one repository call.  Path identifiers must
be 24 hex characters (MongoDB ObjectId); requests with any other id
are rejected before the repository is reached.

Update and delete answer with the storage acknowledgment flag, which
is ``true`` even when no product had the given id.

Prices are exchanged as decimals.  Requests may send a JSON number or
a string; responses always carry the price as a JSON string (for
example ``"9.99"``) so no value passes through a binary float.  A
price read back therefore equals the one sent as a decimal, not as
the same JSON token.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from catalog_api.app.repositories.product_repository import ProductRepository
from catalog_api.app.schemas.product import OBJECT_ID_PATTERN, ProductDto

router = APIRouter()


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository wired into the application at startup."""
    return request.app.state.product_repository


ProductId = Annotated[
    str, Path(pattern=OBJECT_ID_PATTERN, description="24-character hex ObjectId")
]


@router.get("", response_model=List[ProductDto])
async def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> List[ProductDto]:
    """Return every product in the catalog."""
    return await repository.list_products()


@router.get(
    "/{product_id}",
    response_model=ProductDto,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
async def get_product(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
):
    """Retrieve a single product by its id.

    Responds with 404 and an empty body if the product does not exist.
    """
    product = await repository.get_product(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductDto,
    request: Request,
    response: Response,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductDto:
    """Create a product.

    The id is always assigned by the database; an id in the request
    body is ignored.  The ``Location`` header points at the new
    resource.
    """
    product = await repository.create_product(product_in)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return product


@router.put("/{product_id}", response_model=bool)
async def update_product(
    product_in: ProductDto,
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> bool:
    """Replace every field of a product.

    The id in the path takes precedence over any id in the body.
    """
    product = product_in.model_copy(update={"id": product_id})
    return await repository.update_product(product)


@router.delete("/{product_id}", response_model=bool)
async def delete_product(
    product_id: ProductId,
    repository: ProductRepository = Depends(get_product_repository),
) -> bool:
    """Delete a product."""
    return await repository.remove_product(product_id)
