"""
Top‑level router for version 1 of the API.

When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import info, products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(info.router, prefix="/info", tags=["info"])
