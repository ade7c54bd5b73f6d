"""
Information endpoint for API v1.

Returns the service name, version and the MongoDB database and
collection the catalog is bound to.  It reads settings only and never
touches the database.
"""

from typing import Dict

from fastapi import APIRouter

from catalog_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    """Return static information about the running service."""
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "database": settings.database_name,
        "collection": settings.collection_name,
    }
