"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn catalog_api.app.main:app --reload

The MongoDB client is created when the application starts and closed
when it stops.  Passing a ``gateway`` to ``create_app`` wires the
repository to it instead, which is how the tests run without a
database.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import CatalogContext
from .core.logging_config import setup_logging
from .repositories.gateway import MongoProductGateway, ProductGateway
from .repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the MongoDB client unless a repository is already wired."""
    context: Optional[CatalogContext] = None
    if getattr(app.state, "product_repository", None) is None:
        context = CatalogContext(settings)
        context.connect()
        app.state.product_repository = ProductRepository(
            MongoProductGateway(context.products)
        )
    try:
        yield
    finally:
        if context is not None:
            context.close()
            app.state.product_repository = None


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed ids and bodies with 400 instead of 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Log a storage failure and answer with a generic 500."""
    logger.error(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def create_app(gateway: Optional[ProductGateway] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    gateway : Optional[ProductGateway]
        Data access gateway to bind the repository to.  When omitted
        the repository is bound to MongoDB on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    if gateway is not None:
        app.state.product_repository = ProductRepository(gateway)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
