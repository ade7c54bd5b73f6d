"""
MongoDB integration.

This module owns the single ``AsyncIOMotorClient`` used by the
service.  ``CatalogContext`` opens the client on application startup,
exposes the products collection and closes the client on shutdown.
Pooling, timeouts and reconnection are left to the driver; the only
knob surfaced here is the server selection timeout from the settings.
"""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from .config import Settings

logger = logging.getLogger(__name__)


class CatalogContext:
    """Holds the MongoDB client and the products collection."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    def connect(self) -> None:
        """Create the client.

        Motor connects lazily, so this does no network I/O; an
        unreachable server only surfaces on the first operation.
        """
        if self._client is not None:
            return
        self._client = AsyncIOMotorClient(
            self._settings.database_url,
            serverSelectionTimeoutMS=self._settings.database_timeout_ms,
        )
        self._database = self._client[self._settings.database_name]
        logger.info(
            "MongoDB client created for database %s", self._settings.database_name
        )

    def close(self) -> None:
        """Close the client and forget the database handle."""
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database = None
        logger.info("MongoDB client closed")

    @property
    def products(self) -> AsyncIOMotorCollection:
        """The collection storing product documents."""
        if self._database is None:
            raise RuntimeError("CatalogContext not connected. Call connect() first.")
        return self._database[self._settings.collection_name]
