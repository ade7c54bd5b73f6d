"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local MongoDB without any setup.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the product routes are mounted.  Empty by
    # default so that the catalog lives at ``/products``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # MongoDB connection string, database and collection holding the
    # product documents.
    database_url: str = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
    database_name: str = os.getenv("DATABASE_NAME", "CatalogDb")
    collection_name: str = os.getenv("COLLECTION_NAME", "Products")

    # How long the driver waits for a reachable server before an
    # operation fails.  Passed through as ``serverSelectionTimeoutMS``.
    database_timeout_ms: int = int(os.getenv("DATABASE_TIMEOUT_MS", "5000"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
