"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box with a text file store next to the working
directory.  In a production deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Guitars API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the ``/guitars`` routes are mounted.  It is also
    # the prefix of every canonical address handed out to clients, so
    # changing it never breaks the browser script: links always come
    # from the server.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Which ``Store`` backend holds the collection: ``file`` (a single
    # delimiter-joined text blob), ``sqlite`` or ``memory``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "file")
    store_path: str = os.getenv("STORE_PATH", "guitars.txt")
    store_delimiter: str = os.getenv("STORE_DELIMITER", ",")

    # Path for the SQLite database used by the ``sqlite`` backend.  A
    # relative path is resolved against the current working directory.
    database_url: str = os.getenv("DATABASE_URL", "guitars.db")

    name_max_length: int = int(os.getenv("NAME_MAX_LENGTH", "100"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
