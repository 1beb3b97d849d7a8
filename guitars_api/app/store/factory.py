"""
Factory function to create a store based on configuration.
"""
from typing import Optional

from ..core.config import Settings, settings as default_settings
from .base import Store
from .memory import MemoryStore
from .sqlite import SQLiteStore
from .text_file import TextFileStore


def create_store(settings: Optional[Settings] = None) -> Store:
    """Create a store instance from ``settings.storage_backend``.

    Backends:
        ``file``: ``TextFileStore`` at ``store_path`` joined by ``store_delimiter``
        ``sqlite``: ``SQLiteStore`` at ``database_url``
        ``memory``: ``MemoryStore``, lost on restart

    Raises:
        ValueError: for any other backend name.
    """
    settings = settings or default_settings
    backend = settings.storage_backend.lower()

    if backend == "file":
        return TextFileStore(settings.store_path, delimiter=settings.store_delimiter)
    if backend == "sqlite":
        return SQLiteStore(settings.database_url)
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
