"""
Durable storage for the guitar collection.

Every backend implements the ``Store`` contract from ``base``: read
the whole list of names, rewrite the whole list of names.  Use
``create_store`` to pick one from the settings.
"""

from .base import Store
from .factory import create_store
from .memory import MemoryStore
from .sqlite import SQLiteStore
from .text_file import TextFileStore

__all__ = ["Store", "MemoryStore", "SQLiteStore", "TextFileStore", "create_store"]
