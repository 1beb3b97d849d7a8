"""
In-memory storage backend (for testing and throwaway runs).
"""
from typing import Iterable, List, Optional

from .base import Store


class MemoryStore(Store):
    """Keeps the names in a process-local list."""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names: List[str] = [name for name in names or () if name.strip()]

    def read_all(self) -> List[str]:
        return list(self._names)

    def write_all(self, names: Iterable[str]) -> None:
        self._names = [name for name in names if name.strip()]
