"""
Base storage interface for the guitar collection.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List


class Store(ABC):
    """Full-read / full-rewrite persistence for an ordered list of names.

    Implementations raise ``StoreUnavailable`` when the medium cannot be
    read or written.  A medium that does not exist yet reads as empty,
    and blank entries never come back from ``read_all``.
    """

    @abstractmethod
    def read_all(self) -> List[str]:
        """Return every stored name in insertion order."""

    @abstractmethod
    def write_all(self, names: Iterable[str]) -> None:
        """Replace the stored list with ``names``."""

    def can_hold(self, name: str) -> bool:
        """Whether ``name`` survives a ``write_all``/``read_all`` round trip."""
        return bool(name.strip())
