"""
Text file storage backend.

The whole collection lives in one UTF-8 file as a delimiter-joined
blob, e.g. ``Les Paul,SG,Stratocaster``.  Whitespace-only entries
(left behind by a trailing delimiter or a hand edit) are dropped on
read.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..core.exceptions import StoreUnavailable
from .base import Store

logger = logging.getLogger(__name__)


class TextFileStore(Store):
    """Stores the names as one delimiter-joined line of text."""

    def __init__(self, path: Union[str, Path], delimiter: str = ","):
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self.path = Path(path)
        self.delimiter = delimiter

    def read_all(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read %s: %s", self.path, exc)
            raise StoreUnavailable(f"Could not read {self.path}", detail=str(exc)) from exc
        return [entry for entry in content.split(self.delimiter) if entry.strip()]

    def write_all(self, names: Iterable[str]) -> None:
        content = self.delimiter.join(names)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", self.path, exc)
            raise StoreUnavailable(f"Could not write {self.path}", detail=str(exc)) from exc
        logger.debug("Wrote %s bytes to %s", len(content), self.path)

    def can_hold(self, name: str) -> bool:
        return super().can_hold(name) and self.delimiter not in name
