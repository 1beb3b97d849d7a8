"""
Service layer for guitars.

``GuitarService`` owns the collection: an ordered list of names that
mirrors the store and is rebuilt from it by ``load``.  Every mutation
builds the new list, rewrites the store and only then replaces the
cached list, so a ``StoreUnavailable`` leaves both sides as they were.

Names are not unique.  An address resolves to the first entry with
that name, which is the one ``delete`` removes.

A failed ``load`` leaves the service unloaded rather than empty; every
operation retries the read first and fails with ``StoreUnavailable``
until the store can be read.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.guitar import GuitarRead
from ..store.base import Store
from .addressing import GuitarAddressing

logger = logging.getLogger(__name__)


def is_acceptable(name_present: bool, request_valid: bool) -> bool:
    """Create policy: accept only a present name in a valid request.

    Neither the name check nor the request-level validation alone is
    enough; any combination other than both passing is rejected.
    """
    return name_present and request_valid


class GuitarService:
    """Service class for managing the guitar collection."""

    def __init__(self, store: Store, addressing: Optional[GuitarAddressing] = None):
        self.store = store
        self.addressing = addressing or GuitarAddressing()
        self._names: List[str] = []
        self.loaded = False

    async def load(self) -> None:
        """Rebuild the in-memory collection from the store."""
        self._names = self.store.read_all()
        self.loaded = True
        logger.info("Loaded %s guitars", len(self._names))

    async def _ensure_loaded(self) -> None:
        if not self.loaded:
            await self.load()

    async def list(self) -> List[GuitarRead]:
        """Return the collection in display order with canonical links."""
        await self._ensure_loaded()
        return [self._to_read(name) for name in self._names]

    async def get(self, address: str) -> GuitarRead:
        """Return the guitar living at ``address``.

        Raises ``NotFoundError`` if no entry matches.
        """
        await self._ensure_loaded()
        name = self._resolve(address)
        if name not in self._names:
            raise NotFoundError("Guitar", address)
        return self._to_read(name)

    async def create(self, name: Optional[str], request_valid: bool = True) -> GuitarRead:
        """Append a guitar and persist the collection.

        ``request_valid`` reports whether the request passed its own
        validation (schema parsing at the HTTP layer).  Raises
        ``ValidationError`` carrying the rejected name when the policy
        refuses it, and ``StoreUnavailable`` when persisting fails.
        """
        await self._ensure_loaded()
        name = (name or "").strip()
        if not is_acceptable(bool(name), request_valid):
            if not request_valid:
                raise ValidationError("Guitar request is invalid", name=name)
            raise ValidationError("Guitar name is required", name=name)
        if not self.addressing.is_addressable(name):
            raise ValidationError("Guitar name cannot be used in an address", name=name)
        if not self.store.can_hold(name):
            raise ValidationError(
                "Guitar name contains characters the store cannot keep",
                name=name,
            )

        names = self._names + [name]
        self.store.write_all(names)
        self._names = names
        logger.info("Created guitar %r", name)
        return self._to_read(name)

    async def delete(self, address: str) -> None:
        """Remove the first guitar living at ``address`` and persist.

        Raises ``NotFoundError`` if no entry matches, leaving the
        collection untouched.
        """
        await self._ensure_loaded()
        name = self._resolve(address)
        try:
            index = self._names.index(name)
        except ValueError:
            raise NotFoundError("Guitar", address) from None

        names = self._names[:index] + self._names[index + 1:]
        self.store.write_all(names)
        self._names = names
        logger.info("Deleted guitar %r", name)

    def _resolve(self, address: str) -> str:
        try:
            return self.addressing.name_for(address)
        except ValueError:
            raise NotFoundError("Guitar", address) from None

    def _to_read(self, name: str) -> GuitarRead:
        return GuitarRead(name=name, link=self.addressing.address_for(name))
