"""
Mapping between guitar names and their canonical addresses.

An address is ``{prefix}/guitars/{name}`` with the name
percent-encoded as a single path segment, so names containing spaces
or slashes still map to exactly one address.  ``name_for`` is the
inverse of ``address_for``.

``.`` and ``..`` have no usable address: URL clients collapse them as
dot segments (encoded or not) before the request is sent.
"""

from urllib.parse import quote, unquote

DOT_SEGMENTS = {".", ".."}


class GuitarAddressing:
    """Bidirectional ``name <-> address`` mapping for one collection."""

    collection = "guitars"

    def __init__(self, prefix: str = ""):
        self.prefix = prefix.rstrip("/")

    @property
    def base(self) -> str:
        """Address of the collection itself."""
        return f"{self.prefix}/{self.collection}"

    def is_addressable(self, name: str) -> bool:
        """Whether a request to ``address_for(name)`` reaches ``name``."""
        return bool(name) and name not in DOT_SEGMENTS

    def address_for(self, name: str) -> str:
        return f"{self.base}/{quote(name, safe='')}"

    def name_for(self, address: str) -> str:
        """Return the name an address points at.

        Raises ``ValueError`` if ``address`` is not an item address of
        this collection.
        """
        head = self.base + "/"
        if not address.startswith(head):
            raise ValueError(f"{address!r} is not a {self.collection} address")
        segment = address[len(head):]
        if not segment or "/" in segment:
            raise ValueError(f"{address!r} is not a {self.collection} address")
        return unquote(segment)
