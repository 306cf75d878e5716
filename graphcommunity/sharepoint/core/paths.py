"""Resource path composition.

Architecture:
    A resource URL is built by appending one segment per navigation step
    (site → web → list → item → sub-resource). ``ResourceUrl`` is a ``str``
    subclass so it can be handed to any HTTP library unchanged, while the
    append helpers always return a new value.

Segment kinds:
    - literal:   ``web``                     -> ``.../web``
    - key:       ``lists`` + GUID            -> ``.../lists('6f09...')``
    - key:       ``items`` + 7               -> ``.../items(7)``
    - by title:  ``lists`` + ``Events``      -> ``.../lists/getByTitle('Events')``

String literals are OData-escaped (single quotes doubled) and then
percent-encoded as UTF-8.
"""

from __future__ import annotations

from urllib.parse import quote

from .identifiers import GuidIdentifier, Identifier, NameIdentifier

# Characters left as-is inside a quoted OData literal
_LITERAL_SAFE = "'!$&()*+,;=:@"


class ResourceUrl(str):
    """Immutable REST resource URL."""

    __slots__ = ()

    def segment(self, token: str) -> ResourceUrl:
        return append_segment(self, token)

    def key(self, resource: str, identifier: Identifier | int) -> ResourceUrl:
        return append_key(self, resource, identifier)

    def by_title(self, resource: str, name: str) -> ResourceUrl:
        return append_by_title(self, resource, name)

    def member(self, identifier: Identifier | int) -> ResourceUrl:
        return address_member(self, identifier)


def escape_odata_literal(value: str) -> str:
    """Escape a value for use inside ``'...'`` in a resource path."""
    return quote(value.replace("'", "''"), safe=_LITERAL_SAFE)


def append_segment(base: str, token: str) -> ResourceUrl:
    """Append a literal path token."""
    token = token.strip("/")
    if not token:
        raise ValueError("Path segment must not be empty")
    return ResourceUrl(f"{base.rstrip('/')}/{token}")


def append_key(base: str, resource: str, identifier: Identifier | int) -> ResourceUrl:
    """Append ``resource('<value>')`` or ``resource(<int>)``."""
    if isinstance(identifier, bool):
        raise TypeError("Boolean is not a valid resource key")
    if isinstance(identifier, int):
        return append_segment(base, f"{resource}({identifier})")
    if isinstance(identifier, GuidIdentifier):
        return append_segment(base, f"{resource}('{identifier.value}')")
    if isinstance(identifier, NameIdentifier):
        return append_segment(base, f"{resource}('{escape_odata_literal(identifier.value)}')")
    raise TypeError(f"Unsupported key type: {type(identifier).__name__}")


def append_by_title(base: str, resource: str, name: str) -> ResourceUrl:
    """Append ``resource/getByTitle('<name>')``."""
    return append_segment(base, f"{resource}/getByTitle('{escape_odata_literal(name)}')")


def append_identifier(base: str, resource: str, identifier: Identifier) -> ResourceUrl:
    """Address ``resource`` by id or by title depending on the identifier tag."""
    if isinstance(identifier, GuidIdentifier):
        return append_key(base, resource, identifier)
    return append_by_title(base, resource, identifier.value)


def address_member(collection: str, identifier: Identifier | int) -> ResourceUrl:
    """Address one member of the collection at ``collection``.

    ``.../lists`` + GUID -> ``.../lists('<guid>')``, + name ->
    ``.../lists/getByTitle('<name>')``, ``.../items`` + 7 -> ``.../items(7)``.
    """
    base, _, resource = collection.rstrip("/").rpartition("/")
    if isinstance(identifier, (GuidIdentifier, NameIdentifier)):
        return append_identifier(base, resource, identifier)
    return append_key(base, resource, identifier)
