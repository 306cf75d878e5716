"""Core components."""

from .exceptions import (
    HttpStatusError,
    InvalidIdentifierError,
    SerializationError,
    SharePointError,
    TransportError,
)
from .headers import DEFAULT_HEADER_POLICY, HeaderPolicy
from .identifiers import (
    GuidIdentifier,
    Identifier,
    NameIdentifier,
    resolve_identifier,
    resolve_item_id,
)
from .paths import (
    ResourceUrl,
    address_member,
    append_by_title,
    append_identifier,
    append_key,
    append_segment,
    escape_odata_literal,
)

__all__ = [
    # Exceptions
    "SharePointError",
    "InvalidIdentifierError",
    "TransportError",
    "HttpStatusError",
    "SerializationError",
    # Headers
    "HeaderPolicy",
    "DEFAULT_HEADER_POLICY",
    # Identifiers
    "GuidIdentifier",
    "NameIdentifier",
    "Identifier",
    "resolve_identifier",
    "resolve_item_id",
    # Paths
    "ResourceUrl",
    "address_member",
    "append_segment",
    "append_key",
    "append_by_title",
    "append_identifier",
    "escape_odata_literal",
]
