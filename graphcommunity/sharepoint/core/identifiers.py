"""Identifier resolution for indexable resources.

A list can be addressed by its unique id or by its title. The raw value a
caller passes to ``web.lists[...]`` is resolved once into a tagged
``GuidIdentifier`` or ``NameIdentifier``; the path composer then picks the
matching URL form without re-inspecting the value.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from .exceptions import InvalidIdentifierError

_GUID_PATTERN = re.compile(
    r"^\{?([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})\}?$"
)


@dataclass(frozen=True)
class GuidIdentifier:
    """Identifier-addressed resource (never the zero GUID)."""

    value: str


@dataclass(frozen=True)
class NameIdentifier:
    """Name-addressed resource (never empty or whitespace)."""

    value: str


Identifier = GuidIdentifier | NameIdentifier


def _guid(text: str) -> GuidIdentifier:
    if uuid.UUID(text).int == 0:
        raise InvalidIdentifierError("missing id", value=text)
    return GuidIdentifier(text)


def resolve_identifier(raw: uuid.UUID | str | None) -> Identifier:
    """Resolve a raw list key into a tagged identifier.

    Args:
        raw: A ``uuid.UUID``, a GUID string (braces optional) or a title

    Returns:
        GuidIdentifier or NameIdentifier

    Raises:
        InvalidIdentifierError: zero GUID ("missing id") or empty/whitespace
            title ("missing title")
    """
    if isinstance(raw, (GuidIdentifier, NameIdentifier)):
        return raw
    if isinstance(raw, uuid.UUID):
        return _guid(str(raw))
    if raw is None:
        raise InvalidIdentifierError("missing title", value=raw)
    if not isinstance(raw, str):
        raise TypeError(f"Identifier must be a UUID or str, got {type(raw).__name__}")

    match = _GUID_PATTERN.match(raw.strip())
    if match:
        return _guid(match.group(1))
    if not raw.strip():
        raise InvalidIdentifierError("missing title", value=raw)
    return NameIdentifier(raw)


def resolve_item_id(raw: int) -> int:
    """Validate an integer key (list items, navigation nodes)."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidIdentifierError("missing id", value=raw)
    if raw <= 0:
        raise InvalidIdentifierError("missing id", value=raw)
    return raw
