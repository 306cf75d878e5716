"""Protocol header policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from multidict import CIMultiDict

from ..config import (
    ACCEPT_HEADER_NAME,
    ACCEPT_HEADER_VALUE,
    ODATA_VERSION_HEADER_NAME,
    ODATA_VERSION_HEADER_VALUE,
)


class HasHeaders(Protocol):
    headers: CIMultiDict[str]


@dataclass(frozen=True)
class HeaderPolicy:
    """Attaches the accept-format and protocol-version headers.

    ``apply`` replaces any existing value under the same (case-insensitive)
    name, so applying twice or after a caller header leaves exactly one value.
    """

    accept: str = ACCEPT_HEADER_VALUE
    odata_version: str = ODATA_VERSION_HEADER_VALUE

    def items(self) -> tuple[tuple[str, str], ...]:
        return (
            (ACCEPT_HEADER_NAME, self.accept),
            (ODATA_VERSION_HEADER_NAME, self.odata_version),
        )

    def apply(self, request: HasHeaders) -> None:
        for name, value in self.items():
            request.headers[name] = value


DEFAULT_HEADER_POLICY = HeaderPolicy()
