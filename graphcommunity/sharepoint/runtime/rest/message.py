"""Wire-level request handed to a transport."""

from __future__ import annotations

from dataclasses import dataclass, field

from multidict import CIMultiDict, CIMultiDictProxy


@dataclass(frozen=True)
class HttpRequest:
    method: str  # "GET" | "POST"
    url: str
    headers: CIMultiDictProxy[str] = field(
        default_factory=lambda: CIMultiDictProxy(CIMultiDict())
    )
    body: str | None = None
    content_type: str | None = None
