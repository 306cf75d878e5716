"""Fluent navigation builders.

Builders only compose URLs; they never perform I/O. Each navigation step
returns a new builder over a longer ``ResourceUrl``, and ``request()``
produces a fresh request object with its own header set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.paths import ResourceUrl

if TYPE_CHECKING:
    from ..client import SharePointClient


class RequestBuilder:
    def __init__(self, url: str, client: SharePointClient) -> None:
        self.url = ResourceUrl(url)
        self.client = client

    def append_segment(self, token: str) -> ResourceUrl:
        return self.url.segment(token)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.url)!r})"
