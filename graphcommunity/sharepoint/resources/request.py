"""Shared request core composed into every resource request.

Architecture:
    Concrete requests (``SiteRequest``, ``ListRequest``, ...) do not inherit
    behaviour from one another. Each owns a ``ResourceRequest`` holding the
    composed URL, the header set and any query options, and delegates
    request building and sending to it.

    Headers are attached once, when the ``ResourceRequest`` is constructed.
    ``build_http_request`` hands the transport a snapshot, so nothing on the
    send path (including a transport-level retry) applies them again.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from multidict import CIMultiDict, CIMultiDictProxy

from ..config import (
    ANY_ETAG,
    HTTP_METHOD_OVERRIDE_HEADER_NAME,
    IF_MATCH_HEADER_NAME,
    JSON_MEDIA_TYPE,
)
from ..core.headers import HeaderPolicy
from ..core.paths import ResourceUrl
from ..runtime.rest import (
    CollectionAdapter,
    HttpRequest,
    NoContentAdapter,
    Page,
    PagedSequence,
    ResponseAdapter,
    raise_if_cancelled,
)
from ..runtime.rest.adapters import ModelT

if TYPE_CHECKING:
    from ..client import SharePointClient

logger = logging.getLogger(__name__)


def dump_json(body: Any) -> str:
    """Compact JSON as sent on the wire."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class ResourceRequest:
    """URL, headers and query options for one resource."""

    def __init__(
        self,
        url: str,
        client: SharePointClient,
        *,
        header_policy: HeaderPolicy | None = None,
    ) -> None:
        self.url = ResourceUrl(url)
        self.client = client
        self.headers: CIMultiDict[str] = CIMultiDict()
        self.query_options: dict[str, str] = {}
        self.content_type = JSON_MEDIA_TYPE
        (header_policy or client.header_policy).apply(self)

    def add_header(self, name: str, value: str) -> None:
        """Set a custom header; an existing header with that name is replaced."""
        self.headers[name] = value

    def request_url(self) -> str:
        if not self.query_options:
            return str(self.url)
        query = urlencode(self.query_options, safe="$,/", quote_via=quote)
        return f"{self.url}?{query}"

    def build_http_request(
        self,
        method: str = "GET",
        *,
        url: str | None = None,
        body: Any = None,
        extra_headers: dict[str, str] | None = None,
    ) -> HttpRequest:
        """Build the wire request without sending it."""
        headers = CIMultiDict(self.headers)
        for name, value in (extra_headers or {}).items():
            headers[name] = value
        return HttpRequest(
            method=method,
            url=url or self.request_url(),
            headers=CIMultiDictProxy(headers),
            body=body if body is None or isinstance(body, str) else dump_json(body),
            content_type=self.content_type,
        )

    async def send(
        self,
        method: str = "GET",
        adapter: ResponseAdapter | None = None,
        *,
        url: str | None = None,
        body: Any = None,
        extra_headers: dict[str, str] | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Send through the client's transport and parse with ``adapter``."""
        raise_if_cancelled(cancel)
        request = self.build_http_request(
            method, url=url, body=body, extra_headers=extra_headers
        )
        response = await self.client.transport.send(request)
        return (adapter or NoContentAdapter()).parse(response)

    async def merge(
        self,
        body: Any,
        *,
        etag: str = ANY_ETAG,
        cancel: asyncio.Event | None = None,
    ) -> None:
        """Partial update via ``POST`` + ``X-HTTP-Method: MERGE``."""
        await self.send(
            "POST",
            body=body,
            extra_headers={
                HTTP_METHOD_OVERRIDE_HEADER_NAME: "MERGE",
                IF_MATCH_HEADER_NAME: etag,
            },
            cancel=cancel,
        )

    async def delete(self, *, etag: str = ANY_ETAG, cancel: asyncio.Event | None = None) -> None:
        """Delete via ``POST`` + ``X-HTTP-Method: DELETE``."""
        await self.send(
            "POST",
            extra_headers={
                HTTP_METHOD_OVERRIDE_HEADER_NAME: "DELETE",
                IF_MATCH_HEADER_NAME: etag,
            },
            cancel=cancel,
        )

    async def get_page(
        self,
        model: type[ModelT],
        link: str | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Page[ModelT]:
        """Fetch the first page, or the page addressed by ``link``."""
        return await self.send("GET", CollectionAdapter(model), url=link, cancel=cancel)

    def paged(
        self,
        model: type[ModelT],
        *,
        cancel: asyncio.Event | None = None,
    ) -> PagedSequence[ModelT]:
        async def fetch(link: str | None) -> Page[ModelT]:
            logger.debug("Fetching page", extra={"url": link or self.request_url()})
            return await self.get_page(model, link)

        return PagedSequence(fetch, cancel=cancel)
