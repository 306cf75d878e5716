"""Site collection and web requests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Mapping
from typing import Any

from ..models import Change, ChangeQuery, Site, Web
from ..runtime.rest import EntityAdapter
from .builder import RequestBuilder
from .changes import ChangeLogRequest
from .lists import ListCollectionRequestBuilder
from .navigation import NavigationRequestBuilder
from .request import ResourceRequest


class SiteRequest:
    """Operations on ``_api/site``."""

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> Site:
        return await self.resource.send("GET", EntityAdapter(Site), cancel=cancel)

    def get_changes(
        self,
        query: ChangeQuery | Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[Change]:
        return ChangeLogRequest(self.resource).get_changes(query, cancel=cancel)


class SiteRequestBuilder(RequestBuilder):
    def request(self) -> SiteRequest:
        return SiteRequest(self.url, self.client)

    @property
    def root_web(self) -> WebRequestBuilder:
        return WebRequestBuilder(self.append_segment("rootWeb"), self.client)


class WebRequest:
    """Operations on ``_api/web``."""

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> Web:
        return await self.resource.send("GET", EntityAdapter(Web), cancel=cancel)

    async def update(
        self,
        changes: Mapping[str, Any],
        *,
        cancel: asyncio.Event | None = None,
    ) -> None:
        """Update web properties, e.g. ``{"Title": "Team"}``."""
        await self.resource.merge(dict(changes), cancel=cancel)

    def get_changes(
        self,
        query: ChangeQuery | Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[Change]:
        return ChangeLogRequest(self.resource).get_changes(query, cancel=cancel)


class WebRequestBuilder(RequestBuilder):
    def request(self) -> WebRequest:
        return WebRequest(self.url, self.client)

    @property
    def lists(self) -> ListCollectionRequestBuilder:
        return ListCollectionRequestBuilder(self.append_segment("lists"), self.client)

    @property
    def navigation(self) -> NavigationRequestBuilder:
        return NavigationRequestBuilder(self.append_segment("navigation"), self.client)
