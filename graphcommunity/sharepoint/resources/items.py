"""List item requests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from ..config import ANY_ETAG
from ..core.identifiers import resolve_item_id
from ..models import ListItem
from ..runtime.rest import EntityAdapter, Page, PagedSequence
from .builder import RequestBuilder
from .request import ResourceRequest


class ListItemCollectionRequest:
    """Operations on ``lists(...)/items``.

    ``select``, ``expand`` and ``top`` set the only query options this
    collection supports and return the request for chaining.
    """

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    def select(self, *fields: str) -> ListItemCollectionRequest:
        self.resource.query_options["$select"] = ",".join(fields)
        return self

    def expand(self, *fields: str) -> ListItemCollectionRequest:
        self.resource.query_options["$expand"] = ",".join(fields)
        return self

    def top(self, count: int) -> ListItemCollectionRequest:
        if count <= 0:
            raise ValueError("top must be a positive integer")
        self.resource.query_options["$top"] = str(count)
        return self

    async def get(self, *, cancel: asyncio.Event | None = None) -> Page[ListItem]:
        """First page of items."""
        return await self.resource.get_page(ListItem, cancel=cancel)

    def iterate(self, *, cancel: asyncio.Event | None = None) -> PagedSequence[ListItem]:
        """All items, following continuation links lazily."""
        return self.resource.paged(ListItem, cancel=cancel)

    async def add(
        self,
        fields: Mapping[str, Any],
        *,
        cancel: asyncio.Event | None = None,
    ) -> ListItem:
        return await self.resource.send(
            "POST", EntityAdapter(ListItem), body=dict(fields), cancel=cancel
        )


class ListItemCollectionRequestBuilder(RequestBuilder):
    def request(self) -> ListItemCollectionRequest:
        return ListItemCollectionRequest(self.url, self.client)

    def __getitem__(self, item_id: int) -> ListItemRequestBuilder:
        return ListItemRequestBuilder(self.url.member(resolve_item_id(item_id)), self.client)


class ListItemRequest:
    """Operations on ``items(<id>)``."""

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> ListItem:
        return await self.resource.send("GET", EntityAdapter(ListItem), cancel=cancel)

    async def update(
        self,
        fields: Mapping[str, Any],
        *,
        etag: str = ANY_ETAG,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self.resource.merge(dict(fields), etag=etag, cancel=cancel)

    async def delete(self, *, etag: str = ANY_ETAG, cancel: asyncio.Event | None = None) -> None:
        await self.resource.delete(etag=etag, cancel=cancel)


class ListItemRequestBuilder(RequestBuilder):
    def request(self) -> ListItemRequest:
        return ListItemRequest(self.url, self.client)
