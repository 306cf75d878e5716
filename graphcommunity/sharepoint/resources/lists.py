"""List collection and list requests.

A list is reached either by id or by title:

    >>> web.lists["6f094ea6-2222-4f2e-b864-54f706f8b07a"]  # .../lists('6f09...')
    >>> web.lists["Events"]                               # .../lists/getByTitle('Events')

The key is resolved when indexing, so a zero GUID or a blank title raises
``InvalidIdentifierError`` before any request object is built.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import AsyncIterator, Mapping
from typing import Any

from ..config import ANY_ETAG
from ..core.identifiers import Identifier, resolve_identifier
from ..models import Change, ChangeQuery, ListCreationInformation, SPList
from ..runtime.rest import EntityAdapter, Page, PagedSequence
from .builder import RequestBuilder
from .changes import ChangeLogRequest
from .items import ListItemCollectionRequestBuilder
from .request import ResourceRequest


class ListCollectionRequest:
    """Operations on ``web/lists``."""

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    def select(self, *fields: str) -> ListCollectionRequest:
        self.resource.query_options["$select"] = ",".join(fields)
        return self

    def top(self, count: int) -> ListCollectionRequest:
        if count <= 0:
            raise ValueError("top must be a positive integer")
        self.resource.query_options["$top"] = str(count)
        return self

    async def get(self, *, cancel: asyncio.Event | None = None) -> Page[SPList]:
        """First page of lists."""
        return await self.resource.get_page(SPList, cancel=cancel)

    def iterate(self, *, cancel: asyncio.Event | None = None) -> PagedSequence[SPList]:
        """All lists across pages."""
        return self.resource.paged(SPList, cancel=cancel)

    async def add(
        self,
        info: ListCreationInformation,
        *,
        cancel: asyncio.Event | None = None,
    ) -> SPList:
        body = info.model_dump(mode="json", by_alias=True, exclude_none=True)
        return await self.resource.send(
            "POST", EntityAdapter(SPList), body=body, cancel=cancel
        )


class ListCollectionRequestBuilder(RequestBuilder):
    def request(self) -> ListCollectionRequest:
        return ListCollectionRequest(self.url, self.client)

    def __getitem__(self, key: uuid.UUID | str | Identifier) -> ListRequestBuilder:
        identifier = resolve_identifier(key)
        return ListRequestBuilder(self.url.member(identifier), self.client)


class ListRequest:
    """Operations on a single list."""

    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> SPList:
        return await self.resource.send("GET", EntityAdapter(SPList), cancel=cancel)

    async def update(
        self,
        changes: Mapping[str, Any],
        *,
        etag: str = ANY_ETAG,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self.resource.merge(dict(changes), etag=etag, cancel=cancel)

    async def delete(self, *, etag: str = ANY_ETAG, cancel: asyncio.Event | None = None) -> None:
        await self.resource.delete(etag=etag, cancel=cancel)

    def get_changes(
        self,
        query: ChangeQuery | Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[Change]:
        return ChangeLogRequest(self.resource).get_changes(query, cancel=cancel)


class ListRequestBuilder(RequestBuilder):
    def request(self) -> ListRequest:
        return ListRequest(self.url, self.client)

    @property
    def items(self) -> ListItemCollectionRequestBuilder:
        return ListItemCollectionRequestBuilder(self.append_segment("items"), self.client)
