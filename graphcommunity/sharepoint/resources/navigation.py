"""Navigation requests.

``NavigationRequest.get`` materializes the whole navigation snapshot in one
round trip: the quick launch and top navigation bar collections are expanded
inline, and callers can widen the expansion to deeper levels with
``expand("QuickLaunch/Children", ...)``.
"""

from __future__ import annotations

import asyncio

from ..core.identifiers import resolve_item_id
from ..models import Navigation, NavigationNode, NavigationNodeCreationInformation
from ..runtime.rest import EntityAdapter
from .builder import RequestBuilder
from .request import ResourceRequest

DEFAULT_NAVIGATION_EXPAND = ("QuickLaunch", "TopNavigationBar")


class NavigationRequest:
    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)
        self.expand(*DEFAULT_NAVIGATION_EXPAND)

    def expand(self, *fields: str) -> NavigationRequest:
        """Add navigation properties to the expansion; existing ones are kept."""
        expanded = [f for f in self.resource.query_options.get("$expand", "").split(",") if f]
        expanded.extend(f for f in dict.fromkeys(fields) if f not in expanded)
        self.resource.query_options["$expand"] = ",".join(expanded)
        return self

    async def get(self, *, cancel: asyncio.Event | None = None) -> Navigation:
        return await self.resource.send("GET", EntityAdapter(Navigation), cancel=cancel)


class NavigationRequestBuilder(RequestBuilder):
    def request(self) -> NavigationRequest:
        return NavigationRequest(self.url, self.client)

    @property
    def quick_launch(self) -> NavigationNodeCollectionRequestBuilder:
        return NavigationNodeCollectionRequestBuilder(
            self.append_segment("QuickLaunch"), self.client
        )

    @property
    def top_navigation_bar(self) -> NavigationNodeCollectionRequestBuilder:
        return NavigationNodeCollectionRequestBuilder(
            self.append_segment("TopNavigationBar"), self.client
        )

    def get_node_by_id(self, node_id: int) -> NavigationNodeRequestBuilder:
        node_id = resolve_item_id(node_id)
        return NavigationNodeRequestBuilder(
            self.append_segment(f"GetNodeById({node_id})"), self.client
        )


class NavigationNodeCollectionRequest:
    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> tuple[NavigationNode, ...]:
        """All nodes of the collection, following continuation links."""
        return tuple(await self.resource.paged(NavigationNode, cancel=cancel).to_list())

    async def add(
        self,
        info: NavigationNodeCreationInformation,
        *,
        cancel: asyncio.Event | None = None,
    ) -> NavigationNode:
        body = info.model_dump(mode="json", by_alias=True, exclude_none=True)
        return await self.resource.send(
            "POST", EntityAdapter(NavigationNode), body=body, cancel=cancel
        )


class NavigationNodeCollectionRequestBuilder(RequestBuilder):
    def request(self) -> NavigationNodeCollectionRequest:
        return NavigationNodeCollectionRequest(self.url, self.client)


class NavigationNodeRequest:
    def __init__(self, url: str, client) -> None:
        self.resource = ResourceRequest(url, client)

    async def get(self, *, cancel: asyncio.Event | None = None) -> NavigationNode:
        return await self.resource.send("GET", EntityAdapter(NavigationNode), cancel=cancel)

    async def delete(self, *, cancel: asyncio.Event | None = None) -> None:
        await self.resource.delete(cancel=cancel)


class NavigationNodeRequestBuilder(RequestBuilder):
    def request(self) -> NavigationNodeRequest:
        return NavigationNodeRequest(self.url, self.client)

    @property
    def children(self) -> NavigationNodeCollectionRequestBuilder:
        return NavigationNodeCollectionRequestBuilder(
            self.append_segment("Children"), self.client
        )
