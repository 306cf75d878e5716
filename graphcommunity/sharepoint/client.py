"""Root client and entry point of the fluent API.

Example:
    >>> async with SharePointClient(HTTPClient(auth=StaticTokenAuth(token))) as client:
    ...     api = client.api("https://contoso.sharepoint.com/sites/team")
    ...     events = await api.web.lists["Events"].request().get()
    ...     async for change in api.web.lists[events.id].request().get_changes(
    ...         ChangeQuery(add=True, item=True)
    ...     ):
    ...         print(change.change_type, change.item_id)
"""

from __future__ import annotations

from .config import API_PATH_SEGMENT
from .core.headers import DEFAULT_HEADER_POLICY, HeaderPolicy
from .core.paths import ResourceUrl
from .resources.builder import RequestBuilder
from .resources.site import SiteRequestBuilder, WebRequestBuilder
from .runtime.rest import HTTPClient, Transport


class SharePointClient:
    """Holds the transport and header policy shared by every request.

    The client is the only long-lived object; builders and requests made from
    it are cheap, independent and safe to use concurrently.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        header_policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
    ) -> None:
        self.transport = transport if transport is not None else HTTPClient()
        self.header_policy = header_policy

    def api(self, site_url: str) -> SharePointAPIRequestBuilder:
        """Start navigation at ``<site_url>/_api``."""
        if not site_url or not site_url.strip():
            raise ValueError("site_url must not be empty")
        return SharePointAPIRequestBuilder(
            ResourceUrl(site_url.strip()).segment(API_PATH_SEGMENT), self
        )

    async def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> SharePointClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SharePointAPIRequestBuilder(RequestBuilder):
    """``<site>/_api``"""

    @property
    def web(self) -> WebRequestBuilder:
        return WebRequestBuilder(self.append_segment("web"), self.client)

    @property
    def site(self) -> SiteRequestBuilder:
        return SiteRequestBuilder(self.append_segment("site"), self.client)
