"""Resource request builders and requests."""

from .builder import RequestBuilder
from .changes import ChangeLogRequest, serialize_change_query
from .items import (
    ListItemCollectionRequest,
    ListItemCollectionRequestBuilder,
    ListItemRequest,
    ListItemRequestBuilder,
)
from .lists import (
    ListCollectionRequest,
    ListCollectionRequestBuilder,
    ListRequest,
    ListRequestBuilder,
)
from .navigation import (
    NavigationNodeCollectionRequest,
    NavigationNodeCollectionRequestBuilder,
    NavigationNodeRequest,
    NavigationNodeRequestBuilder,
    NavigationRequest,
    NavigationRequestBuilder,
)
from .request import ResourceRequest
from .site import SiteRequest, SiteRequestBuilder, WebRequest, WebRequestBuilder

__all__ = [
    "ChangeLogRequest",
    "ListCollectionRequest",
    "ListCollectionRequestBuilder",
    "ListItemCollectionRequest",
    "ListItemCollectionRequestBuilder",
    "ListItemRequest",
    "ListItemRequestBuilder",
    "ListRequest",
    "ListRequestBuilder",
    "NavigationNodeCollectionRequest",
    "NavigationNodeCollectionRequestBuilder",
    "NavigationNodeRequest",
    "NavigationNodeRequestBuilder",
    "NavigationRequest",
    "NavigationRequestBuilder",
    "RequestBuilder",
    "ResourceRequest",
    "SiteRequest",
    "SiteRequestBuilder",
    "WebRequest",
    "WebRequestBuilder",
    "serialize_change_query",
]
