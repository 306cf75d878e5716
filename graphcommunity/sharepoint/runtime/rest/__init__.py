"""REST runtime abstractions."""

from .adapters import CollectionAdapter, EntityAdapter, NoContentAdapter, Page, ResponseAdapter
from .http_client import HTTPClient
from .message import HttpRequest
from .paging import PagedSequence, raise_if_cancelled, walk_pages
from .transport import AuthProvider, StaticTokenAuth, Transport

__all__ = [
    "AuthProvider",
    "CollectionAdapter",
    "EntityAdapter",
    "HTTPClient",
    "HttpRequest",
    "NoContentAdapter",
    "Page",
    "PagedSequence",
    "ResponseAdapter",
    "StaticTokenAuth",
    "Transport",
    "raise_if_cancelled",
    "walk_pages",
]
