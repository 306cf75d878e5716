"""Graph Community SharePoint - fluent async client for the SharePoint REST API."""

from .client import SharePointAPIRequestBuilder, SharePointClient
from .core import (
    DEFAULT_HEADER_POLICY,
    GuidIdentifier,
    HeaderPolicy,
    HttpStatusError,
    InvalidIdentifierError,
    NameIdentifier,
    ResourceUrl,
    SerializationError,
    SharePointError,
    TransportError,
    resolve_identifier,
)
from .models import (
    Change,
    ChangeQuery,
    ChangeToken,
    ChangeType,
    ListCreationInformation,
    ListItem,
    Navigation,
    NavigationNode,
    NavigationNodeCreationInformation,
    Site,
    SPList,
    Web,
)
from .runtime.rest import (
    AuthProvider,
    HTTPClient,
    HttpRequest,
    Page,
    PagedSequence,
    StaticTokenAuth,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "SharePointClient",
    "SharePointAPIRequestBuilder",
    # Core
    "DEFAULT_HEADER_POLICY",
    "HeaderPolicy",
    "GuidIdentifier",
    "NameIdentifier",
    "ResourceUrl",
    "resolve_identifier",
    # Exceptions
    "SharePointError",
    "InvalidIdentifierError",
    "TransportError",
    "HttpStatusError",
    "SerializationError",
    # Models
    "Change",
    "ChangeQuery",
    "ChangeToken",
    "ChangeType",
    "ListCreationInformation",
    "ListItem",
    "Navigation",
    "NavigationNode",
    "NavigationNodeCreationInformation",
    "Site",
    "SPList",
    "Web",
    # Runtime
    "AuthProvider",
    "HTTPClient",
    "HttpRequest",
    "Page",
    "PagedSequence",
    "StaticTokenAuth",
    "Transport",
]
