"""Shared SharePoint REST constants.

This module centralizes header names, media types and path segments used by
the request builders and the HTTP transport so those modules can stay small.
"""

# Path segment appended to a site URL to reach the REST surface
API_PATH_SEGMENT = "_api"

# Media types
JSON_MEDIA_TYPE = "application/json"
ODATA_VERBOSE_MEDIA_TYPE = "application/json;odata=verbose"

# Protocol headers attached to every request
ACCEPT_HEADER_NAME = "Accept"
ACCEPT_HEADER_VALUE = ODATA_VERBOSE_MEDIA_TYPE
ODATA_VERSION_HEADER_NAME = "odata-version"
ODATA_VERSION_HEADER_VALUE = "3.0"

# POST tunnelling headers used for MERGE/DELETE
HTTP_METHOD_OVERRIDE_HEADER_NAME = "X-HTTP-Method"
IF_MATCH_HEADER_NAME = "IF-MATCH"
ANY_ETAG = "*"

# Continuation link keys, verbose first
NEXT_LINK_KEYS = ("__next", "odata.nextLink", "@odata.nextLink")

DEFAULT_TIMEOUT = 30.0
