"""Site collection and web models."""

from datetime import datetime

from .base import SharePointEntity


class Site(SharePointEntity):
    """Site collection (``_api/site``)."""

    id: str
    url: str | None = None
    server_relative_url: str | None = None
    read_only: bool | None = None
    hub_site_id: str | None = None
    is_hub_site: bool | None = None


class Web(SharePointEntity):
    """Web (``_api/web``)."""

    id: str
    title: str = ""
    description: str = ""
    url: str | None = None
    server_relative_url: str | None = None
    web_template: str | None = None
    language: int | None = None
    created: datetime | None = None
    last_item_modified_date: datetime | None = None
