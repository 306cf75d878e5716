"""List and list item models."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from .base import SharePointEntity


class SPList(SharePointEntity):
    """SharePoint list (``lists('<id>')``)."""

    id: str
    title: str
    description: str = ""
    base_template: int | None = None
    base_type: int | None = None
    item_count: int | None = None
    hidden: bool | None = None
    entity_type_name: str | None = None
    list_item_entity_type_full_name: str | None = None
    created: datetime | None = None
    last_item_modified_date: datetime | None = None


class ListCreationInformation(SharePointEntity):
    """Body for ``web.lists.add``."""

    title: str = Field(..., min_length=1)
    base_template: int = 100
    description: str | None = None
    allow_content_types: bool | None = None
    content_types_enabled: bool | None = None


class ListItem(SharePointEntity):
    """List item; column values beyond the common ones are kept as extras."""

    id: int
    title: str | None = None
    guid: str | None = Field(default=None, alias="GUID")
    created: datetime | None = None
    modified: datetime | None = None
    author_id: int | None = None
    editor_id: int | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def fields(self) -> dict[str, Any]:
        """Column values not mapped to a declared attribute."""
        return dict(self.model_extra or {})
