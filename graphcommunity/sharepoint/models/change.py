"""Change log models.

Architecture:
    ``ChangeQuery`` is the request side of ``GetChanges``. Every flag is
    optional and only flags the caller explicitly set are serialized, so an
    explicit ``False`` reaches the server while an untouched flag does not.

    ``Change`` is the response side: one server-ordered record. SharePoint
    returns subtypes (``SP.ChangeItem``, ``SP.ChangeList``, ...) that only
    differ by a few id columns, so a single model keeps them all and exposes
    the subtype through ``kind``.
"""

from datetime import datetime
from enum import IntEnum
from typing import Any

from pydantic import ConfigDict

from .base import SharePointEntity


class ChangeType(IntEnum):
    """Kind of mutation recorded in the change log."""

    NO_CHANGE = 0
    ADD = 1
    UPDATE = 2
    DELETE_OBJECT = 3
    RENAME = 4
    MOVE_AWAY = 5
    MOVE_INTO = 6
    RESTORE = 7
    ROLE_ADD = 8
    ROLE_DELETE = 9
    ROLE_UPDATE = 10
    ASSIGNMENT_ADD = 11
    ASSIGNMENT_DELETE = 12
    MEMBER_ADD = 13
    MEMBER_DELETE = 14
    SYSTEM_UPDATE = 15
    NAVIGATION = 16
    SCOPE_ADD = 17
    SCOPE_DELETE = 18
    LIST_CONTENT_TYPE_ADD = 19
    LIST_CONTENT_TYPE_DELETE = 20
    DIRTY = 21
    ACTIVITY = 22


class ChangeToken(SharePointEntity):
    string_value: str


class ChangeQuery(SharePointEntity):
    """Filter describing which change categories ``GetChanges`` returns."""

    model_config = ConfigDict(extra="forbid")

    # Change types
    add: bool | None = None
    update: bool | None = None
    delete_object: bool | None = None
    rename: bool | None = None
    move: bool | None = None
    restore: bool | None = None
    system_update: bool | None = None
    role_definition_add: bool | None = None
    role_definition_update: bool | None = None
    role_definition_delete: bool | None = None
    role_assignment_add: bool | None = None
    role_assignment_delete: bool | None = None
    group_membership_add: bool | None = None
    group_membership_delete: bool | None = None

    # Object types
    item: bool | None = None
    list: bool | None = None
    web: bool | None = None
    site: bool | None = None
    file: bool | None = None
    folder: bool | None = None
    user: bool | None = None
    group: bool | None = None
    security_policy: bool | None = None
    navigation: bool | None = None
    view: bool | None = None
    content_type: bool | None = None
    field: bool | None = None
    alert: bool | None = None

    # Paging and range
    recursive_all: bool | None = None
    latest_first: bool | None = None
    fetch_limit: int | None = None
    change_token_start: ChangeToken | None = None
    change_token_end: ChangeToken | None = None

    def to_body(self) -> dict[str, Any]:
        """Request body ``{"query": {...}}`` holding only explicitly set fields."""
        return {"query": self.model_dump(mode="json", by_alias=True, exclude_unset=True)}


class Change(SharePointEntity):
    """One change log record."""

    change_token: ChangeToken | None = None
    change_type: ChangeType
    site_id: str | None = None
    time: datetime | None = None
    item_id: int | None = None
    list_id: str | None = None
    web_id: str | None = None
    unique_id: str | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def kind(self) -> str:
        """Subtype name, e.g. ``ChangeItem`` for ``SP.ChangeItem``."""
        if not self.odata_type:
            return "Change"
        return self.odata_type.rsplit(".", 1)[-1]
