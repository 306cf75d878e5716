"""Navigation tree models."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import SharePointEntity, unwrap_results


class NavigationNode(SharePointEntity):
    """Node of the quick launch or top navigation bar."""

    id: int
    title: str = ""
    url: str | None = None
    is_external: bool | None = None
    is_visible: bool | None = None
    is_doc_lib: bool | None = None
    children: tuple[NavigationNode, ...] = ()

    @field_validator("children", mode="before")
    @classmethod
    def _unwrap_children(cls, v):
        return unwrap_results(v) or ()


class NavigationNodeCreationInformation(SharePointEntity):
    """Body for adding a node to a node collection."""

    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    is_external: bool | None = None
    as_last_node: bool | None = None


class Navigation(SharePointEntity):
    """Snapshot of a web's navigation (``web/navigation``)."""

    use_shared: bool | None = None
    quick_launch: tuple[NavigationNode, ...] = ()
    top_navigation_bar: tuple[NavigationNode, ...] = ()

    @field_validator("quick_launch", "top_navigation_bar", mode="before")
    @classmethod
    def _unwrap_nodes(cls, v):
        return unwrap_results(v) or ()
