"""Data models for SharePoint REST entities.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True) and map SharePoint's PascalCase wire
    names onto snake_case attributes through an alias generator.

Model Categories:
    - Structure: Site, Web, SPList, ListItem
    - Change log: ChangeQuery, ChangeToken, Change, ChangeType
    - Navigation: Navigation, NavigationNode
    - Write bodies: ListCreationInformation, NavigationNodeCreationInformation
"""

from .base import SharePointEntity
from .change import Change, ChangeQuery, ChangeToken, ChangeType
from .list import ListCreationInformation, ListItem, SPList
from .navigation import Navigation, NavigationNode, NavigationNodeCreationInformation
from .site import Site, Web

__all__ = [
    "Change",
    "ChangeQuery",
    "ChangeToken",
    "ChangeType",
    "ListCreationInformation",
    "ListItem",
    "Navigation",
    "NavigationNode",
    "NavigationNodeCreationInformation",
    "SPList",
    "SharePointEntity",
    "Site",
    "Web",
]
