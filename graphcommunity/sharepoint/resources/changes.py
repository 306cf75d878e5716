"""Change log queries (``<resource>/GetChanges``).

Request Flow:
    1. Serialize the ``ChangeQuery`` into ``{"query": {...}}`` (set fields only)
    2. POST it to ``<owner>/GetChanges``
    3. Parse the page, yield its records in server order
    4. While the page carries a continuation link, POST the same body to it

The walk is an async generator: records are produced lazily, one page
request per suspension point, and a failure on any page propagates at that
point after the earlier records were already handed out. Each call to
``get_changes`` starts an independent walk.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

from pydantic import ValidationError

from ..core.exceptions import SerializationError
from ..models import Change, ChangeQuery
from ..runtime.rest import CollectionAdapter, Page, walk_pages
from .request import ResourceRequest, dump_json

logger = logging.getLogger(__name__)

GET_CHANGES_SEGMENT = "GetChanges"


def serialize_change_query(query: ChangeQuery | Mapping[str, Any] | None = None) -> str:
    """Serialize a change query to the compact wire body.

    Examples:
        >>> serialize_change_query()
        '{"query":{}}'
        >>> serialize_change_query(ChangeQuery(add=True))
        '{"query":{"Add":true}}'

    Unknown flags raise ``SerializationError`` instead of being dropped.
    """
    if query is None:
        query = ChangeQuery()
    elif not isinstance(query, ChangeQuery):
        try:
            query = ChangeQuery.model_validate(dict(query))
        except ValidationError as e:
            raise SerializationError(f"Invalid change query: {e}") from e
    return dump_json(query.to_body())


class ChangeLogRequest:
    """Change log walker bound to one owner resource."""

    def __init__(self, owner: ResourceRequest) -> None:
        self.owner = owner
        self.url = owner.url.segment(GET_CHANGES_SEGMENT)

    async def get_changes(
        self,
        query: ChangeQuery | Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> AsyncIterator[Change]:
        """Yield change records across all pages, in server order."""
        body = serialize_change_query(query)
        adapter = CollectionAdapter(Change)

        async def fetch(link: str | None) -> Page[Change]:
            return await self.owner.send(
                "POST", adapter, url=link or self.url, body=body
            )

        logger.debug("Querying change log", extra={"url": self.url})
        async for page in walk_pages(fetch, cancel=cancel):
            for change in page.items:
                yield change
