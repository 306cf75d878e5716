"""Lazy walking of continuation-linked pages.

Architecture:
    Paging is strictly sequential: the next request depends on the link
    returned with the previous page. Each page fetch is one suspension point,
    and cancellation is checked right before it so a cancelled walk never
    starts another request.

    ``PagedSequence`` is restartable: every ``async for`` begins a fresh walk
    from the first page. One-shot walks (the change log) use ``walk_pages``
    directly through an async generator.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic

from .adapters import ModelT, Page

logger = logging.getLogger(__name__)

FetchPage = Callable[[str | None], Awaitable[Page[ModelT]]]


def raise_if_cancelled(cancel: asyncio.Event | None) -> None:
    """Raise ``asyncio.CancelledError`` once the caller's event is set."""
    if cancel is not None and cancel.is_set():
        raise asyncio.CancelledError("Request cancelled by caller")


async def walk_pages(
    fetch: FetchPage[ModelT],
    *,
    cancel: asyncio.Event | None = None,
) -> AsyncIterator[Page[ModelT]]:
    """Yield pages until one arrives without a continuation link.

    ``fetch`` receives ``None`` for the first page and the continuation link
    for every following one.
    """
    link: str | None = None
    page_count = 0
    while True:
        raise_if_cancelled(cancel)
        page = await fetch(link)
        page_count += 1
        yield page
        if not page.next_link:
            break
        link = page.next_link
        logger.debug(
            "Following continuation link",
            extra={"next_link": link, "pages_fetched": page_count},
        )
    logger.debug("Page walk completed", extra={"pages_fetched": page_count})


class PagedSequence(Generic[ModelT]):
    """Restartable, flattened view over a paged collection."""

    def __init__(
        self,
        fetch: FetchPage[ModelT],
        *,
        cancel: asyncio.Event | None = None,
    ) -> None:
        self._fetch = fetch
        self._cancel = cancel

    def pages(self) -> AsyncIterator[Page[ModelT]]:
        return walk_pages(self._fetch, cancel=self._cancel)

    async def _items(self) -> AsyncIterator[ModelT]:
        async for page in self.pages():
            for item in page.items:
                yield item

    def __aiter__(self) -> AsyncIterator[ModelT]:
        return self._items()

    async def to_list(self) -> list[ModelT]:
        return [item async for item in self]
