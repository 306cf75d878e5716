"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from multidict import CIMultiDict
from yarl import URL

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import HttpStatusError, SerializationError, TransportError
from .message import HttpRequest
from .transport import AuthProvider

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper implementing the ``Transport`` protocol."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        auth: AuthProvider | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._auth = auth
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def send(self, request: HttpRequest) -> Any:
        """Send a request and decode its JSON body."""
        headers = CIMultiDict(request.headers)
        if request.body is not None and request.content_type:
            headers["Content-Type"] = request.content_type
        if self._auth is not None:
            headers["Authorization"] = await self._auth.authorization_header(request.url)

        logger.debug(
            "Sending request",
            extra={"method": request.method, "url": request.url},
        )

        try:
            # Paths are already percent-encoded by the composer
            async with self.session.request(
                request.method,
                URL(request.url, encoded=True),
                headers=headers,
                data=request.body.encode("utf-8") if request.body is not None else None,
            ) as response:
                status = response.status
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}", url=request.url) from e

        logger.debug("Response received", extra={"status": status, "url": request.url})

        if status >= 400:
            raise HttpStatusError(
                f"{request.method} {request.url} returned HTTP {status}",
                status_code=status,
                body=text,
                url=request.url,
            )

        if not text or not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise SerializationError(f"Response from {request.url} is not valid JSON") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
