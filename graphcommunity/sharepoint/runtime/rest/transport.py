"""Transport abstractions.

The request layer only needs something that turns an ``HttpRequest`` into a
parsed JSON payload. ``HTTPClient`` is the aiohttp implementation; tests and
hosts with their own pipeline plug in any object with the same ``send``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .message import HttpRequest


@runtime_checkable
class Transport(Protocol):
    async def send(self, request: HttpRequest) -> Any:
        """Send ``request`` and return the decoded JSON body (``None`` if empty).

        Raises:
            TransportError: connection failure or timeout
            HttpStatusError: 4xx/5xx response
            SerializationError: body is not JSON
        """
        ...


class AuthProvider(Protocol):
    async def authorization_header(self, url: str) -> str:
        """Return the ``Authorization`` header value for ``url``."""
        ...


class StaticTokenAuth:
    """Bearer token known up front."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("token must not be empty")
        self._token = token

    async def authorization_header(self, url: str) -> str:
        return f"Bearer {self._token}"
