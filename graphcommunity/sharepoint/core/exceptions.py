"""Custom exception hierarchy."""

from __future__ import annotations


class SharePointError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidIdentifierError(SharePointError, ValueError):
    """Resource identifier is empty, whitespace or the zero GUID.

    Raised while composing a path, before any request object exists, so no
    network round trip is wasted on an address that cannot be valid.
    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class TransportError(SharePointError):
    """Request could not be completed by the transport."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class HttpStatusError(TransportError):
    """Server answered with a 4xx/5xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        url: str | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
        self.body = body


class SerializationError(SharePointError):
    """Payload does not match the expected model or page shape."""

    pass
