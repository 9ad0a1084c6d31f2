"""Exceptions raised by the Lazada Open Platform client."""

from typing import Optional

HTTP_ERROR = "HTTP_ERROR"


class LazadaError(Exception):
    """Base class for all client errors."""


class ConfigurationError(LazadaError):
    """Raised when the client is built without the required credentials."""


class TransportError(LazadaError):
    """A failed dispatch or an undecodable response body.

    The message keeps the dispatch URL and the ``HTTP_ERROR`` marker so a
    single line in the logs is enough to find the failing call.
    """

    marker = HTTP_ERROR

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"{url}, {self.marker}, {message}")


class ApiError(LazadaError):
    """Lazada answered, but with a non-zero ``code`` in the envelope."""

    def __init__(
        self,
        code: Optional[str],
        message: Optional[str],
        request_id: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"{code} - {message} (request_id={request_id})")
