"""
PetHealth API Exceptions.

Closed error taxonomy for the remote client. Every failure is an
``APIError`` subclass carrying an ``APIErrorKind`` so callers can either
catch by class or match on ``error.kind``.
"""

from enum import Enum


class APIErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    NO_RESPONSE_BODY = "no_response_body"
    DECODING_ERROR = "decoding_error"
    SERVER_ERROR = "server_error"
    UNAUTHORIZED = "unauthorized"
    TRANSPORT_ERROR = "transport_error"


class APIError(Exception):
    """Base class for every remote client failure."""

    kind: APIErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def user_message(self) -> str:
        """Text suitable for an alert shown to the user."""
        return self.message


class InvalidURLError(APIError):
    kind = APIErrorKind.INVALID_URL

    def __init__(self, url: str):
        self.url = url
        super().__init__("Invalid URL")


class NoResponseBodyError(APIError):
    """The server answered 2xx with an empty body where a payload was expected."""

    kind = APIErrorKind.NO_RESPONSE_BODY

    def __init__(self, status_code: int | None = None):
        self.status_code = status_code
        super().__init__("No data received")


class DecodingError(APIError):
    """A 2xx body did not match the expected response shape."""

    kind = APIErrorKind.DECODING_ERROR

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("Failed to decode response")


class ServerError(APIError):
    """
    Any non-2xx, non-401 status.

    ``message`` is the server's own error message when the body carries one,
    otherwise ``"Server error: <status>"``.
    """

    kind = APIErrorKind.SERVER_ERROR

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class UnauthorizedError(APIError):
    kind = APIErrorKind.UNAUTHORIZED

    def __init__(self):
        self.status_code = 401
        super().__init__("Unauthorized. Please log in again.")


class TransportError(APIError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""

    kind = APIErrorKind.TRANSPORT_ERROR

    def __init__(self, underlying: Exception):
        self.underlying = underlying
        super().__init__(str(underlying) or type(underlying).__name__)
