"""
Clients for the PetHealth REST API.
"""

from .exceptions import (
    APIError,
    APIErrorKind,
    DecodingError,
    InvalidURLError,
    NoResponseBodyError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from .pethealth_api_client import PetHealthAPIClient

__all__ = [
    "APIError",
    "APIErrorKind",
    "DecodingError",
    "InvalidURLError",
    "NoResponseBodyError",
    "PetHealthAPIClient",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
]
