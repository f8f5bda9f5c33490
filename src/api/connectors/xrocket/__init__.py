"""Connector xRocket Pay: cliente HTTP, DTOs e webhook."""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import XRocketPayClient, XRocketPayConfig, create_xrocket_client

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "XRocketPayClient",
    "XRocketPayConfig",
    "create_xrocket_client",
]
