"""Chainable HTTP request/response client built on httpx."""

from restclient.core.config import ClientSettings, load_settings
from restclient.core.http import (
    CONTENT_CSS,
    CONTENT_FORM,
    CONTENT_HTML,
    CONTENT_JS,
    CONTENT_JSON,
    CONTENT_MULTIPART,
    CONTENT_OCTET,
    CONTENT_PLAIN,
    CONTENT_XML,
    Client,
    HttpError,
    InvalidArgument,
    Method,
    RestError,
    TransportError,
)
from restclient.core.logging import configure_logging

__version__ = "1.0.0"

__all__ = [
    "Client",
    "Method",
    "ClientSettings",
    "load_settings",
    "configure_logging",
    "RestError",
    "InvalidArgument",
    "TransportError",
    "HttpError",
    "CONTENT_JSON",
    "CONTENT_XML",
    "CONTENT_PLAIN",
    "CONTENT_OCTET",
    "CONTENT_HTML",
    "CONTENT_CSS",
    "CONTENT_JS",
    "CONTENT_FORM",
    "CONTENT_MULTIPART",
]
