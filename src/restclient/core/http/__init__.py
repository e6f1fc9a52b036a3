from .client import Client
from .constants import (
    CONTENT_CSS,
    CONTENT_FORM,
    CONTENT_HTML,
    CONTENT_JS,
    CONTENT_JSON,
    CONTENT_MULTIPART,
    CONTENT_OCTET,
    CONTENT_PLAIN,
    CONTENT_XML,
    Method,
)
from .errors import HttpError, InvalidArgument, RestError, TransportError
from .transfer import TransferHandle, TransferResult

__all__ = [
    "Client",
    "Method",
    "TransferHandle",
    "TransferResult",
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
