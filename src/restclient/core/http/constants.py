from __future__ import annotations

from enum import IntEnum


class Method(IntEnum):
    HEAD = 0
    GET = 1
    POST = 2
    PUT = 3
    DELETE = 4
    OPTIONS = 5
    PATCH = 6


CONTENT_JSON = "application/json"
CONTENT_XML = "application/xml"
CONTENT_PLAIN = "text/plain"
CONTENT_OCTET = "application/octet-stream"
CONTENT_HTML = "text/html"
CONTENT_CSS = "text/css"
CONTENT_JS = "text/javascript"
CONTENT_FORM = "application/x-www-form-urlencoded"
CONTENT_MULTIPART = "multipart/form-data"
