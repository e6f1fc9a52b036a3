from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from restclient.core.logging.redact import redact_headers

if TYPE_CHECKING:
    from .client import Client


class RestError(RuntimeError):
    """Base error for everything the REST client raises."""


class InvalidArgument(RestError, ValueError):
    """Raised by setters on local validation failures, before any network activity."""


class TransportError(RestError):
    """Raised when the transfer itself fails (DNS, connect, timeout, protocol)."""


def _headers_to_string(headers: Mapping[str, object]) -> str:
    lines = []
    for key, value in redact_headers(headers).items():
        if isinstance(value, (list, tuple, dict)):
            continue
        lines.append(f"\t{key}:  {value}\n")
    return "".join(lines)


class HttpError(TransportError):
    def __init__(self, message: str, status_code: int, headers: Mapping[str, object], client: Client) -> None:
        super().__init__(f"{message}\nstatus: {status_code}\nheaders:\n{_headers_to_string(headers)}")
        self.status_code = status_code
        self.headers = dict(headers)
        self.client = client

    def get_status_code(self) -> int:
        return self.status_code

    def get_headers(self) -> dict[str, object]:
        return self.headers

    def get_client(self) -> Client:
        """The client that produced the failing response, for further inspection."""
        return self.client
