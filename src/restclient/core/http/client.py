"""Chainable REST client.

Every setter returns the client, so a request reads as one expression::

    with Client("http://example.com/rest/handler", Method.POST) as rest:
        rest.set_body(json.dumps({"test": "message"})).send()

``send`` performs exactly one blocking transfer. ``TransportError`` means no
response arrived; ``HttpError`` means a response with a status of 400 or more
arrived and has already been recorded on the client.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

import httpx

from restclient.core.config.settings import ClientSettings
from restclient.core.logging.context import log_context
from restclient.core.logging.redact import redact_header_lines

from .constants import Method
from .errors import HttpError, InvalidArgument, TransportError
from .transfer import TransferHandle

logger = logging.getLogger(__name__)

_DEFAULT_PORT = 80


def _coerce_method(method: Any) -> Method:
    if isinstance(method, Method):
        return method
    if isinstance(method, bool):
        raise InvalidArgument(f"invalid HTTP method: {method!r}, use the Method constants")
    if isinstance(method, int):
        try:
            return Method(method)
        except ValueError:
            raise InvalidArgument(f"invalid HTTP method: {method!r}, use the Method constants") from None
    if isinstance(method, str) and method.strip().upper() in Method.__members__:
        return Method[method.strip().upper()]
    raise InvalidArgument(f"invalid HTTP method: {method!r}, use the Method constants")


def _coerce_timeout(value: Any) -> int:
    try:
        timeout_ms = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"invalid timeout: {value!r}") from None
    if timeout_ms < 0:
        raise InvalidArgument(f"invalid timeout: {timeout_ms}")
    return timeout_ms


class Client:
    def __init__(
        self,
        url: str,
        method: Method | int | str = Method.GET,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()

        self._request_url = url
        self._request_port = _DEFAULT_PORT
        self._request_method: Method | None = None
        self._request_content_type = self.settings.content_type
        self._request_headers: dict[str, object] = {}
        self._request_body: str | bytes | Mapping[str, Any] | None = None
        self._connect_timeout_ms = self.settings.connect_timeout_ms
        self._request_timeout_ms = self.settings.request_timeout_ms

        self._response_status_code = -1
        self._response_headers: dict[str, str] | None = None
        self._response_body = ""
        self._response_info: dict[str, object] | None = None

        self._http = TransferHandle(user_agent=self.settings.user_agent, transport=transport)
        self.set_url(url)
        self.set_method(method)
        self.set_content_type(self.settings.content_type)
        self.set_connect_timeout(self._connect_timeout_ms)
        self.set_request_timeout(self._request_timeout_ms)

    def set_url(self, url: str) -> "Client":
        self._request_url = url
        self._http.set_url(url)
        return self

    def set_port(self, port: Any) -> "Client":
        """Override the port, taking precedence over any port in the URL."""
        try:
            value = int(port)
        except (TypeError, ValueError):
            raise InvalidArgument(f"invalid port: {port!r}") from None
        if value <= 0:
            raise InvalidArgument(f"invalid port: {value}")
        self._request_port = value
        self._http.set_port(value)
        return self

    def set_method(self, method: Method | int | str) -> "Client":
        resolved = _coerce_method(method)
        self._http.reset_method()
        self._http.apply_method(resolved.name)
        self._request_method = resolved
        return self

    def set_content_type(self, content_type: str) -> "Client":
        self._request_headers["Content-Type"] = content_type
        self._request_content_type = content_type
        return self

    def set_headers(self, headers: Mapping[str, object]) -> "Client":
        """Replace all request headers, including Content-Type and Content-Length."""
        self._request_headers = dict(headers)
        return self

    def add_headers(self, headers: Mapping[str, object]) -> "Client":
        self._request_headers.update(headers)
        return self

    def set_body(self, body: str | bytes | Mapping[str, Any]) -> "Client":
        """Set the request body.

        A string (or bytes) is sent as the raw payload and sets Content-Length.
        A mapping is sent as multipart/form-data: plain values become form
        fields, file objects and ``(filename, content[, content_type])`` tuples
        become file parts.
        """
        if isinstance(body, str):
            self._request_headers["Content-Length"] = len(body.encode("utf-8"))
        elif isinstance(body, bytes):
            self._request_headers["Content-Length"] = len(body)
        self._request_body = body
        return self

    def set_connect_timeout(self, timeout_ms: int) -> "Client":
        self._connect_timeout_ms = _coerce_timeout(timeout_ms)
        self._http.set_connect_timeout_ms(self._connect_timeout_ms)
        return self

    def set_request_timeout(self, timeout_ms: int) -> "Client":
        """Total time a request may take, in ms. Use 0 for no limit, e.g. for uploads."""
        self._request_timeout_ms = _coerce_timeout(timeout_ms)
        self._http.set_request_timeout_ms(self._request_timeout_ms)
        return self

    def _compile_headers(self) -> list[str]:
        return [f"{key}: {value}" for key, value in self._request_headers.items()]

    def send(self) -> "Client":
        method_name = self._request_method.name if self._request_method is not None else Method.GET.name
        headers = self._compile_headers()

        with log_context(request_id=uuid.uuid4().hex, method=method_name, url=self._request_url):
            self._http.set_header_lines(headers)
            self._http.set_connect_timeout_ms(self._connect_timeout_ms)
            self._http.set_body(self._request_body)
            self._http.set_ca_bundle(self.settings.resolve_ca_bundle())
            logger.debug("sending request", extra={"extra_fields": {"headers": redact_header_lines(headers)}})

            try:
                result = self._http.perform()
            except TransportError as exc:
                logger.warning("request failed: %s", exc)
                raise

            self._response_headers = result.headers
            self._response_status_code = result.status_code
            self._response_body = result.body
            self._response_info = result.info

            if self._response_status_code > 399:
                logger.info("request came back with status %s", self._response_status_code)
                raise HttpError(
                    "The request came back with an error",
                    self._response_status_code,
                    self._response_headers,
                    self,
                )

            logger.debug("request completed with status %s", self._response_status_code)
        return self

    def get_response_headers(self) -> dict[str, str] | None:
        return self._response_headers

    def get_response_body(self) -> str:
        return self._response_body

    def get_response_status_code(self) -> int:
        return self._response_status_code

    def get_response_info(self) -> dict[str, object] | None:
        return self._response_info

    def get_url(self) -> str:
        return self._request_url

    def get_port(self) -> int:
        return self._request_port

    def get_method(self) -> Method | None:
        return self._request_method

    def get_content_type(self) -> str:
        return self._request_content_type

    def get_headers(self) -> dict[str, object]:
        return dict(self._request_headers)

    def get_body(self) -> str | bytes | Mapping[str, Any] | None:
        return self._request_body

    def get_connect_timeout(self) -> int:
        return self._connect_timeout_ms

    def get_request_timeout(self) -> int:
        return self._request_timeout_ms

    @property
    def closed(self) -> bool:
        return self._http.closed

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
