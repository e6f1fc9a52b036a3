"""Stateful transfer handle on top of httpx.

A handle is configured option by option, then performed any number of times.
It owns one ``httpx.Client`` which is created on first use and rebuilt when the
trusted certificate bundle changes.
"""

from __future__ import annotations

import logging
import ssl
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .errors import InvalidArgument, TransportError

logger = logging.getLogger(__name__)

_MULTIPART_DROPPED_HEADERS = {"content-type", "content-length"}


@dataclass
class TransferResult:
    status_code: int
    headers: dict[str, str]
    body: str
    info: dict[str, object] = field(default_factory=dict)


def _ms_to_seconds(value_ms: int) -> float | None:
    if value_ms <= 0:
        return None
    return value_ms / 1000.0


def parse_header_lines(lines: list[str]) -> list[tuple[str, str]]:
    parsed: list[tuple[str, str]] = []
    for line in lines:
        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            continue
        parsed.append((name, value.strip()))
    return parsed


def _encode_headers(headers: list[tuple[str, str]]) -> list[tuple[bytes, bytes]]:
    """Header names must be ASCII; values are sent as raw UTF-8 bytes."""
    encoded: list[tuple[bytes, bytes]] = []
    for name, value in headers:
        try:
            raw_name = name.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidArgument(f"invalid header name: {name!r}") from None
        encoded.append((raw_name, value.encode("utf-8")))
    return encoded


def _multipart_part(value: Any) -> Any:
    if isinstance(value, tuple) or hasattr(value, "read"):
        return value
    if isinstance(value, bytes):
        return (None, value)
    return (None, str(value))


def _collect_headers(response: httpx.Response) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw_key, raw_value in response.headers.raw:
        key = raw_key.decode("latin-1")
        value = raw_value.decode("latin-1")
        if key in headers:
            headers[key] = f"{headers[key]}, {value}"
        else:
            headers[key] = value
    return headers


class TransferHandle:
    def __init__(
        self,
        *,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.Client | None = None
        self._closed = False

        self._url = ""
        self._port: int | None = None
        self._method: str | None = None
        self._header_lines: list[str] = []
        self._body: str | bytes | Mapping[str, Any] | None = None
        self._connect_timeout_ms = 0
        self._request_timeout_ms = 0
        self._ca_bundle: str | None = None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def method(self) -> str | None:
        return self._method

    def set_url(self, url: str) -> None:
        self._url = url

    def set_port(self, port: int) -> None:
        self._port = port

    def reset_method(self) -> None:
        self._method = None

    def apply_method(self, verb: str) -> None:
        self._method = verb.upper()

    def set_header_lines(self, lines: list[str]) -> None:
        self._header_lines = list(lines)

    def set_body(self, body: str | bytes | Mapping[str, Any] | None) -> None:
        self._body = body

    def set_connect_timeout_ms(self, value_ms: int) -> None:
        self._connect_timeout_ms = value_ms

    def set_request_timeout_ms(self, value_ms: int) -> None:
        self._request_timeout_ms = value_ms

    def set_ca_bundle(self, path: str) -> None:
        if path == self._ca_bundle:
            return
        self._ca_bundle = path
        if self._client is not None:
            self._client.close()
            self._client = None

    def _build_timeout(self) -> httpx.Timeout:
        request_s = _ms_to_seconds(self._request_timeout_ms)
        connect_s = _ms_to_seconds(self._connect_timeout_ms)
        # Connect never exceeds the request timeout.
        if request_s is not None:
            connect_s = request_s if connect_s is None else min(connect_s, request_s)
        return httpx.Timeout(
            connect=connect_s,
            read=request_s,
            write=request_s,
            pool=request_s,
        )

    def _ensure_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client

        headers = {"User-Agent": self._user_agent} if self._user_agent else None
        if self._transport is not None:
            self._client = httpx.Client(transport=self._transport, headers=headers, follow_redirects=False)
            return self._client

        verify: ssl.SSLContext | bool = True
        if self._ca_bundle:
            try:
                verify = ssl.create_default_context(cafile=self._ca_bundle)
            except (OSError, ssl.SSLError) as exc:
                raise TransportError(f"transfer error: cannot load CA bundle {self._ca_bundle}: {exc}") from exc
        self._client = httpx.Client(verify=verify, headers=headers, follow_redirects=False)
        return self._client

    def _request_kwargs(self) -> dict[str, Any]:
        lines = parse_header_lines(self._header_lines)
        if isinstance(self._body, Mapping):
            lines = [(k, v) for k, v in lines if k.lower() not in _MULTIPART_DROPPED_HEADERS]
        headers = _encode_headers(lines)
        body = self._body
        if isinstance(body, Mapping):
            return {"headers": headers, "files": {str(k): _multipart_part(v) for k, v in body.items()}}
        if isinstance(body, str):
            return {"headers": headers, "content": body.encode("utf-8")}
        if isinstance(body, bytes):
            return {"headers": headers, "content": body}
        return {"headers": headers}

    def perform(self) -> TransferResult:
        if self._closed:
            raise TransportError("transfer error: handle is closed")

        client = self._ensure_client()
        method = self._method or "GET"
        try:
            url = httpx.URL(self._url)
            if self._port is not None:
                url = url.copy_with(port=self._port)
            request = client.build_request(method, url, timeout=self._build_timeout(), **self._request_kwargs())
            logger.debug("transfer start %s %s", method, url)
            started = time.perf_counter()
            response = client.send(request)
            total_time = time.perf_counter() - started
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"transfer error: {exc.__class__.__name__}: {exc}") from exc

        result = TransferResult(
            status_code=response.status_code,
            headers=_collect_headers(response),
            body=response.text,
            info={
                "url": str(response.url),
                "http_code": response.status_code,
                "content_type": response.headers.get("content-type"),
                "total_time": total_time,
                "http_version": response.http_version,
            },
        )
        logger.debug("transfer done %s %s -> %s", method, url, result.status_code)
        return result

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "TransferHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
