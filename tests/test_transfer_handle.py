from __future__ import annotations

import httpx
import pytest

from restclient.core.http.errors import TransportError
from restclient.core.http.transfer import TransferHandle, parse_header_lines


def test_parse_header_lines_splits_on_first_colon() -> None:
    lines = ["Content-Type: application/json", "X-Time: 12:30", "broken", ": empty-name"]
    assert parse_header_lines(lines) == [("Content-Type", "application/json"), ("X-Time", "12:30")]


def test_reset_method_falls_back_to_get() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.method)
        return httpx.Response(200, request=request)

    with TransferHandle(transport=httpx.MockTransport(handler)) as handle:
        handle.set_url("http://service.local/api")
        handle.apply_method("patch")
        handle.perform()
        handle.reset_method()
        handle.perform()

    assert seen == ["PATCH", "GET"]
    assert handle.closed


def test_unreadable_ca_bundle_is_a_transport_error(tmp_path) -> None:
    handle = TransferHandle()
    handle.set_url("https://service.local/api")
    handle.set_ca_bundle(str(tmp_path / "missing.pem"))

    with pytest.raises(TransportError):
        handle.perform()
    handle.close()
