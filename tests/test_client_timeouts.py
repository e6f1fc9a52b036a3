from __future__ import annotations

import httpx
import pytest

from restclient import Client, ClientSettings, InvalidArgument


def _capture_timeouts(captured: list[dict]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(dict(request.extensions["timeout"]))
        return httpx.Response(200, request=request)

    return httpx.MockTransport(handler)


def test_default_timeouts_are_applied_in_seconds() -> None:
    captured: list[dict] = []
    client = Client("http://service.local/api", transport=_capture_timeouts(captured))

    assert client.get_connect_timeout() == 5000
    assert client.get_request_timeout() == 10000
    client.send()

    assert captured[0] == {"connect": 5.0, "read": 10.0, "write": 10.0, "pool": 10.0}


def test_zero_timeout_means_unlimited() -> None:
    captured: list[dict] = []
    client = Client("http://service.local/upload", transport=_capture_timeouts(captured))

    client.set_request_timeout(0).set_connect_timeout(250).send()

    assert captured[0] == {"connect": 0.25, "read": None, "write": None, "pool": None}


def test_negative_timeout_is_rejected() -> None:
    client = Client("http://service.local/api")
    with pytest.raises(InvalidArgument):
        client.set_connect_timeout(-1)
    assert client.get_connect_timeout() == 5000


def test_settings_supply_defaults() -> None:
    settings = ClientSettings(connect_timeout_ms=1000, request_timeout_ms=2000, content_type="text/plain")
    client = Client("http://service.local/api", settings=settings)

    assert client.get_connect_timeout() == 1000
    assert client.get_request_timeout() == 2000
    assert client.get_content_type() == "text/plain"


def test_request_timeout_bounds_connect_phase() -> None:
    captured: list[dict] = []
    client = Client("http://service.local/api", transport=_capture_timeouts(captured))

    client.set_connect_timeout(0).send()
    client.set_connect_timeout(60000).send()

    assert captured[0]["connect"] == 10.0
    assert captured[1]["connect"] == 10.0


def test_fully_unlimited_timeouts() -> None:
    captured: list[dict] = []
    client = Client("http://service.local/api", transport=_capture_timeouts(captured))

    client.set_connect_timeout(0).set_request_timeout(0).send()

    assert captured[0] == {"connect": None, "read": None, "write": None, "pool": None}
