from __future__ import annotations

import httpx
import pytest

from restclient import Client, TransportError


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, request=request)


def test_close_is_idempotent_and_safe_without_send() -> None:
    client = Client("http://service.local/api")
    client.close()
    client.close()
    assert client.closed


def test_context_manager_releases_handle_on_error() -> None:
    with pytest.raises(RuntimeError):
        with Client("http://service.local/api", transport=httpx.MockTransport(_ok)) as client:
            client.send()
            raise RuntimeError("caller failure")

    assert client.closed


def test_send_after_close_raises_transport_error() -> None:
    client = Client("http://service.local/api", transport=httpx.MockTransport(_ok))
    client.close()

    with pytest.raises(TransportError):
        client.send()
