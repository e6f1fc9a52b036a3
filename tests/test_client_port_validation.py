from __future__ import annotations

import httpx
import pytest

from restclient import Client, InvalidArgument, RestError


def test_set_port_rejects_non_positive_and_keeps_previous_port() -> None:
    client = Client("http://service.local/api")
    client.set_port(8080)

    for bad in (0, -1, "0", "80abc", "not-a-port", None):
        with pytest.raises(InvalidArgument):
            client.set_port(bad)

    assert client.get_port() == 8080


def test_invalid_argument_is_a_rest_error() -> None:
    client = Client("http://service.local/api")
    with pytest.raises(RestError):
        client.set_port(-5)


def test_port_defaults_to_80_and_url_port_is_used_until_overridden() -> None:
    seen: list[int | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.port)
        return httpx.Response(200, request=request)

    client = Client("http://service.local:9000/api", transport=httpx.MockTransport(handler))
    assert client.get_port() == 80

    client.send()
    client.set_port("8081").send()

    assert seen == [9000, 8081]
