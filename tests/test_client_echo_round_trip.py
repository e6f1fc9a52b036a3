from __future__ import annotations

import json

import httpx

from restclient import Client, Method


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        request=request,
        json={
            "method": request.method,
            "headers": dict(request.headers),
            "body": request.content.decode("utf-8"),
        },
    )


def test_post_with_body_and_headers_is_echoed() -> None:
    payload = json.dumps({"test": "message"})
    client = Client("http://service.local/echo", Method.POST, transport=httpx.MockTransport(_echo))

    result = client.add_headers({"X-Requested-With": "xmlhttprequest"}).set_body(payload).send()

    assert result is client
    assert client.get_response_status_code() == 200
    echoed = json.loads(client.get_response_body())
    assert echoed["method"] == "POST"
    assert echoed["body"] == payload
    assert echoed["headers"]["x-requested-with"] == "xmlhttprequest"
    assert echoed["headers"]["content-type"] == "application/json"
    assert echoed["headers"]["content-length"] == str(len(payload))


def test_response_headers_and_info_are_captured() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, request=request, headers={"X-Trace": "abc"}, text="created")

    client = Client("http://service.local/items", Method.PUT, transport=httpx.MockTransport(handler))
    assert client.get_response_headers() is None
    assert client.get_response_info() is None

    client.set_body("{}").send()

    assert client.get_response_status_code() == 201
    assert client.get_response_body() == "created"
    assert client.get_response_headers()["X-Trace"] == "abc"
    info = client.get_response_info()
    assert info["http_code"] == 201
    assert info["url"] == "http://service.local/items"
