from __future__ import annotations

import pytest

_ENV_VARS = (
    "RESTCLIENT_CONFIG",
    "RESTCLIENT_CONNECT_TIMEOUT_MS",
    "RESTCLIENT_REQUEST_TIMEOUT_MS",
    "RESTCLIENT_CONTENT_TYPE",
    "RESTCLIENT_CA_BUNDLE",
    "RESTCLIENT_USER_AGENT",
    "RESTCLIENT_LOG_LEVEL",
    "RESTCLIENT_LOG_TO_FILE",
    "RESTCLIENT_LOG_DIR",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
)


@pytest.fixture(autouse=True)
def clean_restclient_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
