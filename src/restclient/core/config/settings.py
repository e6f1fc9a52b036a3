"""Client defaults, loaded from an optional YAML file and the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import certifi
import yaml
from pydantic import BaseModel, Field, field_validator

_DEFAULT_CONNECT_TIMEOUT_MS = 5000
_DEFAULT_REQUEST_TIMEOUT_MS = 10000
_DEFAULT_CONTENT_TYPE = "application/json"
_DEFAULT_USER_AGENT = "restclient/1.0"


class ClientSettings(BaseModel):
    connect_timeout_ms: int = Field(_DEFAULT_CONNECT_TIMEOUT_MS, ge=0)
    request_timeout_ms: int = Field(_DEFAULT_REQUEST_TIMEOUT_MS, ge=0)
    content_type: str = _DEFAULT_CONTENT_TYPE
    ca_bundle: Optional[str] = None
    user_agent: str = _DEFAULT_USER_AGENT

    @field_validator("ca_bundle")
    @classmethod
    def _blank_bundle_is_default(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def resolve_ca_bundle(self) -> str:
        """Path of the trusted root bundle used for secure transfers."""
        if self.ca_bundle:
            return str(Path(self.ca_bundle).expanduser())
        return certifi.where()


def _get_int_env(name: str, default: object) -> object:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_overrides(base: dict) -> dict:
    data = dict(base)
    for key, env_name in (
        ("connect_timeout_ms", "RESTCLIENT_CONNECT_TIMEOUT_MS"),
        ("request_timeout_ms", "RESTCLIENT_REQUEST_TIMEOUT_MS"),
    ):
        value = _get_int_env(env_name, data.get(key))
        if value is not None:
            data[key] = value
    for key, env_name in (
        ("content_type", "RESTCLIENT_CONTENT_TYPE"),
        ("ca_bundle", "RESTCLIENT_CA_BUNDLE"),
        ("user_agent", "RESTCLIENT_USER_AGENT"),
    ):
        raw = os.getenv(env_name)
        if raw is not None:
            data[key] = raw
    return data


def load_settings(path: Optional[str] = None) -> ClientSettings:
    """Load settings from YAML (explicit path or RESTCLIENT_CONFIG), then apply env overrides."""
    cfg_path = path or os.getenv("RESTCLIENT_CONFIG")
    data: dict = {}
    if cfg_path:
        with Path(cfg_path).open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    return ClientSettings.model_validate(_env_overrides(data))
