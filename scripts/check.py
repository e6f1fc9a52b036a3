#!/usr/bin/env python3
"""Environment check for the REST client: interpreter, install, settings, CA bundle, reachability."""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REQUIRED_PYTHON = (3, 11)


def _check_url(url: str) -> tuple[bool, str]:
    from restclient import Client, HttpError, Method, RestError

    try:
        with Client(url, Method.HEAD) as client:
            client.send()
            return True, f"HTTP {client.get_response_status_code()}"
    except HttpError as exc:
        # Any response proves the endpoint is reachable.
        return True, f"HTTP {exc.get_status_code()}"
    except RestError as exc:
        return False, str(exc).splitlines()[0]


def main() -> int:
    errors: list[str] = []

    if sys.version_info >= REQUIRED_PYTHON:
        print(f"OK: Python {sys.version.split()[0]} (>= 3.11)")
    else:
        errors.append("Python 3.11+ is required. Fix: install Python 3.11+ and recreate your virtual environment.")

    try:
        importlib.import_module("restclient")
        print("OK: import restclient")
    except Exception as exc:
        errors.append(f"Could not import restclient ({exc}). Fix: run `python -m pip install -e .[dev]` from repo root.")
        for message in errors:
            print(f"ERROR: {message}")
        return 1

    from restclient import configure_logging, load_settings

    configure_logging()

    try:
        settings = load_settings()
        print(
            "OK: settings loaded "
            f"(connect_timeout_ms={settings.connect_timeout_ms}, request_timeout_ms={settings.request_timeout_ms})"
        )
    except Exception as exc:
        errors.append(f"Settings could not be loaded: {exc}. Fix: verify RESTCLIENT_CONFIG and RESTCLIENT_* values.")
        settings = None

    if settings is not None:
        bundle = Path(settings.resolve_ca_bundle())
        if bundle.is_file() and os.access(bundle, os.R_OK):
            print(f"OK: CA bundle readable at {bundle}")
        else:
            errors.append(f"CA bundle is missing or unreadable at {bundle}. Fix: set RESTCLIENT_CA_BUNDLE or reinstall certifi.")

    probe_url = os.getenv("RESTCLIENT_CHECK_URL", "").strip()
    if probe_url:
        reachable, detail = _check_url(probe_url)
        if reachable:
            print(f"OK: {probe_url} is reachable ({detail})")
        else:
            errors.append(f"{probe_url} is unreachable: {detail}. Fix: verify the URL and network access.")
    else:
        print("OK: reachability probe skipped (RESTCLIENT_CHECK_URL unset)")

    if errors:
        for message in errors:
            print(f"ERROR: {message}")
        return 1

    print("OK: environment check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
