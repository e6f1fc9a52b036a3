from __future__ import annotations

import re
from collections.abc import Mapping

_SECRET_HEADER_RE = re.compile(r"(AUTHORIZATION|COOKIE|TOKEN|KEY|SECRET)", re.IGNORECASE)
_SECRET_VALUE_RE = re.compile(r"(?i)(token|key|secret)(\s*[=:]\s*)([^\s,;&]+)")
_BEARER_RE = re.compile(r"(?i)(bearer\s+)([^\s]+)")


def redact_string(s: str) -> str:
    redacted = _SECRET_VALUE_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}***", s)
    redacted = _BEARER_RE.sub(lambda m: f"{m.group(1)}***", redacted)
    return redacted


def redact_headers(headers: Mapping[str, object]) -> dict[str, object]:
    output = dict(headers)
    for key in list(output.keys()):
        if _SECRET_HEADER_RE.search(str(key)):
            output[key] = "***"
    return output


def redact_header_lines(lines: list[str]) -> list[str]:
    output = []
    for line in lines:
        name, sep, _ = line.partition(":")
        if sep and _SECRET_HEADER_RE.search(name):
            output.append(f"{name}: ***")
        else:
            output.append(redact_string(line))
    return output
