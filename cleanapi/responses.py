"""JSON HTTP responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from werkzeug.wrappers import Response

from cleanapi.entity import User

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _prepare(value: Any) -> Any:
    """Shape *value* for encoding: mappings get sorted keys, users keep field order."""
    if isinstance(value, User):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {str(key): _prepare(item) for key, item in sorted(value.items(), key=lambda kv: str(kv[0]))}
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    return value


def _encode(data: Any) -> bytes:
    text = json.dumps(_prepare(data), separators=(",", ":"), ensure_ascii=False)
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return (text + "\n").encode("utf-8")


def json_response(status: int, data: Any) -> Response:
    """Return a response carrying *data* as JSON with the given status code."""
    body = b"" if data is None else _encode(data)
    return Response(body, status=status, content_type="application/json")


def error_response(status: int, message: str) -> Response:
    """Return a JSON error message with the given status code."""
    return json_response(status, {"error": message})