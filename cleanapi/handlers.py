"""HTTP handlers for health and user endpoints."""

from __future__ import annotations

import json
from dataclasses import dataclass

from werkzeug.wrappers import Request, Response

from cleanapi.contracts import UserService
from cleanapi.responses import error_response, json_response

_JSON_WHITESPACE = " \t\r\n"


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON constant {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _decode_registration(body: bytes) -> tuple[str, str]:
    """Return (name, email) from the first JSON value of *body*; raise ValueError."""
    text = body.decode("utf-8", errors="replace").lstrip(_JSON_WHITESPACE)
    value, _ = _DECODER.raw_decode(text)
    if value is None:
        return "", ""
    if not isinstance(value, dict):
        raise ValueError("request body must be a JSON object")
    fields = {"name": "", "email": ""}
    for key, item in value.items():
        field_name = key.lower()
        if field_name not in fields or item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(f"field {key!r} must be a string")
        fields[field_name] = item
    return fields["name"], fields["email"]


@dataclass
class HealthHandler:
    """Reports API status and version."""

    version: str

    def status(self, request: Request) -> Response:
        """Return the API status and version."""
        return json_response(200, {"status": "ok", "version": self.version})


class UserHandler:
    """Adapts the user service to HTTP."""

    def __init__(self, service: UserService) -> None:
        self._service = service

    def register(self, request: Request) -> Response:
        """Handle a user registration request."""
        try:
            name, email = _decode_registration(request.get_data())
        except ValueError:
            return error_response(400, "invalid request body")
        try:
            user = self._service.register_user(name, email)
        except Exception as exc:  # any service failure becomes a server error
            return error_response(500, str(exc))
        return json_response(201, user)

    def delete(self, request: Request, user_id: str) -> Response:
        """Handle removal of the user with the given id."""
        if not user_id:
            return error_response(400, "missing id")
        try:
            self._service.remove_user(user_id)
        except Exception as exc:  # any service failure becomes a server error
            return error_response(500, str(exc))
        return Response(status=204)