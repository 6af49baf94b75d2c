"""Domain entities."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from cleanapi.validation import is_valid_email as _is_valid_email

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"\.(\d+)")


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_time(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


@dataclass
class User:
    """A system user with basic attributes."""

    id: str = ""
    name: str = ""
    email: str = ""
    created_at: datetime = field(default_factory=lambda: _ZERO_TIME)

    def is_valid_email(self) -> bool:
        """Return True when the user's e-mail address passes validation."""
        return _is_valid_email(self.email)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready representation of the user."""
        return {
            "ID": self.id,
            "Name": self.name,
            "Email": self.email,
            "CreatedAt": _format_time(self.created_at),
        }


def user_from_dict(data: Any) -> User:
    """Build a User from its JSON representation; missing fields keep their defaults."""
    if not isinstance(data, Mapping):
        raise ValueError("user data must be a JSON object")
    fields = {str(key).lower(): value for key, value in data.items()}
    user = User()
    for key, attr in (("id", "id"), ("name", "name"), ("email", "email")):
        if key in fields and fields[key] is not None:
            value = fields[key]
            if not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string")
            setattr(user, attr, value)
    created = fields.get("createdat")
    if created is not None:
        if not isinstance(created, str):
            raise ValueError("field 'CreatedAt' must be a string")
        user.created_at = _parse_time(created)
    return user