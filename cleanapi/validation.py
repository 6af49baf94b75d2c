"""E-mail address validation."""

import re

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")


def is_valid_email(email: str) -> bool:
    """Return True when *email* looks like a valid address (minimal check)."""
    return _EMAIL_PATTERN.fullmatch(email) is not None