"""User business logic."""

from __future__ import annotations

import os
import time
from datetime import datetime, timezone

from cleanapi.contracts import UserRepository
from cleanapi.entity import User


class InvalidEmailError(ValueError):
    """Raised when a user's e-mail address is not valid."""

    def __init__(self, message: str = "invalid email") -> None:
        super().__init__(message)


def generate_id() -> str:
    """Return a random 128-bit hex identifier, or a timestamp if randomness fails."""
    try:
        return os.urandom(16).hex()
    except OSError:
        return str(time.time_ns())


class UserUseCase:
    """Implements the user service on top of a repository."""

    def __init__(self, repo: UserRepository) -> None:
        self._repo = repo

    def register_user(self, name: str, email: str) -> User:
        """Create, validate and store a new user."""
        user = User(
            id=generate_id(),
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
        )
        if not user.is_valid_email():
            raise InvalidEmailError()
        self._repo.save(user)
        return user

    def remove_user(self, user_id: str) -> None:
        """Delete the user with the given id."""
        self._repo.delete(user_id)