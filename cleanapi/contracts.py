"""Interfaces shared across the application."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from cleanapi.entity import User


class Logger(Protocol):
    """Structured logging at different levels."""

    def info(self, msg: str, *args: Any) -> None:
        """Log an informational message."""

    def error(self, msg: str, *args: Any) -> None:
        """Log an error message."""

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug message."""


class Notifier(Protocol):
    """Sends messages to recipients."""

    def send(self, to: str, subject: str, message: str) -> None:
        """Send *message* to *to*; raise on failure."""


class UserRepository(Protocol):
    """Persistence operations for users."""

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with the given id."""

    def save(self, user: User) -> None:
        """Persist *user*."""

    def delete(self, user_id: str) -> None:
        """Remove the user with the given id."""


class UserService(Protocol):
    """User-related business operations."""

    def register_user(self, name: str, email: str) -> User:
        """Create and store a new user."""

    def remove_user(self, user_id: str) -> None:
        """Delete the user with the given id."""