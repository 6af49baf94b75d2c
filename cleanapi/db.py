"""User repository backed by a PostgreSQL database."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from cleanapi.entity import User

_FIND_QUERY = "SELECT id, name, email, created_at FROM users WHERE id = %s"
_INSERT_QUERY = "INSERT INTO users (id, name, email, created_at) VALUES (%s, %s, %s, %s)"
_DELETE_QUERY = "DELETE FROM users WHERE id = %s"


class _Cursor(Protocol):
    def fetchone(self) -> Optional[Sequence[Any]]: ...


class _Executor(Protocol):
    def execute(self, query: str, params: Sequence[Any]) -> _Cursor: ...


class PostgresUserRepository:
    """Stores users in the ``users`` table through a DB-API style connection."""

    def __init__(self, db: _Executor) -> None:
        self._db = db

    def find_by_id(self, user_id: str) -> User:
        """Return the user with the given id; raise LookupError when absent."""
        row = self._db.execute(_FIND_QUERY, (user_id,)).fetchone()
        if row is None:
            raise LookupError(f"user {user_id!r} not found")
        record_id, name, email, created_at = row
        return User(id=record_id, name=name, email=email, created_at=created_at)

    def save(self, user: User) -> None:
        """Insert a new user."""
        self._db.execute(_INSERT_QUERY, (user.id, user.name, user.email, user.created_at))

    def delete(self, user_id: str) -> None:
        """Remove the user with the given id."""
        self._db.execute(_DELETE_QUERY, (user_id,))