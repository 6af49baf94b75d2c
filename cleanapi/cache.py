"""Caching of users in a Redis-like key-value store."""

from __future__ import annotations

import json
from typing import Any, Optional, Protocol, Union

from cleanapi.entity import User, user_from_dict


class CacheMissError(KeyError):
    """Raised when a key is not present in the cache."""


class _RedisClient(Protocol):
    def set(self, name: str, value: Any) -> Any: ...

    def get(self, name: str) -> Optional[Union[bytes, str]]: ...


class RedisUserCache:
    """Stores users as JSON documents keyed by their id."""

    def __init__(self, client: _RedisClient) -> None:
        self._client = client

    def set_user(self, user: User) -> None:
        """Cache *user* without expiry."""
        self._client.set(user.id, json.dumps(user.to_dict()))

    def get_user(self, user_id: str) -> User:
        """Return the cached user; raise CacheMissError when absent."""
        value = self._client.get(user_id)
        if value is None:
            raise CacheMissError(user_id)
        return user_from_dict(json.loads(value))