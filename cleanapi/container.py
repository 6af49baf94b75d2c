"""Dependency wiring for the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from cleanapi.contracts import UserRepository, UserService
from cleanapi.entity import User
from cleanapi.handlers import HealthHandler, UserHandler
from cleanapi.usecase import UserUseCase


@dataclass
class AppContainer:
    """Groups the application's dependencies."""

    user_service: UserService
    user_handler: UserHandler
    health_handler: HealthHandler


@dataclass
class DummyUserRepository:
    """A minimal in-memory user repository."""

    _users: Dict[str, User] = field(default_factory=dict, repr=False)

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the stored user with *user_id*, or None."""
        return self._users.get(user_id)

    def save(self, user: Optional[User]) -> None:
        """Store *user* in memory; None is ignored."""
        if user is not None:
            self._users[user.id] = user

    def delete(self, user_id: str) -> None:
        """Remove the user with *user_id* if it is stored."""
        self._users.pop(user_id, None)


def new_user_repository() -> UserRepository:
    """Return the repository used by the application."""
    return DummyUserRepository()


def new_user_service(repo: UserRepository) -> UserService:
    """Build the user service on top of *repo*."""
    return UserUseCase(repo)


def new_user_handler(service: UserService) -> UserHandler:
    """Build the HTTP handler for users."""
    return UserHandler(service)


def build_container(version: str) -> AppContainer:
    """Assemble all dependencies of the application."""
    service = new_user_service(new_user_repository())
    return AppContainer(
        user_service=service,
        user_handler=new_user_handler(service),
        health_handler=HealthHandler(version),
    )