"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from netra_gallery.domain.models import NewUser, UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the first user with the exact username, if present."""

    def create_user(self, new_user: NewUser) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lookups and registration."""

    repository: UserRepository

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by username; matching is case-sensitive."""
        return self.repository.get_by_username(username)

    def create_user(self, new_user: NewUser) -> UserRecord:
        """Create a user. Usernames are not checked for uniqueness."""
        return self.repository.create_user(new_user)
