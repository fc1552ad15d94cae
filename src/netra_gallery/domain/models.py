"""Domain models for site users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewUser:
    """Caller-supplied fields for a user."""

    username: str
    password: str

    def to_record(self, user_id: int) -> "UserRecord":
        """Return the stored user for the assigned id."""
        return UserRecord(id=user_id, username=self.username, password=self.password)


@dataclass(frozen=True)
class UserRecord:
    """Represents a user held by the store."""

    id: int
    username: str
    password: str
