"""In-memory user repository."""

from dataclasses import dataclass

from netra_gallery.adapters.memory_store import InMemoryStore
from netra_gallery.domain.models import NewUser, UserRecord
from netra_gallery.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Store-backed implementation for user persistence."""

    store: InMemoryStore

    def get_user(self, user_id: int) -> UserRecord | None:
        return self.store.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        return self.store.users.first(lambda user: user.username == username)

    def create_user(self, new_user: NewUser) -> UserRecord:
        return self.store.users.insert(new_user.to_record)
