"""Credential list persistence in the local blob store."""

from dataclasses import dataclass

from culinary_companion.adapters.json_store import BlobStore
from culinary_companion.domain.models import StoredUser
from culinary_companion.serialization import user_from_dict, user_to_dict
from culinary_companion.services.users import UserRepository

USERS_BLOB = "culinary_users"


@dataclass
class LocalUserRepository(UserRepository):
    """Blob-backed repository for local accounts."""

    store: BlobStore

    def load(self) -> list[StoredUser]:
        """Return all stored accounts."""
        data = self.store.read(USERS_BLOB)
        if not isinstance(data, list):
            return []
        return [user_from_dict(row) for row in data if isinstance(row, dict)]

    def save(self, users: list[StoredUser]) -> None:
        """Persist all accounts."""
        self.store.write(USERS_BLOB, [user_to_dict(user) for user in users])
