"""Profile persistence in the local blob store."""

from dataclasses import dataclass

from culinary_companion.adapters.json_store import BlobStore
from culinary_companion.domain.profile import UserProfile
from culinary_companion.serialization import profile_from_dict, profile_to_dict
from culinary_companion.services.profile import ProfileRepository

PROFILE_BLOB = "culinary_profile"


@dataclass
class LocalProfileRepository(ProfileRepository):
    """Blob-backed repository for the user profile."""

    store: BlobStore

    def load(self) -> UserProfile | None:
        """Return the stored profile, migrating older saves."""
        data = self.store.read(PROFILE_BLOB)
        if not isinstance(data, dict):
            return None
        return profile_from_dict(data)

    def save(self, profile: UserProfile) -> None:
        """Persist the profile."""
        self.store.write(PROFILE_BLOB, profile_to_dict(profile))
