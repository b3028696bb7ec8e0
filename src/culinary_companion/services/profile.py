"""Profile editing and target lookup."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Protocol

from culinary_companion.domain.profile import NutritionTargets, UserProfile
from culinary_companion.serialization import macro_goals_from_dict
from culinary_companion.services.targets import calculate_targets
from culinary_companion.state import AppState

_TEXT_FIELDS = {
    item.name for item in fields(UserProfile) if item.name != "macro_goal_overrides"
}


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def load(self) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save(self, profile: UserProfile) -> None:
        """Persist the profile."""


@dataclass
class ProfileService:
    """Service for reading and editing the profile."""

    state: AppState
    repository: ProfileRepository

    def get(self) -> UserProfile:
        """Return the current profile."""
        return self.state.profile

    def update(self, changes: Mapping[str, object]) -> UserProfile:
        """Apply field changes, persist, and return the updated profile.

        Text fields are stored as given. ``macro_goal_overrides`` is merged
        key by key.
        """
        unknown = set(changes) - _TEXT_FIELDS - {"macro_goal_overrides"}
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        updates: dict[str, object] = {}
        for name, value in changes.items():
            if name == "macro_goal_overrides":
                if not isinstance(value, Mapping):
                    raise ValueError("macro_goal_overrides must be a mapping")
                updates[name] = macro_goals_from_dict(
                    dict(value), self.state.profile.macro_goal_overrides
                )
            elif name == "activity_level" and value is None:
                updates[name] = None
            else:
                updates[name] = "" if value is None else str(value)

        profile = replace(self.state.profile, **updates)
        self.state.profile = profile
        self.repository.save(profile)
        return profile

    def replace_identity(self, name: str, email: str) -> UserProfile:
        """Copy an account's name and email onto the profile."""
        changes: dict[str, object] = {"email": email}
        if name:
            changes["name"] = name
        return self.update(changes)

    def targets(self) -> NutritionTargets:
        """Return targets for the current profile."""
        return calculate_targets(self.state.profile)

    def is_complete(self) -> bool:
        """Return True when age, height and weight are all filled in."""
        profile = self.state.profile
        metrics = (profile.age, profile.height_cm, profile.weight_kg)
        return all(value.strip() for value in metrics)
