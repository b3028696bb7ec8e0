"""Single-owner application state."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from culinary_companion.domain.meals import FoodLogEntry
from culinary_companion.domain.profile import UserProfile
from culinary_companion.domain.recipes import Recipe

if TYPE_CHECKING:
    from culinary_companion.services.meals import FoodLogRepository
    from culinary_companion.services.profile import ProfileRepository
    from culinary_companion.services.recipes import RecipeRepository


@dataclass
class AppState:
    """In-memory copy of everything the local user has stored.

    Loaded once at startup. Services change it and write the affected blob
    right after each change.
    """

    profile: UserProfile = field(default_factory=UserProfile)
    history: list[FoodLogEntry] = field(default_factory=list)
    saved_recipes: list[Recipe] = field(default_factory=list)
    signed_in_email: str | None = None

    @classmethod
    def load(
        cls,
        profile_repository: "ProfileRepository",
        food_log_repository: "FoodLogRepository",
        recipe_repository: "RecipeRepository",
    ) -> "AppState":
        """Read the stored blobs, falling back to defaults."""
        return cls(
            profile=profile_repository.load() or UserProfile(),
            history=food_log_repository.load(),
            saved_recipes=recipe_repository.load(),
        )
