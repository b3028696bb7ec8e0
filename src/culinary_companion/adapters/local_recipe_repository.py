"""Saved recipe persistence in the local blob store."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from culinary_companion.adapters.json_store import BlobStore
from culinary_companion.domain.recipes import Recipe
from culinary_companion.services.recipes import RecipeRepository

SAVED_RECIPES_BLOB = "culinary_saved_recipes"

_logger = logging.getLogger(__name__)


@dataclass
class LocalRecipeRepository(RecipeRepository):
    """Blob-backed repository for saved recipes."""

    store: BlobStore

    def load(self) -> list[Recipe]:
        """Return saved recipes, skipping rows that fail validation."""
        data = self.store.read(SAVED_RECIPES_BLOB)
        if not isinstance(data, list):
            return []
        recipes = []
        for row in data:
            try:
                recipes.append(Recipe.model_validate(row))
            except ValidationError:
                _logger.warning("Skipping unreadable saved recipe")
        return recipes

    def save(self, recipes: list[Recipe]) -> None:
        """Persist saved recipes."""
        self.store.write(
            SAVED_RECIPES_BLOB,
            [recipe.model_dump(mode="json", by_alias=True) for recipe in recipes],
        )
