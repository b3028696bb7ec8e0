"""Saved recipe book."""

from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.recipes import Recipe
from culinary_companion.state import AppState


class RecipeRepository(Protocol):
    """Persistence interface for saved recipes."""

    def load(self) -> list[Recipe]:
        """Return saved recipes, most recently saved first."""

    def save(self, recipes: list[Recipe]) -> None:
        """Persist saved recipes."""


@dataclass
class RecipeBookService:
    """Keeps saved recipes unique by exact title."""

    state: AppState
    repository: RecipeRepository

    def saved(self) -> list[Recipe]:
        """Return saved recipes, most recently saved first."""
        return list(self.state.saved_recipes)

    def is_saved(self, title: str) -> bool:
        """Return True when a recipe with this exact title is saved."""
        return any(recipe.title == title for recipe in self.state.saved_recipes)

    def save(self, recipe: Recipe) -> bool:
        """Save a recipe unless one with the same title exists."""
        if self.is_saved(recipe.title):
            return False
        self._store([recipe, *self.state.saved_recipes])
        return True

    def delete(self, title: str) -> bool:
        """Delete saved recipes with this exact title."""
        remaining = [r for r in self.state.saved_recipes if r.title != title]
        if len(remaining) == len(self.state.saved_recipes):
            return False
        self._store(remaining)
        return True

    def _store(self, recipes: list[Recipe]) -> None:
        self.repository.save(recipes)
        self.state.saved_recipes = recipes
