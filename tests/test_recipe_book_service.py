"""Tests for the saved recipe book and cooking walkthrough."""

import pytest

from culinary_companion.domain.recipes import Recipe
from culinary_companion.services.cooking import CookingWalkthrough
from culinary_companion.services.recipes import RecipeBookService
from culinary_companion.state import AppState
from tests.conftest import PASTA_RECIPE, InMemoryRecipeRepository, make_recipe


@pytest.fixture
def book(
    state: AppState, recipe_repository: InMemoryRecipeRepository
) -> RecipeBookService:
    return RecipeBookService(state, recipe_repository)


def test_save_prepends_and_persists(
    book: RecipeBookService, recipe_repository: InMemoryRecipeRepository
) -> None:
    first = make_recipe(title="Soup")
    second = make_recipe(title="Salad")

    assert book.save(first)
    assert book.save(second)

    assert [recipe.title for recipe in book.saved()] == ["Salad", "Soup"]
    assert recipe_repository.recipes == book.saved()


def test_save_skips_duplicate_title(book: RecipeBookService) -> None:
    book.save(make_recipe())

    assert not book.save(make_recipe(cuisine="Fusion"))
    assert len(book.saved()) == 1
    assert book.saved()[0].cuisine == "Italian"


def test_titles_compare_exactly(book: RecipeBookService) -> None:
    book.save(make_recipe(title="Pasta"))

    assert book.save(make_recipe(title="pasta"))
    assert book.is_saved("Pasta")
    assert not book.is_saved("PASTA")


def test_delete_removes_by_title(book: RecipeBookService) -> None:
    book.save(make_recipe(title="Soup"))

    assert book.delete("Soup")
    assert not book.delete("Soup")
    assert book.saved() == []


def test_recipe_normalizes_generated_values() -> None:
    recipe = Recipe.model_validate(
        {**PASTA_RECIPE, "servings": 2.6, "difficulty": "hard"}
    )

    assert recipe.servings == 3
    assert recipe.difficulty == "Hard"
    assert Recipe.model_validate({**PASTA_RECIPE, "difficulty": "???"}).difficulty == (
        "Medium"
    )


def test_walkthrough_moves_and_clamps() -> None:
    walkthrough = CookingWalkthrough(make_recipe())

    assert walkthrough.is_first
    assert walkthrough.previous() is walkthrough
    assert walkthrough.label == "Step 1 of 3"

    last = walkthrough.next().next()

    assert last.is_last
    assert last.current_step == "Toss everything with lemon juice."
    assert last.progress_percent == 100
    assert last.next() is last


def test_walkthrough_rejects_empty_or_out_of_range() -> None:
    with pytest.raises(ValueError):
        CookingWalkthrough(make_recipe(instructions=[]))
    with pytest.raises(ValueError):
        CookingWalkthrough(make_recipe(), step_index=3)
