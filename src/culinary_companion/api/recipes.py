"""Recipe generation, saved recipes and cooking walkthrough endpoints."""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request, status

from culinary_companion.api.dependencies import ai_failure, get_container
from culinary_companion.api.models import (
    ImageRequest,
    RecipeQuery,
    WalkthroughRequest,
)
from culinary_companion.domain.recipes import Recipe
from culinary_companion.services.cooking import CookingWalkthrough
from culinary_companion.services.imagery import dish_subject, ingredient_subject

GENERATION_FAILED = "Failed to generate recipe. Please try again."
IMAGE_FAILED = "Failed to generate image. Please try again."

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/generate")
async def generate_recipe(body: RecipeQuery, request: Request) -> dict[str, object]:
    """Draft a recipe for a free-text request. Nothing is saved."""
    container = get_container(request)
    try:
        recipe = await container.recipe_generation_service.generate(body.query)
    except Exception as exc:
        raise ai_failure(container, exc, GENERATION_FAILED) from exc
    return {
        "recipe": recipe.model_dump(mode="json", by_alias=True),
        "saved": container.recipe_book_service.is_saved(recipe.title),
    }


@router.get("/saved")
async def list_saved(request: Request) -> dict[str, object]:
    recipes = get_container(request).recipe_book_service.saved()
    return {
        "recipes": [
            recipe.model_dump(mode="json", by_alias=True) for recipe in recipes
        ]
    }


@router.post("/saved")
async def save_recipe(recipe: Recipe, request: Request) -> dict[str, object]:
    """Save a recipe unless one with the same title is already saved."""
    added = get_container(request).recipe_book_service.save(recipe)
    return {"saved": True, "added": added}


@router.delete("/saved/{title}")
async def delete_recipe(title: str, request: Request) -> dict[str, object]:
    if not get_container(request).recipe_book_service.delete(title):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found."
        )
    return {"deleted": True}


@router.post("/images")
async def recipe_images(recipe: Recipe, request: Request) -> dict[str, object]:
    """Generate the dish picture and one picture per ingredient.

    Pictures that fail to generate are left out.
    """
    service = get_container(request).image_service
    subjects = [dish_subject(recipe)] + [
        ingredient_subject(ingredient) for ingredient in recipe.ingredients
    ]
    results = await asyncio.gather(
        *(service.generate(subject) for subject in subjects),
        return_exceptions=True,
    )
    dish, *ingredient_images = [
        _image_or_none(subject, result)
        for subject, result in zip(subjects, results, strict=True)
    ]
    return {
        "dish": dish,
        "ingredients": [
            {"item": ingredient.item, "image": image}
            for ingredient, image in zip(
                recipe.ingredients, ingredient_images, strict=True
            )
            if image is not None
        ],
    }


def _image_or_none(subject: str, result: str | BaseException) -> str | None:
    if isinstance(result, BaseException):
        _logger.warning("Image generation failed for %s: %s", subject, result)
        return None
    return result


@router.post("/images/single")
async def single_image(body: ImageRequest, request: Request) -> dict[str, str]:
    container = get_container(request)
    try:
        image = await container.image_service.generate(body.subject)
    except Exception as exc:
        raise ai_failure(container, exc, IMAGE_FAILED) from exc
    return {"image": image}


@router.post("/walkthrough")
async def walkthrough(body: WalkthroughRequest) -> dict[str, object]:
    """Move through a recipe's instructions one step at a time."""
    try:
        position = CookingWalkthrough(
            body.recipe, 0 if body.action == "start" else body.step_index
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if body.action == "next":
        position = position.next()
    elif body.action == "previous":
        position = position.previous()
    return {
        "stepIndex": position.step_index,
        "totalSteps": position.total_steps,
        "label": position.label,
        "instruction": position.current_step,
        "progressPercent": position.progress_percent,
        "isFirst": position.is_first,
        "isLast": position.is_last,
    }
