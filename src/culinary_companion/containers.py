"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from culinary_companion.adapters.json_store import JsonFileStore
from culinary_companion.adapters.local_food_log_repository import (
    LocalFoodLogRepository,
)
from culinary_companion.adapters.local_profile_repository import (
    LocalProfileRepository,
)
from culinary_companion.adapters.local_recipe_repository import LocalRecipeRepository
from culinary_companion.adapters.local_user_repository import LocalUserRepository
from culinary_companion.adapters.openai_client import OpenAIGenerativeClient
from culinary_companion.config import Settings
from culinary_companion.services.analysis import FoodAnalysisService
from culinary_companion.services.assistant import AssistantService
from culinary_companion.services.cache import InMemoryCache
from culinary_companion.services.imagery import ImageService
from culinary_companion.services.meals import MealLogService
from culinary_companion.services.profile import ProfileService
from culinary_companion.services.recipe_generation import RecipeGenerationService
from culinary_companion.services.recipes import RecipeBookService
from culinary_companion.services.speech import SpeechService
from culinary_companion.services.users import AccountService
from culinary_companion.state import AppState


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state: AppState
    profile_service: ProfileService
    meal_log_service: MealLogService
    recipe_book_service: RecipeBookService
    account_service: AccountService
    analysis_service: FoodAnalysisService
    recipe_generation_service: RecipeGenerationService
    image_service: ImageService
    assistant_service: AssistantService
    speech_service: SpeechService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = JsonFileStore(resolved_settings.data_dir)
    profile_repository = LocalProfileRepository(store)
    food_log_repository = LocalFoodLogRepository(store)
    recipe_repository = LocalRecipeRepository(store)
    user_repository = LocalUserRepository(store)
    state = AppState.load(profile_repository, food_log_repository, recipe_repository)

    profile_service = ProfileService(state, profile_repository)
    meal_log_service = MealLogService(state, food_log_repository)
    recipe_book_service = RecipeBookService(state, recipe_repository)
    account_service = AccountService(
        state=state,
        repository=user_repository,
        profile_service=profile_service,
    )

    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(resolved_settings.openai_timeout_seconds)
    )
    openai_client = OpenAIGenerativeClient.create(
        resolved_settings.openai_api_key, http_client
    )
    analysis_service = FoodAnalysisService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    recipe_generation_service = RecipeGenerationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    image_service = ImageService(
        client=openai_client,
        model=resolved_settings.openai_image_model,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.image_cache_ttl_seconds,
    )
    assistant_service = AssistantService(
        client=openai_client,
        model=resolved_settings.openai_model,
        consultant_model=resolved_settings.openai_consultant_model,
        consultant_reasoning_effort=(
            resolved_settings.openai_consultant_reasoning_effort
        ),
    )
    speech_service = SpeechService(
        client=openai_client,
        model=resolved_settings.openai_speech_model,
        voice=resolved_settings.openai_speech_voice,
    )

    async def close_resources() -> None:
        await http_client.aclose()

    return AppContainer(
        settings=resolved_settings,
        state=state,
        profile_service=profile_service,
        meal_log_service=meal_log_service,
        recipe_book_service=recipe_book_service,
        account_service=account_service,
        analysis_service=analysis_service,
        recipe_generation_service=recipe_generation_service,
        image_service=image_service,
        assistant_service=assistant_service,
        speech_service=speech_service,
        close_resources=close_resources,
    )
