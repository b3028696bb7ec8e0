"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from culinary_companion.adapters.json_store import BlobStore
from culinary_companion.config import Settings
from culinary_companion.containers import AppContainer
from culinary_companion.domain.meals import FoodLogEntry
from culinary_companion.domain.models import ChatMessage, StoredUser
from culinary_companion.domain.profile import UserProfile
from culinary_companion.domain.recipes import Recipe
from culinary_companion.services.analysis import (
    FoodAnalysisService,
    StructuredOutputClient,
)
from culinary_companion.services.assistant import AssistantService, ChatClient
from culinary_companion.services.cache import InMemoryCache
from culinary_companion.services.imagery import ImageClient, ImageService
from culinary_companion.services.meals import FoodLogRepository, MealLogService
from culinary_companion.services.profile import ProfileRepository, ProfileService
from culinary_companion.services.recipe_generation import RecipeGenerationService
from culinary_companion.services.recipes import RecipeBookService, RecipeRepository
from culinary_companion.services.speech import SpeechClient, SpeechService
from culinary_companion.services.users import AccountService, UserRepository
from culinary_companion.state import AppState

PASTA_RECIPE = {
    "title": "Lemon Garlic Pasta",
    "cuisine": "Italian",
    "description": "Bright weeknight pasta.",
    "prepTime": "10 min",
    "cookTime": "15 min",
    "servings": 2,
    "difficulty": "Easy",
    "ingredients": [
        {"item": "Spaghetti", "amount": "200 g", "imagePrompt": "dry spaghetti"},
        {"item": "Garlic", "amount": "3 cloves", "imagePrompt": None},
    ],
    "instructions": [
        "Boil the pasta.",
        "Fry the garlic in olive oil.",
        "Toss everything with lemon juice.",
    ],
    "nutritionPerServing": {"calories": 520, "protein": 16, "carbs": 80, "fat": 14},
    "finalImagePrompt": "lemon garlic spaghetti in a white bowl",
}

APPLE_ANALYSIS = {
    "name": "Apple",
    "portion": "1 medium",
    "calories": 95,
    "macros": {"protein": 0.5, "carbs": 25, "fat": 0.3},
    "needsQuantity": False,
    "message": "Looks like a medium apple.",
}


def make_recipe(**overrides: object) -> Recipe:
    return Recipe.model_validate({**PASTA_RECIPE, **overrides})


@dataclass
class InMemoryBlobStore(BlobStore):
    """In-memory blob store for tests."""

    blobs: dict[str, object] = field(default_factory=dict)

    def read(self, name: str) -> object | None:
        return self.blobs.get(name)

    def write(self, name: str, value: object) -> None:
        self.blobs[name] = value


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: UserProfile | None = None
    saves: int = 0

    def load(self) -> UserProfile | None:
        return self.profile

    def save(self, profile: UserProfile) -> None:
        self.profile = profile
        self.saves += 1


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodLogEntry] = field(default_factory=list)
    fail: bool = False

    def load(self) -> list[FoodLogEntry]:
        return list(self.entries)

    def save(self, entries: list[FoodLogEntry]) -> None:
        if self.fail:
            raise OSError("disk full")
        self.entries = list(entries)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: list[Recipe] = field(default_factory=list)

    def load(self) -> list[Recipe]:
        return list(self.recipes)

    def save(self, recipes: list[Recipe]) -> None:
        self.recipes = list(recipes)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory account repository for tests."""

    users: list[StoredUser] = field(default_factory=list)

    def load(self) -> list[StoredUser]:
        return list(self.users)

    def save(self, users: list[StoredUser]) -> None:
        self.users = list(users)


@dataclass
class FakeGenerativeClient(
    StructuredOutputClient, ChatClient, ImageClient, SpeechClient
):
    """Fake generative client that records calls and returns canned output."""

    json_payload: dict[str, object] = field(default_factory=lambda: APPLE_ANALYSIS)
    reply_text: str = "Try a squeeze of lemon."
    image_bytes: bytes = b"\x89PNG\r\n\x1a\nfake"
    audio: bytes = b"ID3fake-mp3"
    fail: bool = False
    failing_prompts: set[str] = field(default_factory=set)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "kind": "json",
                "model": model,
                "prompt": prompt,
                "schema_name": schema_name,
                "image_data_url": image_data_url,
            }
        )
        if self.fail:
            raise RuntimeError("upstream unavailable")
        return dict(self.json_payload)

    async def reply(
        self,
        *,
        model: str,
        instructions: str,
        messages: list[ChatMessage],
        reasoning_effort: str | None,
    ) -> str:
        self.calls.append(
            {
                "kind": "reply",
                "model": model,
                "instructions": instructions,
                "messages": messages,
                "reasoning_effort": reasoning_effort,
            }
        )
        if self.fail:
            raise RuntimeError("upstream unavailable")
        return self.reply_text

    async def generate_image(self, *, model: str, prompt: str) -> bytes:
        self.calls.append({"kind": "image", "model": model, "prompt": prompt})
        if self.fail or any(marker in prompt for marker in self.failing_prompts):
            raise RuntimeError("image generation failed")
        return self.image_bytes

    async def synthesize(self, *, model: str, voice: str, text: str) -> bytes:
        self.calls.append({"kind": "speech", "model": model, "text": text})
        if self.fail:
            raise RuntimeError("upstream unavailable")
        return self.audio


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(openai_api_key="openai-key", data_dir=tmp_path / "data")


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def profile_service(
    state: AppState, profile_repository: InMemoryProfileRepository
) -> ProfileService:
    return ProfileService(state, profile_repository)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    state: AppState,
    profile_service: ProfileService,
    food_log_repository: InMemoryFoodLogRepository,
    recipe_repository: InMemoryRecipeRepository,
    user_repository: InMemoryUserRepository,
    generative_client: FakeGenerativeClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        state=state,
        profile_service=profile_service,
        meal_log_service=MealLogService(state, food_log_repository),
        recipe_book_service=RecipeBookService(state, recipe_repository),
        account_service=AccountService(
            state=state,
            repository=user_repository,
            profile_service=profile_service,
        ),
        analysis_service=FoodAnalysisService(
            client=generative_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        recipe_generation_service=RecipeGenerationService(
            client=generative_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        image_service=ImageService(
            client=generative_client,
            model=settings.openai_image_model,
            cache=InMemoryCache(),
        ),
        assistant_service=AssistantService(
            client=generative_client,
            model=settings.openai_model,
            consultant_model=settings.openai_consultant_model,
            consultant_reasoning_effort=settings.openai_consultant_reasoning_effort,
        ),
        speech_service=SpeechService(
            client=generative_client,
            model=settings.openai_speech_model,
            voice=settings.openai_speech_voice,
        ),
        close_resources=close_resources,
    )
