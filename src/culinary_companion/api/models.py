"""Request models for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from culinary_companion.domain.meals import MealType
from culinary_companion.domain.models import ChatMessage
from culinary_companion.domain.recipes import Recipe


class ApiModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Credentials(ApiModel):
    """Account sign-in or registration payload."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = ""


class MacroGoalsUpdate(ApiModel):
    """Manual macro goals; each value is read as a whole number."""

    protein: int | str | None = None
    carbs: int | str | None = None
    fat: int | str | None = None
    calories: int | str | None = None


class ProfileUpdate(ApiModel):
    """Partial profile change."""

    name: str | None = None
    email: str | None = None
    contact: str | None = None
    age: str | None = None
    dob: str | None = None
    height_cm: str | None = None
    weight_kg: str | None = None
    health_goal: str | None = None
    allergies: str | None = None
    activity_level: str | None = None
    calories_goal_override: str | None = None
    macro_goal_overrides: MacroGoalsUpdate | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields present in the request."""
        changes = self.model_dump(exclude_unset=True)
        if self.macro_goal_overrides is not None:
            changes["macro_goal_overrides"] = self.macro_goal_overrides.model_dump(
                exclude_unset=True
            )
        return changes


class WaterRequest(ApiModel):
    """Water intake to record."""

    amount_ml: float = Field(gt=0, allow_inf_nan=False)


class EntryMacros(ApiModel):
    """Macros of a food draft."""

    protein: float | str | None = None
    carbs: float | str | None = None
    fat: float | str | None = None


class EntryRequest(ApiModel):
    """Confirmed food draft to record."""

    meal_type: MealType
    name: str | None = None
    portion: str | None = None
    calories: float | str | None = None
    macros: EntryMacros | None = None
    image_reference: str | None = None

    def draft(self) -> dict[str, object]:
        """Return the draft fields in the shape the meal log service expects."""
        draft = self.model_dump(include={"name", "portion", "calories"})
        draft["macros"] = self.macros.model_dump() if self.macros else {}
        return draft


class AnalyzeTextRequest(ApiModel):
    """Free-text food description."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1)


class AnalyzeImageRequest(ApiModel):
    """Base64 food photo, optionally as a data URL."""

    image: str = Field(min_length=1)


class RecipeQuery(ApiModel):
    """Recipe generation request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    query: str = Field(min_length=1)


class ImageRequest(ApiModel):
    """Subject for a single generated picture."""

    model_config = ConfigDict(str_strip_whitespace=True)

    subject: str = Field(min_length=1)


class WalkthroughRequest(ApiModel):
    """Move within a recipe's instructions."""

    recipe: Recipe
    step_index: int = Field(default=0, ge=0)
    action: Literal["start", "next", "previous", "stay"] = "stay"


class ChatTurn(ApiModel):
    """One message of a conversation."""

    role: Literal["user", "assistant"]
    content: str

    def to_domain(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


class ChatRequest(ApiModel):
    """Conversation history ending with the user's message."""

    messages: list[ChatTurn] = Field(min_length=1)


class SpeechRequest(ApiModel):
    """Text to read, or a recipe (whole, or one step when ``step_index`` is set)."""

    text: str | None = None
    recipe: Recipe | None = None
    step_index: int | None = Field(default=None, ge=0)
