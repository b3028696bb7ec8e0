"""Models for generated and saved recipes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Difficulty = Literal["Easy", "Medium", "Hard"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Ingredient(_CamelModel):
    """Ingredient line of a recipe."""

    item: str
    amount: str
    image_prompt: str | None = None


class NutritionPerServing(_CamelModel):
    """Nutrition of a single serving."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)


class Recipe(_CamelModel):
    """A generated recipe.

    ``title`` is the identity of a saved recipe, compared exactly.
    """

    title: str
    cuisine: str
    description: str = ""
    prep_time: str = ""
    cook_time: str = ""
    servings: int = Field(default=1, ge=1)
    difficulty: Difficulty = "Medium"
    ingredients: list[Ingredient]
    instructions: list[str]
    nutrition_per_serving: NutritionPerServing
    final_image_prompt: str | None = None

    @field_validator("servings", mode="before")
    @classmethod
    def _whole_servings(cls, value: object) -> object:
        if isinstance(value, float):
            return max(1, round(value))
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def _known_difficulty(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().capitalize()
            if normalized in {"Easy", "Medium", "Hard"}:
                return normalized
        return "Medium"
