"""Models for AI food analysis results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalyzedMacros(BaseModel):
    """Estimated macros in grams."""

    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)


class FoodAnalysis(BaseModel):
    """Structured output for a text or photo food analysis."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    portion: str | None = None
    calories: float = Field(ge=0)
    macros: AnalyzedMacros
    needs_quantity: bool = False
    message: str = ""
