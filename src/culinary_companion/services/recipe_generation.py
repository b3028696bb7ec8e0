"""Recipe generation using LLMs."""

from dataclasses import dataclass

from culinary_companion.domain.recipes import Recipe
from culinary_companion.services.analysis import StructuredOutputClient

_NULLABLE_STRING = {"anyOf": [{"type": "string"}, {"type": "null"}]}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "cuisine": {"type": "string"},
        "description": {"type": "string"},
        "prepTime": {"type": "string"},
        "cookTime": {"type": "string"},
        "servings": {"type": "integer", "minimum": 1},
        "difficulty": {"type": "string", "enum": ["Easy", "Medium", "Hard"]},
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "item": {"type": "string"},
                    "amount": {"type": "string"},
                    "imagePrompt": _NULLABLE_STRING,
                },
                "required": ["item", "amount", "imagePrompt"],
                "additionalProperties": False,
            },
        },
        "instructions": {"type": "array", "items": {"type": "string"}},
        "nutritionPerServing": {
            "type": "object",
            "properties": {
                "calories": {"type": "number"},
                "protein": {"type": "number"},
                "carbs": {"type": "number"},
                "fat": {"type": "number"},
            },
            "required": ["calories", "protein", "carbs", "fat"],
            "additionalProperties": False,
        },
        "finalImagePrompt": _NULLABLE_STRING,
    },
    "required": [
        "title",
        "cuisine",
        "description",
        "prepTime",
        "cookTime",
        "servings",
        "difficulty",
        "ingredients",
        "instructions",
        "nutritionPerServing",
        "finalImagePrompt",
    ],
    "additionalProperties": False,
}


@dataclass
class RecipeGenerationService:
    """Turns a free-text request into a validated recipe draft."""

    client: StructuredOutputClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def generate(self, query: str) -> Recipe:
        """Generate a recipe for ``query``."""
        if not query.strip():
            raise ValueError("Recipe query is empty")
        prompt = (
            f'Generate a highly detailed, professional recipe for "{query}". '
            "Ensure instructions are step-by-step. Include nutritional breakdown "
            "per serving. Use a creative finalImagePrompt for AI image generation."
        )
        raw = await self.client.generate_json(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
            schema=RECIPE_SCHEMA,
            schema_name="recipe",
        )
        return Recipe.model_validate(raw)
