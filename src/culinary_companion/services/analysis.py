"""Food analysis service using LLMs."""

import base64
from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.analysis import FoodAnalysis

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "Common name of the food item"},
        "portion": {
            "type": "string",
            "description": "The identified or assumed portion size",
        },
        "calories": {"type": "number", "description": "Estimated total calories"},
        "macros": {
            "type": "object",
            "properties": {
                "protein": {"type": "number", "description": "Grams of protein"},
                "carbs": {"type": "number", "description": "Grams of carbohydrates"},
                "fat": {"type": "number", "description": "Grams of fat"},
            },
            "required": ["protein", "carbs", "fat"],
            "additionalProperties": False,
        },
        "needsQuantity": {
            "type": "boolean",
            "description": "True if the user should provide more specific quantity",
        },
        "message": {
            "type": "string",
            "description": "Friendly feedback or request for more info",
        },
    },
    "required": ["name", "portion", "calories", "macros", "needsQuantity", "message"],
    "additionalProperties": False,
}

_IMAGE_PROMPT = (
    "Examine this food image. Identify the items and estimate their nutritional "
    "content. If you cannot determine the exact portion size or quantity, set "
    "'needsQuantity' to true and ask the user for clarification in the 'message'."
)


class StructuredOutputClient(Protocol):
    """Interface for LLM calls that return schema-shaped JSON."""

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
        """Return structured data matching ``schema``."""


@dataclass
class FoodAnalysisService:
    """Service that prepares analysis prompts and validates results."""

    client: StructuredOutputClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze_text(self, description: str) -> FoodAnalysis:
        """Estimate nutrition for a typed food description."""
        if not description.strip():
            raise ValueError("Food description is empty")
        prompt = (
            f'Analyze this food entry: "{description}". Provide a nutritional '
            "breakdown. If the quantity/portion is missing or vague, set "
            "'needsQuantity' to true."
        )
        raw = await self.client.generate_json(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
            schema=ANALYSIS_SCHEMA,
            schema_name="food_analysis",
        )
        return FoodAnalysis.model_validate(raw)

    async def analyze_image(self, image_bytes: bytes) -> FoodAnalysis:
        """Estimate nutrition for a food photo."""
        raw = await self.client.generate_json(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=_IMAGE_PROMPT,
            schema=ANALYSIS_SCHEMA,
            schema_name="food_analysis",
            image_data_url=to_data_url(image_bytes),
        )
        return FoodAnalysis.model_validate(raw)


def to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
