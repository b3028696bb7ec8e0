"""Illustrative food image generation."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.recipes import Ingredient, Recipe
from culinary_companion.services.cache import Cache

_logger = logging.getLogger(__name__)


class ImageClient(Protocol):
    """Interface for text-to-image generation."""

    async def generate_image(self, *, model: str, prompt: str) -> bytes:
        """Return PNG bytes for the prompt."""


@dataclass
class ImageService:
    """Generates dish and ingredient pictures, cached per prompt."""

    client: ImageClient
    model: str
    cache: Cache
    ttl_seconds: int = 86400

    async def generate(self, subject: str) -> str:
        """Return a PNG data URL picturing ``subject``."""
        if not subject.strip():
            raise ValueError("Image subject is empty")
        prompt = (
            f"High resolution food photography of {subject}. "
            "Plated, vibrant colors, bokeh background."
        )
        cache_key = f"image:{self.model}:{prompt}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, str):
            return cached

        image_bytes = await self.client.generate_image(model=self.model, prompt=prompt)
        data_url = "data:image/png;base64," + base64.b64encode(image_bytes).decode(
            "utf-8"
        )
        self.cache.set(cache_key, data_url, ttl_seconds=self.ttl_seconds)
        _logger.info("Generated image: subject=%s bytes=%s", subject, len(image_bytes))
        return data_url


def dish_subject(recipe: Recipe) -> str:
    """Return the image subject for a finished dish."""
    return recipe.final_image_prompt or recipe.title


def ingredient_subject(ingredient: Ingredient) -> str:
    """Return the image subject for an ingredient."""
    subject = ingredient.image_prompt or ingredient.item
    return f"high quality ingredient photo of {subject}"
