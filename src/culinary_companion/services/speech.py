"""Text-to-speech for recipes."""

from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.recipes import Recipe


class SpeechClient(Protocol):
    """Interface for speech synthesis."""

    async def synthesize(self, *, model: str, voice: str, text: str) -> bytes:
        """Return encoded audio for ``text``."""


@dataclass
class SpeechService:
    """Reads text aloud through the configured voice."""

    client: SpeechClient
    model: str
    voice: str

    async def read(self, text: str) -> bytes:
        """Return MP3 audio of ``text``."""
        if not text.strip():
            raise ValueError("Nothing to read")
        return await self.client.synthesize(
            model=self.model, voice=self.voice, text=text
        )


def recipe_narration(recipe: Recipe) -> str:
    """Return the text read for a whole recipe."""
    ingredients = ", ".join(f"{i.amount} of {i.item}" for i in recipe.ingredients)
    steps = ". ".join(recipe.instructions)
    return (
        f"Cooking {recipe.title}. Ingredients needed: {ingredients}. "
        f"Instructions: {steps}"
    )


def step_narration(recipe: Recipe, index: int) -> str:
    """Return the text read for one instruction."""
    return f"Step {index + 1}: {recipe.instructions[index]}"
