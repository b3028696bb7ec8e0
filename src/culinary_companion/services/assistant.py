"""Conversational assistants."""

from dataclasses import dataclass
from typing import Protocol

from culinary_companion.domain.models import ChatMessage
from culinary_companion.domain.profile import UserProfile

CULINARY_INSTRUCTIONS = (
    "You are a helpful AI Culinary Assistant. "
    "Help with recipes, food science, and kitchen tips."
)
CULINARY_FALLBACK = "I'm here to help."
CONSULTANT_FALLBACK = "I'm having trouble calculating your plan right now."


class ChatClient(Protocol):
    """Interface for multi-turn text replies."""

    async def reply(
        self,
        *,
        model: str,
        instructions: str,
        messages: list[ChatMessage],
        reasoning_effort: str | None,
    ) -> str:
        """Return the assistant's next message."""


@dataclass
class AssistantService:
    """Culinary helper and fitness/diet consultant."""

    client: ChatClient
    model: str
    consultant_model: str
    consultant_reasoning_effort: str | None

    async def culinary_reply(self, history: list[ChatMessage]) -> str:
        """Answer the latest message of a cooking conversation."""
        _require_user_turn(history)
        text = await self.client.reply(
            model=self.model,
            instructions=CULINARY_INSTRUCTIONS,
            messages=history,
            reasoning_effort=None,
        )
        return text.strip() or CULINARY_FALLBACK

    async def consultant_reply(
        self, history: list[ChatMessage], profile: UserProfile
    ) -> str:
        """Answer the latest message of a coaching conversation."""
        _require_user_turn(history)
        text = await self.client.reply(
            model=self.consultant_model,
            instructions=consultant_instructions(profile),
            messages=history,
            reasoning_effort=self.consultant_reasoning_effort,
        )
        return text.strip() or CONSULTANT_FALLBACK


def consultant_instructions(profile: UserProfile) -> str:
    """Return the coaching system prompt for a profile."""
    macros = profile.macro_goal_overrides
    return (
        "You are a professional Fitness Consultant and Dietician.\n"
        f"User Profile: Name: {profile.name}, Goals: {profile.health_goal}, "
        f"Activity: {profile.activity_level or 'Moderate'}.\n"
        f"Manual Targets: P:{macros.protein}g, C:{macros.carbs}g, "
        f"F:{macros.fat}g, Cal:{macros.calories}.\n"
        "Always reference their goals and manual targets if they differ from "
        "standard calculations."
    )


def consultant_greeting(profile: UserProfile) -> ChatMessage:
    """Return the consultant's opening message."""
    return ChatMessage(
        role="assistant",
        content=(
            f"Hello {profile.name}! I'm your Fitness & Diet Consultant. "
            f"Based on your goal of {profile.health_goal}, how can I help you "
            "optimize your nutrition or meal planning today?"
        ),
    )


def _require_user_turn(history: list[ChatMessage]) -> None:
    if not history or history[-1].role != "user":
        raise ValueError("Conversation must end with a user message")
