"""Chat assistant and speech endpoints."""

from fastapi import APIRouter, HTTPException, Request, Response, status

from culinary_companion.api.dependencies import ai_failure, get_container
from culinary_companion.api.models import ChatRequest, SpeechRequest
from culinary_companion.services.assistant import (
    CONSULTANT_FALLBACK,
    CULINARY_FALLBACK,
    consultant_greeting,
)
from culinary_companion.services.speech import recipe_narration, step_narration

SPEECH_FAILED = "Failed to read aloud. Please try again."

router = APIRouter(tags=["assistant"])


def _require_user_turn(body: ChatRequest) -> None:
    if body.messages[-1].role != "user":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Conversation must end with a user message.",
        )


@router.post("/assistant/chat")
async def culinary_chat(body: ChatRequest, request: Request) -> dict[str, str]:
    """Reply as the culinary assistant."""
    _require_user_turn(body)
    container = get_container(request)
    history = [turn.to_domain() for turn in body.messages]
    try:
        reply = await container.assistant_service.culinary_reply(history)
    except Exception as exc:
        raise ai_failure(container, exc, CULINARY_FALLBACK) from exc
    return {"role": "assistant", "content": reply}


@router.get("/assistant/consult/greeting")
async def consult_greeting(request: Request) -> dict[str, str]:
    greeting = consultant_greeting(get_container(request).state.profile)
    return {"role": greeting.role, "content": greeting.content}


@router.post("/assistant/consult")
async def consult(body: ChatRequest, request: Request) -> dict[str, str]:
    """Reply as the fitness and diet consultant, aware of the profile."""
    _require_user_turn(body)
    container = get_container(request)
    history = [turn.to_domain() for turn in body.messages]
    try:
        reply = await container.assistant_service.consultant_reply(
            history, container.state.profile
        )
    except Exception as exc:
        raise ai_failure(container, exc, CONSULTANT_FALLBACK) from exc
    return {"role": "assistant", "content": reply}


@router.post("/speech")
async def speech(body: SpeechRequest, request: Request) -> Response:
    """Read text, a whole recipe, or one recipe step aloud as MP3."""
    text = _narration_text(body)
    container = get_container(request)
    try:
        audio = await container.speech_service.read(text)
    except Exception as exc:
        raise ai_failure(container, exc, SPEECH_FAILED) from exc
    return Response(content=audio, media_type="audio/mpeg")


def _narration_text(body: SpeechRequest) -> str:
    if body.recipe is not None:
        if body.step_index is None:
            return recipe_narration(body.recipe)
        if body.step_index >= len(body.recipe.instructions):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Step index out of range: {body.step_index}",
            )
        return step_narration(body.recipe, body.step_index)
    if body.text is None or not body.text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Nothing to read."
        )
    return body.text
