"""Tests for the OpenAI adapter."""

import asyncio
import base64
import json

import httpx
import pytest

from culinary_companion.adapters.openai_client import OpenAIGenerativeClient
from culinary_companion.domain.models import ChatMessage


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeImages:
    def __init__(self) -> None:
        self.last_payload: dict[str, object] | None = None

    async def generate(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        image = type("Image", (), {"b64_json": base64.b64encode(b"png").decode()})()
        return type("ImagesResp", (), {"data": [image]})()


class _FakeSpeech:
    def __init__(self) -> None:
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("SpeechResp", (), {"content": b"mp3"})()


class _FakeAudio:
    def __init__(self) -> None:
        self.speech = _FakeSpeech()


class _FakeOpenAI:
    def __init__(self, output_text: str = "") -> None:
        self.responses = _FakeResponses(output_text)
        self.images = _FakeImages()
        self.audio = _FakeAudio()


def test_generate_json_parses_output_and_sends_schema() -> None:
    fake = _FakeOpenAI(json.dumps({"name": "Apple"}))
    client = OpenAIGenerativeClient(client=fake)

    result = asyncio.run(
        client.generate_json(
            model="gpt-5.2",
            reasoning_effort="low",
            store=False,
            prompt="Analyze",
            schema={"type": "object"},
            schema_name="food_analysis",
            image_data_url="data:image/jpeg;base64,ZmFrZQ==",
        )
    )

    assert result == {"name": "Apple"}
    payload = fake.responses.last_payload
    assert payload["text"]["format"]["strict"] is True
    assert payload["text"]["format"]["name"] == "food_analysis"
    assert payload["reasoning"] == {"effort": "low"}
    content = payload["input"][0]["content"]
    assert content[1] == {
        "type": "input_image",
        "image_url": "data:image/jpeg;base64,ZmFrZQ==",
    }


def test_generate_json_rejects_empty_output() -> None:
    client = OpenAIGenerativeClient(client=_FakeOpenAI(""))

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.generate_json(
                model="gpt-5.2",
                reasoning_effort=None,
                store=False,
                prompt="Analyze",
                schema={"type": "object"},
                schema_name="food_analysis",
            )
        )


def test_reply_sends_history() -> None:
    fake = _FakeOpenAI("Sure.")
    client = OpenAIGenerativeClient(client=fake)

    reply = asyncio.run(
        client.reply(
            model="gpt-5.2",
            instructions="Be brief.",
            messages=[
                ChatMessage(role="user", content="Hi"),
                ChatMessage(role="assistant", content="Hello"),
                ChatMessage(role="user", content="Salt?"),
            ],
            reasoning_effort=None,
        )
    )

    assert reply == "Sure."
    payload = fake.responses.last_payload
    assert payload["instructions"] == "Be brief."
    assert [item["role"] for item in payload["input"]] == ["user", "assistant", "user"]
    assert "reasoning" not in payload


def test_generate_image_decodes_base64() -> None:
    fake = _FakeOpenAI()
    client = OpenAIGenerativeClient(client=fake)

    image = asyncio.run(client.generate_image(model="gpt-image-1", prompt="Tomato"))

    assert image == b"png"
    assert fake.images.last_payload["prompt"] == "Tomato"


def test_synthesize_returns_audio_bytes() -> None:
    fake = _FakeOpenAI()
    client = OpenAIGenerativeClient(client=fake)

    audio = asyncio.run(client.synthesize(model="tts", voice="alloy", text="Hi"))

    assert audio == b"mp3"
    assert fake.audio.speech.last_payload["response_format"] == "mp3"


def test_create_uses_managed_http_client() -> None:
    http_client = httpx.AsyncClient()

    client = OpenAIGenerativeClient.create("openai-key", http_client)

    assert client.client.api_key == "openai-key"
    asyncio.run(http_client.aclose())
