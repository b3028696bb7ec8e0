"""OpenAI client for structured outputs, chat, images and speech."""

import base64
import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from culinary_companion.domain.models import ChatMessage
from culinary_companion.services.analysis import StructuredOutputClient
from culinary_companion.services.assistant import ChatClient
from culinary_companion.services.imagery import ImageClient
from culinary_companion.services.speech import SpeechClient


@dataclass
class OpenAIGenerativeClient(
    StructuredOutputClient, ChatClient, ImageClient, SpeechClient
):
    """Generative client backed by the OpenAI API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, http_client: httpx.AsyncClient
    ) -> "OpenAIGenerativeClient":
        """Create a client sharing a managed httpx session."""
        return cls(client=AsyncOpenAI(api_key=api_key, http_client=http_client))

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
        """Call the Responses API with structured outputs."""
        content: list[dict[str, object]] = [{"type": "input_text", "text": prompt}]
        if image_data_url:
            content.append({"type": "input_image", "image_url": image_data_url})
        request_payload: dict[str, object] = {
            "model": model,
            "input": [{"role": "user", "content": content}],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def reply(
        self,
        *,
        model: str,
        instructions: str,
        messages: list[ChatMessage],
        reasoning_effort: str | None,
    ) -> str:
        """Call the Responses API with a conversation history."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": instructions,
            "input": [
                {"role": message.role, "content": message.content}
                for message in messages
            ],
            "store": False,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        return response.output_text or ""

    async def generate_image(self, *, model: str, prompt: str) -> bytes:
        """Generate a square image and return its PNG bytes."""
        response = await self.client.images.generate(
            model=model, prompt=prompt, size="1024x1024"
        )
        encoded = response.data[0].b64_json if response.data else None
        if not encoded:
            raise RuntimeError("OpenAI returned no image data")
        return base64.b64decode(encoded)

    async def synthesize(self, *, model: str, voice: str, text: str) -> bytes:
        """Synthesize MP3 speech."""
        response = await self.client.audio.speech.create(
            model=model, voice=voice, input=text, response_format="mp3"
        )
        return response.content
