"""GeminiTransport — Google Gemini backend (google-genai SDK)."""
import base64
from typing import Sequence

from google import genai
from google.genai import types

from src.constants import GEMINI_MODEL
from src.transport.client import ContentPart, GenerationTransport, InlineAudioPart, TextPart


def to_gemini_part(part: ContentPart) -> types.Part:
    match part:
        case InlineAudioPart(data=data, mime_type=mime_type):
            return types.Part.from_bytes(data=base64.b64decode(data), mime_type=mime_type)
        case TextPart(text=text):
            return types.Part.from_text(text=text)
        case _:
            raise TypeError(f"Unsupported content part: {part!r}")


class GeminiTransport(GenerationTransport):

    def __init__(self, api_key: str, model: str = GEMINI_MODEL) -> None:
        self._api_key = api_key
        self._model = model

    async def generate(self, parts: Sequence[ContentPart]) -> str:
        client = genai.Client(api_key=self._api_key)
        response = await client.aio.models.generate_content(
            model=self._model,
            contents=list(map(to_gemini_part, parts)),
        )
        return response.text or ""
