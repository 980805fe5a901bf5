"""GenerationTransport — abstract base for generative-model backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class InlineAudioPart:
    data: str  # raw base64, no data-URI header
    mime_type: str


ContentPart = Union[TextPart, InlineAudioPart]


class GenerationTransport(ABC):
    @abstractmethod
    async def generate(self, parts: Sequence[ContentPart]) -> str:
        """Submit content parts in order and return the model's text. Raises on failure."""
        ...
