"""QuizClient — multiple-choice questions generated from a transcript.

Malformed model output never raises: the parser degrades to an empty list so the
caller can render a "no questions available" state instead of failing the quiz.
"""
import json
import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from src.constants import (
    DEFAULT_QUIZ_QUESTIONS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    DIFFICULTY_DESCRIPTIONS,
    MSG_ERR_UNKNOWN_DIFFICULTY,
    MSG_QUIZ_ITEM_DROPPED,
    MSG_QUIZ_PARSE_FAILED,
    MSG_RAW_QUIZ,
    QUIZ_OPTION_COUNT,
    QUIZ_PROMPT,
)
from src.retry import with_retry
from src.transport.client import GenerationTransport, TextPart

logger = logging.getLogger(__name__)

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def description(self) -> str:
        return DIFFICULTY_DESCRIPTIONS[self.value]

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError:
            raise ValueError(MSG_ERR_UNKNOWN_DIFFICULTY % value) from None


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    text: str
    options: tuple[str, ...]
    correct_answer: int


# ── pure helpers (module-level so tests can import them directly) ──────────────


def build_quiz_prompt(transcript: str, difficulty: Difficulty, count: int) -> str:
    return QUIZ_PROMPT.format(
        transcript=transcript,
        difficulty=difficulty.value,
        description=difficulty.description,
        count=count,
    )


def parse_quiz_response(text: str) -> list[dict[str, Any]]:
    """Extract the JSON array from a model reply, or ``[]`` when there is none."""
    match _JSON_ARRAY.search(text):
        case re.Match() as found:
            candidate = found.group(0)
        case _:
            candidate = text
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(MSG_QUIZ_PARSE_FAILED, e)
        return []
    match parsed:
        case list():
            return parsed
        case _:
            logger.error(MSG_QUIZ_PARSE_FAILED, f"expected a JSON array, got {type(parsed).__name__}")
            return []


def coerce_answer(value: Any) -> int | None:
    """Accept ``2``, ``2.0`` or ``"2"`` as an option index; anything else is None."""
    match value:
        case bool():
            return None
        case int():
            return value
        case float() if value.is_integer():
            return int(value)
        case str() if value.strip().isdigit():
            return int(value.strip())
        case _:
            return None


def to_question(position: int, item: Any) -> QuizQuestion | None:
    match item:
        case {"question": str() as text, "options": list() as options, "correctAnswer": answer}:
            index = coerce_answer(answer)
            well_formed = (
                len(options) == QUIZ_OPTION_COUNT
                and all(isinstance(o, str) for o in options)
                and index is not None
                and 0 <= index < QUIZ_OPTION_COUNT
            )
            return (
                QuizQuestion(id=position, text=text, options=tuple(options), correct_answer=index)
                if well_formed
                else None
            )
        case _:
            return None


def to_questions(items: list[Any]) -> list[QuizQuestion]:
    """Re-key wire items (``question`` → ``text``) and number them from 1."""
    candidates = [(i + 1, item, to_question(i + 1, item)) for i, item in enumerate(items)]
    list(map(
        lambda c: logger.warning(MSG_QUIZ_ITEM_DROPPED, c[0], c[1]),
        filter(lambda c: c[2] is None, candidates),
    ))
    kept = [q for _, _, q in candidates if q is not None]
    # Ids follow final positions, so a dropped item leaves no gap.
    return [replace(q, id=position + 1) for position, q in enumerate(kept)]


# ── client ────────────────────────────────────────────────────────────────────


class QuizClient:

    def __init__(
        self,
        transport: GenerationTransport,
        retries: int = DEFAULT_RETRY_ATTEMPTS,
        delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    ) -> None:
        self._transport = transport
        self._retries = retries
        self._delay_ms = delay_ms

    async def generate_quiz(
        self,
        transcript: str,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        count: int = DEFAULT_QUIZ_QUESTIONS,
    ) -> list[dict[str, Any]]:
        """Return wire-shaped items: ``question``, ``options``, ``correctAnswer``."""
        level = Difficulty.parse(difficulty)
        parts = [TextPart(text=build_quiz_prompt(transcript, level, count))]

        @with_retry(retries=self._retries, delay_ms=self._delay_ms)
        async def attempt() -> list[dict[str, Any]]:
            text = await self._transport.generate(parts)
            logger.debug(MSG_RAW_QUIZ, text)
            return parse_quiz_response(text)

        return await attempt()

    async def generate_questions(
        self,
        transcript: str,
        difficulty: Difficulty | str,
        count: int = DEFAULT_QUIZ_QUESTIONS,
    ) -> list[QuizQuestion]:
        return to_questions(await self.generate_quiz(transcript, difficulty, count))
