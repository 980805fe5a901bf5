"""StudyAidClient — the boundary surface used by recorder and quiz front ends.

Wires one GenerationTransport into the transcription, summary and quiz clients.
A missing credential is logged once at construction; every call then fails with
ConfigurationError before touching the network.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from src.audio.encoder import AudioCapture
from src.config import Config
from src.constants import (
    DEFAULT_QUIZ_QUESTIONS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    GEMINI_MODEL,
    MSG_API_KEY_MISSING,
    MSG_API_KEY_PRESENT,
    MSG_CLIENT_INIT,
    MSG_ERR_NO_API_KEY,
    MSG_PROCESS_FAILED,
)
from src.errors import ConfigurationError
from src.lecture.quiz import Difficulty, QuizClient, QuizQuestion
from src.lecture.summary import SummaryClient
from src.lecture.transcription import TranscriptionClient
from src.transport.client import GenerationTransport
from src.transport.gemini import GeminiTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LectureResult:
    transcript: str
    explanation: str


class StudyAidClient:

    def __init__(
        self,
        api_key: Optional[str],
        transport: Optional[GenerationTransport] = None,
        model: str = GEMINI_MODEL,
        retries: int = DEFAULT_RETRY_ATTEMPTS,
        delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    ) -> None:
        logger.info(MSG_CLIENT_INIT)
        logger.info(MSG_API_KEY_PRESENT, bool(api_key))
        self._api_key = api_key or None
        match (self._api_key, transport):
            case (None, _):
                logger.error(MSG_API_KEY_MISSING)
                self._transport = None
            case (key, None):
                self._transport = GeminiTransport(key, model=model)
            case (_, injected):
                self._transport = injected
        self._retries = retries
        self._delay_ms = delay_ms

    @classmethod
    def from_config(
        cls, config: Config, transport: Optional[GenerationTransport] = None
    ) -> "StudyAidClient":
        return cls(
            config.gemini_api_key,
            transport=transport,
            model=config.gemini_model,
            retries=config.retry_attempts,
            delay_ms=config.retry_delay_ms,
        )

    def _require_transport(self) -> GenerationTransport:
        match self._transport:
            case None:
                raise ConfigurationError(MSG_ERR_NO_API_KEY)
            case transport:
                return transport

    def _retry_kwargs(self) -> dict[str, int]:
        return {"retries": self._retries, "delay_ms": self._delay_ms}

    # ── public operations ─────────────────────────────────────────────────────

    async def transcribe_audio(self, capture: AudioCapture) -> str:
        client = TranscriptionClient(self._require_transport(), **self._retry_kwargs())
        return await client.transcribe(capture)

    async def generate_summary(self, transcript: str) -> str:
        client = SummaryClient(self._require_transport(), **self._retry_kwargs())
        return await client.summarize(transcript)

    generate_explanation = generate_summary

    async def generate_quiz(
        self,
        transcript: str,
        difficulty: Difficulty | str = Difficulty.MEDIUM,
        count: int = DEFAULT_QUIZ_QUESTIONS,
    ) -> list[dict[str, Any]]:
        client = QuizClient(self._require_transport(), **self._retry_kwargs())
        return await client.generate_quiz(transcript, difficulty, count)

    async def generate_quiz_questions(
        self,
        transcript: str,
        difficulty: Difficulty | str,
        count: int = DEFAULT_QUIZ_QUESTIONS,
    ) -> list[QuizQuestion]:
        client = QuizClient(self._require_transport(), **self._retry_kwargs())
        return await client.generate_questions(transcript, difficulty, count)

    async def process_lecture_audio(self, capture: AudioCapture) -> LectureResult:
        """Transcribe, then summarize. Any failure from either stage propagates."""
        try:
            transcript = await self.transcribe_audio(capture)
            explanation = await self.generate_summary(transcript)
        except Exception as e:
            logger.error(MSG_PROCESS_FAILED, e)
            raise
        return LectureResult(transcript=transcript, explanation=explanation)
