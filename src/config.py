from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_QUIZ_QUESTIONS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    GEMINI_MODEL,
)


@dataclass(frozen=True)
class Config:
    gemini_api_key: Optional[str]
    gemini_model: str
    log_level: str
    retry_attempts: int
    retry_delay_ms: int
    quiz_question_count: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = (
            os.getenv("GEMINI_API_KEY")
            or os.getenv("NEXT_PUBLIC_GEMINI_API_KEY")
            or None
        )
        model = os.getenv("GEMINI_MODEL", GEMINI_MODEL) or GEMINI_MODEL
        log_level = os.getenv("LOG_LEVEL", "INFO")
        retry_attempts = os.getenv("RETRY_ATTEMPTS", str(DEFAULT_RETRY_ATTEMPTS))
        retry_delay_ms = os.getenv("RETRY_DELAY_MS", str(DEFAULT_RETRY_DELAY_MS))
        question_count = os.getenv("QUIZ_QUESTION_COUNT", str(DEFAULT_QUIZ_QUESTIONS))

        return cls._validate(
            gemini_api_key=api_key,
            gemini_model=model,
            log_level=log_level,
            retry_attempts=int(retry_attempts),
            retry_delay_ms=int(retry_delay_ms),
            quiz_question_count=int(question_count),
        )

    @staticmethod
    def _validate(
        gemini_api_key: Optional[str],
        gemini_model: str,
        log_level: str,
        retry_attempts: int,
        retry_delay_ms: int,
        quiz_question_count: int,
    ) -> "Config":
        match retry_attempts:
            case n if n < 0:
                raise ValueError("RETRY_ATTEMPTS must be zero or greater")
            case _:
                pass

        match retry_delay_ms:
            case n if n <= 0:
                raise ValueError("RETRY_DELAY_MS must be a positive number of milliseconds")
            case _:
                pass

        match quiz_question_count:
            case n if n < 1:
                raise ValueError("QUIZ_QUESTION_COUNT must be at least 1")
            case _:
                pass

        return Config(
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            log_level=log_level,
            retry_attempts=retry_attempts,
            retry_delay_ms=retry_delay_ms,
            quiz_question_count=quiz_question_count,
        )
