"""TranscriptionClient — lecture audio to verbatim transcript."""
import logging

from src.audio.encoder import AudioCapture, encode_audio
from src.constants import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    MAX_AUDIO_BYTES,
    MSG_ERR_AUDIO_EMPTY,
    MSG_ERR_AUDIO_TOO_LARGE,
    MSG_ERR_EMPTY_TRANSCRIPTION,
    MSG_TRANSCRIBING,
    TRANSCRIPTION_PROMPT,
)
from src.errors import AudioValidationError, EmptyTranscriptionError
from src.retry import with_retry
from src.transport.client import GenerationTransport, InlineAudioPart, TextPart

logger = logging.getLogger(__name__)


def validate_audio_size(size: int) -> None:
    match size:
        case 0:
            raise AudioValidationError(MSG_ERR_AUDIO_EMPTY)
        case n if n > MAX_AUDIO_BYTES:
            raise AudioValidationError(MSG_ERR_AUDIO_TOO_LARGE)
        case _:
            pass


class TranscriptionClient:

    def __init__(
        self,
        transport: GenerationTransport,
        retries: int = DEFAULT_RETRY_ATTEMPTS,
        delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    ) -> None:
        self._transport = transport
        self._retries = retries
        self._delay_ms = delay_ms

    async def transcribe(self, capture: AudioCapture) -> str:
        """Return the verbatim transcript. Raises on invalid audio or an empty result."""
        size = capture.size
        validate_audio_size(size)

        encoded = encode_audio(capture)
        logger.info(MSG_TRANSCRIBING, encoded.mime_type, size / 1024, capture.reported_type)
        parts = [
            InlineAudioPart(data=encoded.data, mime_type=encoded.mime_type),
            TextPart(text=TRANSCRIPTION_PROMPT),
        ]

        @with_retry(retries=self._retries, delay_ms=self._delay_ms)
        async def attempt() -> str:
            text = await self._transport.generate(parts)
            match (text or "").strip():
                case "":
                    raise EmptyTranscriptionError(MSG_ERR_EMPTY_TRANSCRIPTION)
                case _:
                    return text

        return await attempt()
