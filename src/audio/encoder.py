"""Audio payload encoder — base64 body plus canonical media type."""
import base64
import binascii
from dataclasses import dataclass
from typing import Optional

from src.constants import (
    AUDIO_MIME_TABLE,
    DATA_URI_PREFIX,
    DEFAULT_AUDIO_MIME,
    MSG_ERR_AUDIO_UNREADABLE,
)
from src.errors import AudioValidationError


@dataclass(frozen=True)
class AudioCapture:
    """Audio handed over by a recorder: raw bytes, or a data-URI/base64 string."""

    data: bytes | str
    mime_type: Optional[str] = None

    @property
    def size(self) -> int:
        match self.data:
            case bytes() as raw:
                return len(raw)
            case str() as text:
                return len(decode_payload(text))

    @property
    def reported_type(self) -> Optional[str]:
        """The capture's own type, else the type named in a data-URI header."""
        match (self.mime_type, self.data):
            case (str() as mime, _) if mime:
                return mime
            case (_, str() as text):
                return data_uri_mime_type(text)
            case _:
                return None


@dataclass(frozen=True)
class EncodedAudio:
    data: str
    mime_type: str


def resolve_mime_type(reported: Optional[str]) -> str:
    lowered = (reported or "").lower()
    return next(
        (
            mime
            for needles, mime in AUDIO_MIME_TABLE
            if any(needle in lowered for needle in needles)
        ),
        DEFAULT_AUDIO_MIME,
    )


def strip_data_uri(payload: str) -> str:
    """Drop a ``data:<type>;base64,`` header, leaving raw base64 content."""
    match payload.startswith(DATA_URI_PREFIX):
        case True:
            return payload.split(",", 1)[1] if "," in payload else ""
        case False:
            return payload


def data_uri_mime_type(payload: str) -> Optional[str]:
    match payload.startswith(DATA_URI_PREFIX) and "," in payload:
        case True:
            header = payload[len(DATA_URI_PREFIX):payload.index(",")]
            return header.split(";", 1)[0] or None
        case False:
            return None


def decode_payload(payload: str) -> bytes:
    """Decode a base64 or data-URI string. Raises AudioValidationError if malformed."""
    try:
        return base64.b64decode(strip_data_uri(payload), validate=True)
    except binascii.Error as e:
        raise AudioValidationError(MSG_ERR_AUDIO_UNREADABLE) from e


def encode_audio(capture: AudioCapture) -> EncodedAudio:
    match capture.data:
        case bytes() as raw:
            data = base64.standard_b64encode(raw).decode()
        case str() as text:
            data = strip_data_uri(text)
    return EncodedAudio(data=data, mime_type=resolve_mime_type(capture.reported_type))
