"""TranscriptionClient: validation before the network, empty-result policy."""
import base64

import pytest

from src.audio.encoder import AudioCapture
from src.constants import MAX_AUDIO_BYTES, TRANSCRIPTION_PROMPT
from src.errors import AudioValidationError, EmptyTranscriptionError
from src.lecture.transcription import TranscriptionClient
from src.transport.client import InlineAudioPart, TextPart
from tests.fakes import FakeTransport, RateLimitError


async def test_transcribe_sends_audio_then_instruction():
    transport = FakeTransport("hello class")
    client = TranscriptionClient(transport)

    result = await client.transcribe(AudioCapture(data=b"audio-bytes", mime_type="audio/wav"))

    assert result == "hello class"
    audio_part, text_part = transport.calls[0]
    assert isinstance(audio_part, InlineAudioPart)
    assert audio_part.mime_type == "audio/wav"
    assert text_part == TextPart(text=TRANSCRIPTION_PROMPT)


async def test_transcribe_rejects_empty_audio_without_network_call():
    transport = FakeTransport("unused")
    client = TranscriptionClient(transport)

    with pytest.raises(AudioValidationError, match="empty"):
        await client.transcribe(AudioCapture(data=b""))

    assert transport.calls == []


async def test_transcribe_rejects_oversized_audio_without_network_call():
    transport = FakeTransport("unused")
    client = TranscriptionClient(transport)

    with pytest.raises(AudioValidationError, match="too large"):
        await client.transcribe(AudioCapture(data=b"\0" * (MAX_AUDIO_BYTES + 1)))

    assert transport.calls == []


async def test_transcribe_accepts_audio_at_the_ceiling():
    transport = FakeTransport("ok")
    client = TranscriptionClient(transport)

    assert await client.transcribe(AudioCapture(data=b"\0" * MAX_AUDIO_BYTES)) == "ok"


@pytest.mark.parametrize("reply", ["", "   \n\t "])
async def test_transcribe_raises_on_blank_result(reply):
    client = TranscriptionClient(FakeTransport(reply))

    with pytest.raises(EmptyTranscriptionError, match="too quiet or unclear"):
        await client.transcribe(AudioCapture(data=b"audio"))


async def test_transcribe_retries_rate_limit(sleeps):
    transport = FakeTransport(RateLimitError(), "transcript")
    client = TranscriptionClient(transport)

    assert await client.transcribe(AudioCapture(data=b"audio")) == "transcript"
    assert len(transport.calls) == 2
    assert sleeps.delays == [2.0]


async def test_transcribe_propagates_remote_error():
    client = TranscriptionClient(FakeTransport(RuntimeError("bad request")))

    with pytest.raises(RuntimeError, match="bad request"):
        await client.transcribe(AudioCapture(data=b"audio"))


@pytest.mark.parametrize(
    "payload",
    ["data:audio/wav;base64,abc", "not base64!", "data:audio/webm;base64,YWJj$$"],
)
async def test_transcribe_rejects_malformed_base64_without_network_call(payload):
    transport = FakeTransport("unused")
    client = TranscriptionClient(transport)

    with pytest.raises(AudioValidationError, match="not valid base64"):
        await client.transcribe(AudioCapture(data=payload))

    assert transport.calls == []


async def test_transcribe_uses_data_uri_type_when_none_reported():
    transport = FakeTransport("words")
    client = TranscriptionClient(transport)
    payload = "data:audio/wav;base64," + base64.b64encode(b"audio").decode()

    await client.transcribe(AudioCapture(data=payload))

    audio_part = transport.calls[0][0]
    assert audio_part.mime_type == "audio/wav"
