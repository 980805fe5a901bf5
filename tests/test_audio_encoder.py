"""Audio encoder: MIME resolution and raw base64 payloads."""
import base64

import pytest

from src.audio.encoder import (
    AudioCapture,
    data_uri_mime_type,
    encode_audio,
    resolve_mime_type,
    strip_data_uri,
)
from src.errors import AudioValidationError


@pytest.mark.parametrize(
    "reported, expected",
    [
        ("audio/webm;codecs=opus", "audio/webm"),
        ("audio/mp3", "audio/mpeg"),
        ("audio/MPEG", "audio/mpeg"),
        ("audio/wav", "audio/wav"),
        ("audio/x-WAV", "audio/wav"),
        ("AUDIO/WAVE", "audio/wav"),
        ("audio/ogg", "audio/ogg"),
        ("audio/aac", "audio/aac"),
        ("audio/x-m4a", "audio/aac"),
        ("video/quicktime", "audio/webm"),
        ("", "audio/webm"),
        (None, "audio/webm"),
    ],
)
def test_resolve_mime_type(reported, expected):
    assert resolve_mime_type(reported) == expected


def test_resolve_mime_type_follows_priority_order():
    assert resolve_mime_type("audio/webm; fallback=wav") == "audio/webm"


def test_encode_bytes_produces_raw_base64():
    encoded = encode_audio(AudioCapture(data=b"fake-audio", mime_type="audio/ogg"))

    assert encoded.data == base64.standard_b64encode(b"fake-audio").decode()
    assert not encoded.data.startswith("data:")
    assert encoded.mime_type == "audio/ogg"


def test_encode_data_uri_strips_header():
    payload = "data:audio/webm;base64," + base64.b64encode(b"abc").decode()

    encoded = encode_audio(AudioCapture(data=payload, mime_type="audio/webm"))

    assert encoded.data == base64.b64encode(b"abc").decode()


def test_strip_data_uri_leaves_plain_base64_untouched():
    assert strip_data_uri("YWJj") == "YWJj"


def test_capture_size_counts_decoded_bytes():
    payload = "data:audio/wav;base64," + base64.b64encode(b"12345").decode()

    assert AudioCapture(data=payload).size == 5
    assert AudioCapture(data=b"12345").size == 5


def test_capture_immutable():
    capture = AudioCapture(data=b"x")

    with pytest.raises(Exception):
        capture.mime_type = "audio/wav"


def test_encode_data_uri_falls_back_to_header_type():
    payload = "data:audio/ogg;codecs=opus;base64," + base64.b64encode(b"abc").decode()

    assert encode_audio(AudioCapture(data=payload)).mime_type == "audio/ogg"


def test_reported_type_wins_over_data_uri_header():
    payload = "data:audio/ogg;base64," + base64.b64encode(b"abc").decode()

    assert encode_audio(AudioCapture(data=payload, mime_type="audio/wav")).mime_type == "audio/wav"


def test_plain_base64_without_type_defaults_to_webm():
    assert encode_audio(AudioCapture(data="YWJj")).mime_type == "audio/webm"


def test_data_uri_mime_type():
    assert data_uri_mime_type("data:audio/mpeg;base64,AAAA") == "audio/mpeg"
    assert data_uri_mime_type("data:;base64,AAAA") is None
    assert data_uri_mime_type("AAAA") is None


def test_capture_size_rejects_malformed_base64():
    with pytest.raises(AudioValidationError):
        AudioCapture(data="data:audio/wav;base64,abc").size
