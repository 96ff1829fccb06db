"""TranscriptionRequest validation and media-type normalization."""
import pytest

from call_transcriber.errors import InvalidAudioError
from call_transcriber.transcription.models import TranscriptionRequest, normalize_mime_type


@pytest.mark.parametrize(
    ("declared", "canonical"),
    [
        ("audio/mpeg", "audio/mp3"),
        ("audio/mp3", "audio/mp3"),
        ("audio/x-wav", "audio/wav"),
        ("AUDIO/WAV", "audio/wav"),
        ("audio/ogg; codecs=opus", "audio/ogg"),
        ("audio/x-m4a", "audio/mp4"),
    ],
)
def test_normalize_known_audio_types(declared, canonical):
    assert normalize_mime_type(declared) == canonical


@pytest.mark.parametrize("declared", ["", "video/mp4", "text/plain", "audio/unknown"])
def test_normalize_rejects_unrecognized_types(declared):
    with pytest.raises(InvalidAudioError):
        normalize_mime_type(declared)


def test_request_create_normalizes_mime_type():
    request = TranscriptionRequest.create(bytearray(b"abc"), "audio/mpeg")

    assert request.audio == b"abc"
    assert request.mime_type == "audio/mp3"


def test_request_create_rejects_empty_payload():
    with pytest.raises(InvalidAudioError, match="empty"):
        TranscriptionRequest.create(b"", "audio/wav")
