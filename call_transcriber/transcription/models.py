from dataclasses import dataclass

from call_transcriber.constants import (
    AUDIO_MIME_ALIASES,
    MSG_EMPTY_AUDIO,
    MSG_UNSUPPORTED_MIME,
)
from call_transcriber.errors import InvalidAudioError


def normalize_mime_type(mime_type: str) -> str:
    """Map a declared media type onto the canonical audio type Gemini expects.

    Parameters such as ``;codecs=opus`` are dropped. Raises InvalidAudioError
    for anything that is not a recognized audio type.
    """
    base = (mime_type or "").split(";", 1)[0].strip().lower()
    match AUDIO_MIME_ALIASES.get(base):
        case None:
            raise InvalidAudioError(MSG_UNSUPPORTED_MIME % mime_type)
        case canonical:
            return canonical


@dataclass(frozen=True)
class TranscriptionRequest:
    audio: bytes
    mime_type: str

    @classmethod
    def create(cls, audio: bytes, mime_type: str) -> "TranscriptionRequest":
        if not audio:
            raise InvalidAudioError(MSG_EMPTY_AUDIO)
        return cls(audio=bytes(audio), mime_type=normalize_mime_type(mime_type))


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    attempts: int
    model: str
