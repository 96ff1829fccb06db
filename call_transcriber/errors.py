"""Transcription error hierarchy."""
from call_transcriber.constants import MSG_RETRIES_EXHAUSTED


class TranscriptionError(Exception):
    """Base class for every failure raised by the transcription component."""


class ConfigurationError(TranscriptionError):
    """No usable Gemini credentials. Fatal, never retried."""


class InvalidAudioError(TranscriptionError):
    """Empty payload or unrecognized audio media type. Fatal, never retried."""


class EmptyResultError(TranscriptionError):
    """The remote call succeeded but returned no usable text."""


class TransientRemoteError(TranscriptionError):
    """Network, API, timeout or malformed-payload failure from the remote call."""


class ExhaustedRetriesError(TranscriptionError):

    def __init__(self, attempts: int, last_error: BaseException) -> None:
        super().__init__(MSG_RETRIES_EXHAUSTED % (attempts, last_error))
        self.attempts = attempts
        self.last_error = last_error


FATAL_ERRORS = (ConfigurationError, InvalidAudioError)


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, Exception) and not isinstance(exc, FATAL_ERRORS)
