"""GeminiTranscriptionClient — Google Gemini speech-to-text backend."""
import asyncio
import logging

from google import genai
from google.genai import types

from call_transcriber.config import Config, GeminiCredentials, resolve_credentials
from call_transcriber.constants import (
    GEMINI_USER_ROLE,
    INTEGRATION_API_VERSION,
    MSG_ATTEMPT_FAILED,
    MSG_ATTEMPT_TIMEOUT,
    MSG_CLIENT_INIT_FAILED,
    MSG_EMPTY_TRANSCRIPT,
    MSG_REMOTE_FAILED,
    MSG_RETRIES_EXHAUSTED,
    MSG_TRANSCRIBED,
    MSG_TRANSCRIBING,
    MSG_USING_INTEGRATION,
    TRANSCRIPTION_PROMPT,
)
from call_transcriber.errors import (
    ConfigurationError,
    EmptyResultError,
    ExhaustedRetriesError,
    TransientRemoteError,
    is_retryable,
)
from call_transcriber.retry import FailedAttempt, retry_async
from call_transcriber.transcription.client import TranscriptionClient
from call_transcriber.transcription.models import TranscriptionRequest, TranscriptionResult

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def extract_transcript(response) -> str:
    """Concatenate the text parts of the first candidate, trimmed once."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    return "".join(part.text for part in parts if getattr(part, "text", None)).strip()


def build_contents(request: TranscriptionRequest) -> list[types.Content]:
    return [
        types.Content(
            role=GEMINI_USER_ROLE,
            parts=[
                types.Part.from_bytes(data=request.audio, mime_type=request.mime_type),
                types.Part.from_text(text=TRANSCRIPTION_PROMPT),
            ],
        )
    ]


def make_genai_client(credentials: GeminiCredentials) -> genai.Client:
    match credentials.base_url:
        case None:
            return genai.Client(api_key=credentials.api_key)
        case base_url:
            logger.debug(MSG_USING_INTEGRATION, base_url)
            return genai.Client(
                api_key=credentials.api_key,
                http_options=types.HttpOptions(
                    base_url=base_url,
                    api_version=INTEGRATION_API_VERSION,
                ),
            )


def _log_failed_attempt(failure: FailedAttempt) -> None:
    logger.warning(
        MSG_ATTEMPT_FAILED,
        failure.attempt_number,
        failure.retries_left,
        failure.error,
    )


# ── client ────────────────────────────────────────────────────────────────────


class GeminiTranscriptionClient(TranscriptionClient):
    """Transcribes sales-call audio with Gemini, retrying transient failures."""

    def __init__(self, config: Config) -> None:
        self._config = config
        self._policy = config.retry_policy()

    async def transcribe(self, audio: bytes, mime_type: str) -> str:
        result = await self.transcribe_request(TranscriptionRequest.create(audio, mime_type))
        return result.text

    async def transcribe_request(self, request: TranscriptionRequest) -> TranscriptionResult:
        credentials = resolve_credentials(self._config)
        try:
            client = make_genai_client(credentials)
        except Exception as exc:
            raise ConfigurationError(MSG_CLIENT_INIT_FAILED % exc) from exc
        contents = build_contents(request)
        model = self._config.gemini_model
        attempts = 0

        async def attempt() -> str:
            nonlocal attempts
            attempts += 1
            return await self._generate(client, model, contents)

        logger.info(MSG_TRANSCRIBING, model, request.mime_type, len(request.audio))
        try:
            text = await retry_async(
                attempt,
                self._policy,
                is_retryable=is_retryable,
                on_failed_attempt=_log_failed_attempt,
            )
        except ExhaustedRetriesError as exc:
            logger.error(MSG_RETRIES_EXHAUSTED, exc.attempts, exc.last_error)
            raise
        finally:
            await client.aio.aclose()

        logger.info(MSG_TRANSCRIBED, attempts, len(text))
        return TranscriptionResult(text=text, attempts=attempts, model=model)

    async def _generate(self, client: genai.Client, model: str, contents: list[types.Content]) -> str:
        timeout = self._config.transcription_timeout
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(model=model, contents=contents),
                timeout=timeout,
            )
        except asyncio.TimeoutError as exc:
            raise TransientRemoteError(MSG_ATTEMPT_TIMEOUT % timeout) from exc
        except Exception as exc:
            raise TransientRemoteError(MSG_REMOTE_FAILED % exc) from exc

        try:
            text = extract_transcript(response)
        except Exception as exc:
            raise TransientRemoteError(MSG_REMOTE_FAILED % exc) from exc

        match text:
            case "":
                raise EmptyResultError(MSG_EMPTY_TRANSCRIPT)
            case transcript:
                return transcript
