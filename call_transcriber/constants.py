"""Prompt text, defaults, env names and log messages shared across the package."""

# Gemini
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_USER_ROLE = "user"
# Integration proxies expose the API without a version path segment.
INTEGRATION_API_VERSION = ""

# Environment variables
ENV_INTEGRATION_API_KEY = "AI_INTEGRATIONS_GEMINI_API_KEY"
ENV_INTEGRATION_BASE_URL = "AI_INTEGRATIONS_GEMINI_BASE_URL"
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_TRANSCRIPTION_TIMEOUT = "TRANSCRIPTION_TIMEOUT"
ENV_MAX_RETRIES = "TRANSCRIPTION_MAX_RETRIES"
ENV_MIN_DELAY = "TRANSCRIPTION_MIN_DELAY"
ENV_MAX_DELAY = "TRANSCRIPTION_MAX_DELAY"

# Retry / timeout defaults (seconds)
DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_DELAY: float = 1.0
DEFAULT_MAX_DELAY: float = 10.0
DEFAULT_BACKOFF_FACTOR: float = 2.0
DEFAULT_TRANSCRIPTION_TIMEOUT: float = 120.0

# Audio media types Gemini accepts, keyed by the aliases callers send.
AUDIO_MIME_ALIASES: dict[str, str] = {
    "audio/wav": "audio/wav",
    "audio/x-wav": "audio/wav",
    "audio/wave": "audio/wav",
    "audio/mp3": "audio/mp3",
    "audio/mpeg": "audio/mp3",
    "audio/aiff": "audio/aiff",
    "audio/x-aiff": "audio/aiff",
    "audio/aac": "audio/aac",
    "audio/ogg": "audio/ogg",
    "audio/flac": "audio/flac",
    "audio/x-flac": "audio/flac",
    "audio/webm": "audio/webm",
    "audio/mp4": "audio/mp4",
    "audio/m4a": "audio/mp4",
    "audio/x-m4a": "audio/mp4",
}

TRANSCRIPTION_PROMPT = (
    "Please transcribe this sales call audio recording.\n"
    "\n"
    "Provide a complete and accurate transcription of the conversation.\n"
    'Include speaker labels where you can distinguish different speakers (e.g., "SDR:", "Prospect:").\n'
    'Preserve the natural flow of conversation including pauses indicated by "..." where appropriate.\n'
    "Focus on capturing the exact words spoken, including any sales techniques, objections, and responses.\n"
    "\n"
    "Output only the transcription text, no additional commentary."
)

# Log / error messages
MSG_NO_CREDENTIALS = (
    "No Gemini API key configured "
    "(AI_INTEGRATIONS_GEMINI_API_KEY + AI_INTEGRATIONS_GEMINI_BASE_URL or GEMINI_API_KEY)"
)
MSG_EMPTY_AUDIO = "Audio payload is empty"
MSG_UNSUPPORTED_MIME = "Unsupported audio media type: %r"
MSG_EMPTY_TRANSCRIPT = "Empty transcription received from Gemini"
MSG_REMOTE_FAILED = "Gemini request failed: %s"
MSG_ATTEMPT_TIMEOUT = "Gemini request timed out after %.1fs"
MSG_ATTEMPT_FAILED = "Transcription attempt %d failed. %d retries left. (%s)"
MSG_RETRIES_EXHAUSTED = "Gave up after %d attempts: %s"
MSG_TRANSCRIBING = "→ Gemini %s (%s, %d bytes)"
MSG_TRANSCRIBED = "✓ Transcribed in %d attempt(s), %d chars"
MSG_TRANSCRIPTION_FAILED = "✗ Transcription failed: %s"
MSG_USING_INTEGRATION = "Using Gemini integration endpoint %s"

# CLI
CLI_DESCRIPTION = "Transcribe a recorded sales call with Gemini."
CLI_HELP_AUDIO_FILE = "Recorded call audio (mp3, wav, ogg, ...)."
CLI_HELP_MIME_TYPE = "Audio media type; guessed from the file extension if omitted."
CLI_HELP_OUTPUT = "Write the transcript here instead of stdout."
MSG_FILE_UNREADABLE = "Cannot read audio file %s: %s"
MSG_UNKNOWN_MIME = "Cannot guess media type for %s; pass --mime-type"
MSG_WROTE_TRANSCRIPT = "Transcript written to %s"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# Validation messages
MSG_NOT_A_NUMBER = "%s must be a number, got %r"
MSG_NOT_FINITE = "%s must be a finite number, got %r"
MSG_NOT_POSITIVE = "%s must be positive"
MSG_NEGATIVE = "%s must be >= 0"
MSG_MIN_ABOVE_MAX = "%s must not exceed %s"
MSG_FACTOR_TOO_SMALL = "%s must be >= 1"
MSG_RETRYING_IN = "Retrying in %.2fs"
MSG_CLIENT_INIT_FAILED = "Could not create Gemini client: %s"

# Extensions mimetypes maps to video/* that hold audio-only call recordings
EXTENSION_AUDIO_OVERRIDES: dict[str, str] = {
    ".webm": "audio/webm",
    ".mp4": "audio/mp4",
    ".m4a": "audio/mp4",
}
