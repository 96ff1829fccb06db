from dataclasses import dataclass
from typing import Optional
import math
import os
from dotenv import load_dotenv

from call_transcriber.constants import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MIN_DELAY,
    DEFAULT_TRANSCRIPTION_TIMEOUT,
    ENV_GEMINI_API_KEY,
    ENV_GEMINI_MODEL,
    ENV_INTEGRATION_API_KEY,
    ENV_INTEGRATION_BASE_URL,
    ENV_LOG_LEVEL,
    ENV_MAX_DELAY,
    ENV_MAX_RETRIES,
    ENV_MIN_DELAY,
    ENV_TRANSCRIPTION_TIMEOUT,
    MSG_MIN_ABOVE_MAX,
    MSG_NEGATIVE,
    MSG_NO_CREDENTIALS,
    MSG_NOT_A_NUMBER,
    MSG_NOT_FINITE,
    MSG_NOT_POSITIVE,
)
from call_transcriber.errors import ConfigurationError
from call_transcriber.retry import RetryPolicy


@dataclass(frozen=True)
class Config:
    integration_api_key: Optional[str]
    integration_base_url: Optional[str]
    gemini_api_key: Optional[str]
    gemini_model: str
    log_level: str
    transcription_timeout: float
    max_retries: int
    min_delay: float
    max_delay: float

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        integration_api_key = os.getenv(ENV_INTEGRATION_API_KEY) or None
        integration_base_url = os.getenv(ENV_INTEGRATION_BASE_URL) or None
        gemini_api_key = os.getenv(ENV_GEMINI_API_KEY) or None
        gemini_model = os.getenv(ENV_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL
        log_level = os.getenv(ENV_LOG_LEVEL, "INFO")
        timeout = os.getenv(ENV_TRANSCRIPTION_TIMEOUT) or str(DEFAULT_TRANSCRIPTION_TIMEOUT)
        max_retries = os.getenv(ENV_MAX_RETRIES) or str(DEFAULT_MAX_RETRIES)
        min_delay = os.getenv(ENV_MIN_DELAY) or str(DEFAULT_MIN_DELAY)
        max_delay = os.getenv(ENV_MAX_DELAY) or str(DEFAULT_MAX_DELAY)

        return cls(
            integration_api_key=integration_api_key,
            integration_base_url=integration_base_url,
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            log_level=log_level,
            transcription_timeout=_parse(float, ENV_TRANSCRIPTION_TIMEOUT, timeout),
            max_retries=_parse(int, ENV_MAX_RETRIES, max_retries),
            min_delay=_parse(float, ENV_MIN_DELAY, min_delay),
            max_delay=_parse(float, ENV_MAX_DELAY, max_delay),
        )

    def __post_init__(self) -> None:
        _require_finite(ENV_TRANSCRIPTION_TIMEOUT, self.transcription_timeout)
        _require_finite(ENV_MIN_DELAY, self.min_delay)
        _require_finite(ENV_MAX_DELAY, self.max_delay)

        match self.transcription_timeout:
            case t if t <= 0:
                raise ValueError(MSG_NOT_POSITIVE % ENV_TRANSCRIPTION_TIMEOUT)
            case _:
                pass

        match self.max_retries:
            case n if n < 0:
                raise ValueError(MSG_NEGATIVE % ENV_MAX_RETRIES)
            case _:
                pass

        match (self.min_delay, self.max_delay):
            case (lo, _) if lo < 0:
                raise ValueError(MSG_NEGATIVE % ENV_MIN_DELAY)
            case (lo, hi) if lo > hi:
                raise ValueError(MSG_MIN_ABOVE_MAX % (ENV_MIN_DELAY, ENV_MAX_DELAY))
            case _:
                pass

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_retries=self.max_retries,
            min_delay=self.min_delay,
            max_delay=self.max_delay,
        )


@dataclass(frozen=True)
class GeminiCredentials:
    api_key: str
    base_url: Optional[str] = None


def resolve_credentials(config: Config) -> GeminiCredentials:
    """Integration key + base URL first, standalone key second."""
    match (config.integration_api_key, config.integration_base_url, config.gemini_api_key):
        case (str() as key, str() as url, _) if key and url:
            return GeminiCredentials(api_key=key, base_url=url)
        case (_, _, str() as key) if key:
            return GeminiCredentials(api_key=key)
        case _:
            raise ConfigurationError(MSG_NO_CREDENTIALS)


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(MSG_NOT_FINITE % (name, value))


def _parse(kind: type, name: str, raw: str):
    try:
        value = kind(raw)
    except ValueError:
        raise ValueError(MSG_NOT_A_NUMBER % (name, raw)) from None
    _require_finite(name, value)
    return value
