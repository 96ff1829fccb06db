"""Entry point: wires Config → GeminiTranscriptionClient for an audio file on disk."""
import argparse
import asyncio
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from call_transcriber.config import Config
from call_transcriber.constants import (
    CLI_DESCRIPTION,
    CLI_HELP_AUDIO_FILE,
    CLI_HELP_MIME_TYPE,
    CLI_HELP_OUTPUT,
    EXIT_FAILURE,
    EXIT_OK,
    EXIT_USAGE,
    EXTENSION_AUDIO_OVERRIDES,
    MSG_FILE_UNREADABLE,
    MSG_TRANSCRIPTION_FAILED,
    MSG_UNKNOWN_MIME,
    MSG_WROTE_TRANSCRIPT,
)
from call_transcriber.errors import InvalidAudioError, TranscriptionError
from call_transcriber.transcription.gemini import GeminiTranscriptionClient
from call_transcriber.transcription.models import normalize_mime_type

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=CLI_DESCRIPTION)
    parser.add_argument("audio_file", type=Path, help=CLI_HELP_AUDIO_FILE)
    parser.add_argument("--mime-type", help=CLI_HELP_MIME_TYPE)
    parser.add_argument("-o", "--output", type=Path, help=CLI_HELP_OUTPUT)
    return parser


def guess_mime_type(path: Path) -> Optional[str]:
    override = EXTENSION_AUDIO_OVERRIDES.get(path.suffix.lower())
    if override is not None:
        return override
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    try:
        mime_type = normalize_mime_type(args.mime_type or guess_mime_type(args.audio_file))
    except InvalidAudioError:
        logger.error(MSG_UNKNOWN_MIME, args.audio_file)
        return EXIT_USAGE

    try:
        audio = args.audio_file.read_bytes()
    except OSError as exc:
        logger.error(MSG_FILE_UNREADABLE, args.audio_file, exc)
        return EXIT_USAGE

    client = GeminiTranscriptionClient(config)
    try:
        transcript = asyncio.run(client.transcribe(audio, mime_type))
    except TranscriptionError as exc:
        logger.error(MSG_TRANSCRIPTION_FAILED, exc)
        return EXIT_FAILURE

    match args.output:
        case None:
            print(transcript)
        case path:
            path.write_text(transcript + "\n", encoding="utf-8")
            logger.info(MSG_WROTE_TRANSCRIPT, path)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
