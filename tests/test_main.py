"""CLI entry point wiring."""
import pytest
from unittest.mock import AsyncMock, patch

from call_transcriber import main as cli
from call_transcriber.errors import ExhaustedRetriesError


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    monkeypatch.setattr("call_transcriber.config.load_dotenv", lambda **_: None)
    monkeypatch.setattr(cli, "_setup_logging", lambda level: None)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")


@pytest.fixture
def mock_client():
    with patch("call_transcriber.main.GeminiTranscriptionClient") as mock_cls:
        instance = mock_cls.return_value
        instance.transcribe = AsyncMock(return_value="SDR: Hello?")
        yield instance


def test_guess_mime_type_from_extension(tmp_path):
    assert cli.guess_mime_type(tmp_path / "call.mp3") == "audio/mpeg"
    assert cli.guess_mime_type(tmp_path / "call.unknownext") is None


def test_main_prints_transcript(tmp_path, capsys, mock_client):
    audio = tmp_path / "call.mp3"
    audio.write_bytes(b"fake-mp3")

    code = cli.main([str(audio)])

    assert code == 0
    assert capsys.readouterr().out.strip() == "SDR: Hello?"
    mock_client.transcribe.assert_awaited_once_with(b"fake-mp3", "audio/mp3")


def test_main_explicit_mime_type_and_output_file(tmp_path, mock_client):
    audio = tmp_path / "call.bin"
    audio.write_bytes(b"raw")
    out = tmp_path / "transcript.txt"

    code = cli.main([str(audio), "--mime-type", "audio/wav", "-o", str(out)])

    assert code == 0
    assert out.read_text(encoding="utf-8") == "SDR: Hello?\n"
    mock_client.transcribe.assert_awaited_once_with(b"raw", "audio/wav")


def test_main_unknown_mime_type_is_usage_error(tmp_path, mock_client):
    audio = tmp_path / "call.unknownext"
    audio.write_bytes(b"raw")

    assert cli.main([str(audio)]) == 2
    mock_client.transcribe.assert_not_called()


def test_main_missing_file_is_usage_error(tmp_path, mock_client):
    assert cli.main([str(tmp_path / "missing.wav")]) == 2
    mock_client.transcribe.assert_not_called()


def test_main_transcription_failure_exits_nonzero(tmp_path, mock_client):
    audio = tmp_path / "call.wav"
    audio.write_bytes(b"raw")
    mock_client.transcribe.side_effect = ExhaustedRetriesError(4, RuntimeError("down"))

    assert cli.main([str(audio)]) == 1


def test_guess_mime_type_prefers_audio_for_webm(tmp_path):
    assert cli.guess_mime_type(tmp_path / "call.webm") == "audio/webm"
    assert cli.guess_mime_type(tmp_path / "CALL.M4A") == "audio/mp4"


def test_main_webm_recording_is_transcribed(tmp_path, mock_client):
    audio = tmp_path / "call.webm"
    audio.write_bytes(b"webm-bytes")

    assert cli.main([str(audio)]) == 0
    mock_client.transcribe.assert_awaited_once_with(b"webm-bytes", "audio/webm")


def test_main_non_audio_file_is_usage_error(tmp_path, mock_client):
    notes = tmp_path / "call.txt"
    notes.write_text("not audio")

    assert cli.main([str(notes)]) == 2
    mock_client.transcribe.assert_not_called()


def test_main_non_audio_explicit_mime_type_is_usage_error(tmp_path, mock_client):
    audio = tmp_path / "call.wav"
    audio.write_bytes(b"raw")

    assert cli.main([str(audio), "--mime-type", "video/mp4"]) == 2
    mock_client.transcribe.assert_not_called()
