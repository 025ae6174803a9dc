"""Tests for the AssemblyAI transcriber adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import assemblyai as aai
import pytest

from exceptions import TranscriptionError
from infrastructure.assemblyai_transcriber import AssemblyAITranscriber


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "audio-inv.mp3"
    path.write_bytes(b"ID3-fake-mp3")
    return path


def transcript(status, text=None, error=None):
    return SimpleNamespace(status=status, text=text, error=error)


class TestAssemblyAITranscriber:
    def test_success_returns_text_and_deletes_file(self, audio_file):
        sdk = MagicMock()
        sdk.transcribe.return_value = transcript(aai.TranscriptStatus.completed, "hello world")

        text = AssemblyAITranscriber(sdk).transcribe(audio_file)

        assert text == "hello world"
        assert not audio_file.exists()
        sdk.transcribe.assert_called_once_with(str(audio_file))

    def test_error_status_keeps_file(self, audio_file):
        sdk = MagicMock()
        sdk.transcribe.return_value = transcript(
            aai.TranscriptStatus.error, error="unsupported audio"
        )

        with pytest.raises(TranscriptionError) as exc_info:
            AssemblyAITranscriber(sdk).transcribe(audio_file)

        assert audio_file.exists()
        assert exc_info.value.file_name == audio_file.name
        assert "unsupported audio" in str(exc_info.value.cause)

    def test_missing_text_keeps_file(self, audio_file):
        sdk = MagicMock()
        sdk.transcribe.return_value = transcript(aai.TranscriptStatus.completed, None)

        with pytest.raises(TranscriptionError):
            AssemblyAITranscriber(sdk).transcribe(audio_file)

        assert audio_file.exists()

    def test_sdk_exception_is_wrapped_and_keeps_file(self, audio_file):
        sdk = MagicMock()
        boom = RuntimeError("upload failed")
        sdk.transcribe.side_effect = boom

        with pytest.raises(TranscriptionError) as exc_info:
            AssemblyAITranscriber(sdk).transcribe(audio_file)

        assert exc_info.value.cause is boom
        assert audio_file.exists()

    def test_empty_transcript_is_a_success(self, audio_file):
        sdk = MagicMock()
        sdk.transcribe.return_value = transcript(aai.TranscriptStatus.completed, "")

        assert AssemblyAITranscriber(sdk).transcribe(audio_file) == ""
        assert not audio_file.exists()
