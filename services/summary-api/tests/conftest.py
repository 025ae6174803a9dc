"""Shared pytest fixtures for the summary-api test suite."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

# Credentials must exist before the service wiring is imported.
os.environ.setdefault("RAPIDAPI_KEY", "test-rapidapi-key")
os.environ.setdefault("ASSEMBLYAI_API_KEY", "test-assemblyai-key")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("DD_TRACE_ENABLED", "false")

from domain.models import ResolvedAudio  # noqa: E402
from exceptions import (  # noqa: E402
    DownloadExhaustedError,
    LLMServiceError,
    ResolutionError,
    TranscriptionError,
)
from infrastructure.interfaces import (  # noqa: E402
    AudioDownloader,
    AudioResolver,
    LLMService,
    TranscriptionService,
)


class FakeResolver(AudioResolver):
    def __init__(self, title: str = "T", fail: bool = False, on_call=None):
        self.title = title
        self.fail = fail
        self.on_call = on_call
        self.calls: list[str] = []

    def resolve(self, source_url: str) -> ResolvedAudio:
        self.calls.append(source_url)
        if self.on_call:
            self.on_call()
        if self.fail:
            raise ResolutionError(source_url, Exception("converter down"))
        return ResolvedAudio(direct_url="https://cdn.example/audio.mp3", title=self.title)


class FakeDownloader(AudioDownloader):
    def __init__(self, payload: bytes = b"audio-bytes", fail: bool = False, on_call=None):
        self.payload = payload
        self.fail = fail
        self.on_call = on_call
        self.destinations: list[Path] = []

    def download(self, url: str, destination: Path) -> None:
        self.destinations.append(destination)
        if self.on_call:
            self.on_call()
        destination.write_bytes(self.payload)
        if self.fail:
            raise DownloadExhaustedError(url, 6, Exception("gone"))


class FakeTranscriber(TranscriptionService):
    """Mirrors the real contract: deletes the file on success only."""

    def __init__(self, text: str = "hello world", fail: bool = False, on_call=None):
        self.text = text
        self.fail = fail
        self.on_call = on_call
        self.seen_bytes: list[bytes] = []

    def transcribe(self, file_path: Path) -> str:
        self.seen_bytes.append(file_path.read_bytes())
        if self.on_call:
            self.on_call()
        if self.fail:
            raise TranscriptionError(file_path.name, Exception("bad audio"))
        file_path.unlink()
        return self.text


class FakeLLM(LLMService):
    def __init__(
        self,
        reply: str = "Summary.",
        fragments: list[str] | None = None,
        fail: bool = False,
        fail_after: int | None = None,
        on_call=None,
    ):
        self.reply = reply
        self.fragments = fragments or []
        self.fail = fail
        self.fail_after = fail_after
        self.on_call = on_call
        self.calls: list[tuple[str, str, float]] = []

    def generate(self, system_instruction: str, content: str, temperature: float) -> str:
        self.calls.append((system_instruction, content, temperature))
        if self.on_call:
            self.on_call()
        if self.fail:
            raise LLMServiceError("upstream unavailable")
        return self.reply

    def generate_stream(
        self, system_instruction: str, content: str, temperature: float
    ) -> Iterator[str]:
        self.calls.append((system_instruction, content, temperature))
        if self.fail:
            raise LLMServiceError("upstream unavailable")
        for index, fragment in enumerate(self.fragments):
            if self.fail_after is not None and index == self.fail_after:
                raise LLMServiceError("stream dropped")
            yield fragment


@pytest.fixture
def scratch_dir(tmp_path):
    d = tmp_path / "scratch"
    d.mkdir()
    return d


@pytest.fixture
def sleeps():
    """Records requested retry delays instead of sleeping."""
    return []
