"""Tests for the retrying HTTP audio downloader."""

import httpx
import pytest

from config import DownloadConfig
from exceptions import DownloadExhaustedError
from infrastructure.http_downloader import HttpAudioDownloader

AUDIO_URL = "https://cdn.example/audio.mp3"


class BrokenStream(httpx.SyncByteStream):
    """Yields some bytes, then fails like a dropped connection."""

    def __init__(self, partial: bytes):
        self._partial = partial

    def __iter__(self):
        yield self._partial
        raise httpx.ReadError("connection reset by peer")


def make_downloader(handler, sleeps, **overrides):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpAudioDownloader(client, DownloadConfig(**overrides), sleep=sleeps.append)


def failing_then_ok(failures: int, body: bytes = b"complete-audio"):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if len(requests) <= failures:
            return httpx.Response(503)
        return httpx.Response(200, content=body)

    return handler, requests


class TestHttpAudioDownloader:
    def test_first_attempt_success(self, tmp_path, sleeps):
        handler, requests = failing_then_ok(0)
        destination = tmp_path / "audio.mp3"

        make_downloader(handler, sleeps).download(AUDIO_URL, destination)

        assert destination.read_bytes() == b"complete-audio"
        assert len(requests) == 1
        assert sleeps == []

    @pytest.mark.parametrize("failures", [1, 2, 5])
    def test_retries_until_success(self, tmp_path, sleeps, failures):
        handler, requests = failing_then_ok(failures)
        destination = tmp_path / "audio.mp3"

        make_downloader(handler, sleeps).download(AUDIO_URL, destination)

        assert len(requests) == failures + 1
        assert sleeps == [20.0] * failures
        assert destination.read_bytes() == b"complete-audio"

    def test_gives_up_after_six_attempts(self, tmp_path, sleeps):
        handler, requests = failing_then_ok(failures=100)

        with pytest.raises(DownloadExhaustedError) as exc_info:
            make_downloader(handler, sleeps).download(AUDIO_URL, tmp_path / "audio.mp3")

        assert len(requests) == 6
        assert sleeps == [20.0] * 5
        assert exc_info.value.attempts == 6
        assert exc_info.value.url == AUDIO_URL
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_network_errors_are_retried(self, tmp_path, sleeps):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, content=b"ok")

        destination = tmp_path / "audio.mp3"
        make_downloader(handler, sleeps).download(AUDIO_URL, destination)

        assert len(calls) == 3
        assert destination.read_bytes() == b"ok"

    def test_partial_bytes_never_survive_a_failed_attempt(self, tmp_path, sleeps):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(200, stream=BrokenStream(b"partial-garbage-bytes"))
            return httpx.Response(200, content=b"good")

        destination = tmp_path / "audio.mp3"
        make_downloader(handler, sleeps).download(AUDIO_URL, destination)

        assert len(calls) == 2
        assert destination.read_bytes() == b"good"

    def test_existing_destination_is_truncated(self, tmp_path, sleeps):
        destination = tmp_path / "audio.mp3"
        destination.write_bytes(b"x" * 1000)
        handler, _ = failing_then_ok(0, body=b"short")

        make_downloader(handler, sleeps).download(AUDIO_URL, destination)

        assert destination.read_bytes() == b"short"

    def test_sends_browser_user_agent(self, tmp_path, sleeps):
        handler, requests = failing_then_ok(0)

        make_downloader(handler, sleeps).download(AUDIO_URL, tmp_path / "audio.mp3")

        assert "Mozilla/5.0" in requests[0].headers["User-Agent"]
        assert str(requests[0].url) == AUDIO_URL

    def test_attempts_and_delay_follow_config(self, tmp_path, sleeps):
        handler, requests = failing_then_ok(failures=100)

        with pytest.raises(DownloadExhaustedError):
            make_downloader(
                handler, sleeps, max_attempts=3, retry_delay_seconds=1.5
            ).download(AUDIO_URL, tmp_path / "audio.mp3")

        assert len(requests) == 3
        assert sleeps == [1.5, 1.5]
