"""HTTP implementation of the AudioDownloader interface with fixed-delay retries."""

import time
from collections.abc import Callable
from pathlib import Path

import httpx
from media_summary_common.logging import setup_logging
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from config import DownloadConfig
from exceptions import DownloadExhaustedError

from .interfaces import AudioDownloader

logger = setup_logging()


class HttpAudioDownloader(AudioDownloader):
    """Streams audio files to disk, retrying failed attempts after a fixed delay."""

    def __init__(
        self,
        client: httpx.Client,
        config: DownloadConfig,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._client = client
        self._config = config
        self._sleep = sleep

    def download(self, url: str, destination: Path) -> None:
        """
        Downloads ``url`` into ``destination``.

        Each attempt reopens the HTTP stream and truncates the destination,
        so bytes from a failed attempt never survive into a later one.

        Raises:
            DownloadExhaustedError: After ``max_attempts`` consecutive failures,
                carrying the last underlying error.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self._config.max_attempts),
            wait=wait_fixed(self._config.retry_delay_seconds),
            retry=retry_if_exception_type(Exception),
            sleep=self._sleep,
            before_sleep=self._log_failed_attempt,
        )
        try:
            retrying(self._attempt, url, destination)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            logger.error(
                "Audio download exhausted",
                extra={"url": url, "attempts": e.last_attempt.attempt_number},
            )
            raise DownloadExhaustedError(
                url, e.last_attempt.attempt_number, last_error
            ) from last_error

        logger.info(
            "Audio downloaded",
            extra={"url": url, "destination": str(destination)},
        )

    def _attempt(self, url: str, destination: Path) -> None:
        """Performs a single streamed download attempt."""
        headers = {"User-Agent": self._config.user_agent}
        with self._client.stream(
            "GET",
            url,
            headers=headers,
            follow_redirects=True,
            timeout=self._config.timeout_seconds,
        ) as response:
            response.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in response.iter_bytes(self._config.chunk_size):
                    f.write(chunk)

    def _log_failed_attempt(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Download attempt failed",
            extra={
                "attempt": retry_state.attempt_number,
                "max_attempts": self._config.max_attempts,
                "retry_in_seconds": self._config.retry_delay_seconds,
                "error": str(error),
            },
        )
