"""Invocation-scoped scratch files for downloaded audio."""

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from media_summary_common.logging import setup_logging

logger = setup_logging()


class ScratchSpace:
    """Allocates uniquely named scratch files that are removed on scope exit."""

    def __init__(self, directory: Path, suffix: str = ".mp3"):
        self._directory = directory
        self._suffix = suffix

    @contextmanager
    def allocate(self, invocation_id: str) -> Iterator[Path]:
        """Yields a fresh empty file path, deleting it when the block exits."""
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(
            prefix=f"audio-{invocation_id}-",
            suffix=self._suffix,
            dir=self._directory,
        )
        os.close(fd)
        path = Path(name)
        try:
            yield path
        finally:
            if path.exists():
                path.unlink()
                logger.info("Scratch file removed", extra={"path": str(path)})
