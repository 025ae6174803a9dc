"""Abstract interface for audio download operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class AudioDownloader(ABC):
    """Abstract base class for audio file downloaders."""

    @abstractmethod
    def download(self, url: str, destination: Path) -> None:
        """
        Streams the file at ``url`` into ``destination``.

        Args:
            url: Direct URL of the audio file.
            destination: Local path to write; replaced on every attempt.

        Raises:
            DownloadExhaustedError: If every attempt fails.
        """
