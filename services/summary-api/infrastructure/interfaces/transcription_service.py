"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, file_path: Path) -> str:
        """
        Transcribes a local audio file to plain text.

        The file is deleted once transcription succeeds and left in place
        when it fails.

        Args:
            file_path: Path of the audio file to transcribe.

        Returns:
            The plain-text transcript.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
