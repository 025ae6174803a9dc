"""Infrastructure interface exports."""

from .audio_downloader import AudioDownloader
from .audio_resolver import AudioResolver
from .llm_service import LLMService
from .transcription_service import TranscriptionService

__all__ = ["AudioDownloader", "AudioResolver", "LLMService", "TranscriptionService"]
