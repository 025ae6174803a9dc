"""Infrastructure layer exports."""

from infrastructure.assemblyai_transcriber import AssemblyAITranscriber
from infrastructure.gemini_llm import GeminiLLMService
from infrastructure.http_downloader import HttpAudioDownloader
from infrastructure.rapidapi_resolver import RapidAPIAudioResolver
from infrastructure.scratch_storage import ScratchSpace

__all__ = [
    "AssemblyAITranscriber",
    "GeminiLLMService",
    "HttpAudioDownloader",
    "RapidAPIAudioResolver",
    "ScratchSpace",
]
