"""Dependency injection configuration for the summary-api service."""

import assemblyai as aai
import httpx
from google import genai
from media_summary_common.logging import setup_logging

from config import load_config
from domain import ChatRelay, ProgressBoard, Summarizer, Translator
from handlers import SummaryPipeline
from infrastructure import (
    AssemblyAITranscriber,
    GeminiLLMService,
    HttpAudioDownloader,
    RapidAPIAudioResolver,
    ScratchSpace,
)

logger = setup_logging()

_config = load_config()

# HTTP client shared by the converter and the audio download
_http_client = httpx.Client()

_resolver = RapidAPIAudioResolver(_http_client, _config.converter)
_downloader = HttpAudioDownloader(_http_client, _config.download)
_scratch = ScratchSpace(_config.download.scratch_dir)

# AssemblyAI setup
aai.settings.api_key = _config.assemblyai.api_key
_aai_transcriber = aai.Transcriber()
_transcription_service = AssemblyAITranscriber(_aai_transcriber)

# Gemini LLM
_gemini_client = genai.Client(api_key=_config.gemini.api_key)
_llm = GeminiLLMService(_gemini_client, _config.gemini.model_name)

_prompts = _config.prompts
_summarizer = Summarizer(_llm, _prompts.summary_prompt, _prompts.summary_temperature)
_chat_relay = ChatRelay(_llm, _prompts.chat_prompt, _prompts.chat_temperature)
_translator = Translator(_llm, _prompts.translation_prompt, _prompts.translation_temperature)

_progress_board = ProgressBoard(mirror_global=_config.progress.mirror_global)

_pipeline = SummaryPipeline(
    _resolver,
    _downloader,
    _transcription_service,
    _summarizer,
    _progress_board,
    _scratch,
)

logger.info(
    "Service dependencies initialized",
    extra={
        "model": _config.gemini.model_name,
        "scratch_dir": str(_config.download.scratch_dir),
        "mirror_global_progress": _config.progress.mirror_global,
    },
)


def get_config():
    """Returns the loaded application configuration."""
    return _config


def get_pipeline() -> SummaryPipeline:
    """Returns the configured summary pipeline."""
    return _pipeline


def get_progress_board() -> ProgressBoard:
    """Returns the process-wide progress board."""
    return _progress_board


def get_chat_relay() -> ChatRelay:
    """Returns the configured chat relay."""
    return _chat_relay


def get_translator() -> Translator:
    """Returns the configured translator."""
    return _translator


def close_clients() -> None:
    """Releases pooled HTTP connections."""
    _http_client.close()
