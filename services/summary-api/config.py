"""Application configuration loaded from environment variables."""

import os
import tempfile
from pathlib import Path

from media_summary_common import ConfigurationError
from pydantic import BaseModel

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

SUMMARY_PROMPT = (
    "You are a video summarizer. Given the following transcript of a video, "
    "provide a concise summary of the main points and key information. "
    "Also expand a little bit on the summary:"
)

CHAT_PROMPT = (
    "You are a helpful assistant that can answer questions about a podcast "
    "summary. Here's the summary:"
)

TRANSLATION_PROMPT = (
    "You are a professional translator. Translate the following text to "
    "{target_language}. Maintain the original meaning and tone as closely "
    "as possible."
)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: tuple[str, ...] = ("*",)


class ConverterConfig(BaseModel, frozen=True):
    """RapidAPI audio-conversion service configuration."""

    api_key: str
    host: str = "youtube-to-mp315.p.rapidapi.com"
    endpoint: str = "https://youtube-to-mp315.p.rapidapi.com/download"
    audio_format: str = "mp3"
    quality: str = "5"
    timeout_seconds: float = 60.0


class DownloadConfig(BaseModel, frozen=True):
    """Audio download and scratch storage configuration."""

    max_attempts: int = 6
    retry_delay_seconds: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    chunk_size: int = 64 * 1024
    timeout_seconds: float = 120.0
    scratch_dir: Path = Path(tempfile.gettempdir())


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"


class PromptConfig(BaseModel, frozen=True):
    """Fixed instructions and sampling temperatures for text generation."""

    summary_prompt: str = SUMMARY_PROMPT
    summary_temperature: float = 0.5
    chat_prompt: str = CHAT_PROMPT
    chat_temperature: float = 0.7
    translation_prompt: str = TRANSLATION_PROMPT
    translation_temperature: float = 0.5


class ProgressConfig(BaseModel, frozen=True):
    """Progress reporting configuration."""

    # Mirror every invocation into the process-wide gauge served by GET /progress.
    mirror_global: bool = True


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    converter: ConverterConfig
    download: DownloadConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    prompts: PromptConfig = PromptConfig()
    progress: ProgressConfig = ProgressConfig()


_REQUIRED_CREDENTIALS = ("RAPIDAPI_KEY", "ASSEMBLYAI_API_KEY", "GEMINI_API_KEY")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If any API credential is missing or empty.
    """
    missing = [name for name in _REQUIRED_CREDENTIALS if not os.getenv(name)]
    if missing:
        raise ConfigurationError(missing)

    cors_origins = os.getenv("CORS_ORIGINS", "*")

    return AppConfig(
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            cors_origins=tuple(o.strip() for o in cors_origins.split(",") if o.strip()),
        ),
        converter=ConverterConfig(
            api_key=os.environ["RAPIDAPI_KEY"],
        ),
        download=DownloadConfig(
            max_attempts=int(os.getenv("DOWNLOAD_MAX_ATTEMPTS", "6")),
            retry_delay_seconds=float(os.getenv("DOWNLOAD_RETRY_DELAY_SECONDS", "20")),
            scratch_dir=Path(os.getenv("SCRATCH_DIR", tempfile.gettempdir())),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.environ["ASSEMBLYAI_API_KEY"],
        ),
        gemini=GeminiConfig(
            api_key=os.environ["GEMINI_API_KEY"],
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        ),
        progress=ProgressConfig(
            mirror_global=_env_flag("PROGRESS_MIRROR_GLOBAL", True),
        ),
    )
