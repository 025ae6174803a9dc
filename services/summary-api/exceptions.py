"""Custom exceptions for the summary-api service."""


class ResolutionError(Exception):
    """Raised when the conversion service cannot resolve a source URL to audio."""

    def __init__(self, source_url: str, cause: Exception | None = None):
        self.source_url = source_url
        self.cause = cause
        super().__init__(f"Failed to resolve audio for '{source_url}'")


class DownloadExhaustedError(Exception):
    """Raised when every download attempt for an audio file has failed."""

    def __init__(self, url: str, attempts: int, cause: Exception | None = None):
        self.url = url
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"Failed to download '{url}' after {attempts} attempts")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class LLMServiceError(Exception):
    """Raised when a text-generation call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class SummarizationError(Exception):
    """Raised when the transcript summary cannot be generated."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to summarize transcript")


class TranslationError(Exception):
    """Raised when a translation cannot be generated."""

    def __init__(self, target_language: str, cause: Exception | None = None):
        self.target_language = target_language
        self.cause = cause
        super().__init__(f"Failed to translate text to '{target_language}'")


class SummaryPipelineError(Exception):
    """Raised when any stage of the summary pipeline fails."""

    def __init__(self, stage: str, cause: Exception | None = None):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Summary pipeline failed during '{stage}'")
