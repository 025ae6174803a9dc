"""Request and response models for the summary-api."""

from pydantic import BaseModel, ConfigDict, Field


class SummarizeRequest(BaseModel):
    """Body of a summarize request."""

    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(..., min_length=1)
    # Used in scratch file names, so restricted to a filename-safe alphabet.
    invocation_id: str | None = Field(
        default=None,
        alias="invocationId",
        pattern=r"^[A-Za-z0-9_-]{1,64}$",
    )


class SummarizeResponse(BaseModel):
    """Summary and title of a summarized media source."""

    summary: str
    title: str


class ProgressResponse(BaseModel):
    """Current pipeline progress, 0-100."""

    progress: int


class ChatRequest(BaseModel):
    """A follow-up question about a previously returned summary."""

    message: str
    summary: str


class TranslateRequest(BaseModel):
    """Text to translate and the language to translate it into."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    target_language: str = Field(..., alias="targetLanguage", min_length=1)


class TranslateResponse(BaseModel):
    """Translated text."""

    translation: str


class ErrorResponse(BaseModel):
    """Generic failure body."""

    error: str
