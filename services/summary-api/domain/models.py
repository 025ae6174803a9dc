"""Domain models for the summary pipeline."""

from enum import Enum

from pydantic import BaseModel


class PipelineStage(str, Enum):
    """Stages a summary pipeline invocation passes through."""

    IDLE = "idle"
    RESOLVING = "resolving"
    DOWNLOADING = "downloading"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    DONE = "done"


# Progress reported on entering each stage. Summarizing has no checkpoint of
# its own, so the gauge stays at the transcribing value until completion.
STAGE_PROGRESS: dict[PipelineStage, int] = {
    PipelineStage.IDLE: 0,
    PipelineStage.RESOLVING: 20,
    PipelineStage.DOWNLOADING: 60,
    PipelineStage.TRANSCRIBING: 80,
    PipelineStage.DONE: 100,
}


class ResolvedAudio(BaseModel, frozen=True):
    """Direct audio URL and display title returned by the conversion service."""

    direct_url: str
    title: str = ""


class Summary(BaseModel, frozen=True):
    """Result of a completed pipeline invocation."""

    text: str
    title: str
