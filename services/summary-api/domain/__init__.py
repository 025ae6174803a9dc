"""Domain layer exports."""

from domain.conversation import ChatRelay, Translator, sse_frame
from domain.models import STAGE_PROGRESS, PipelineStage, ResolvedAudio, Summary
from domain.progress import ProgressBoard, ProgressTracker
from domain.summarizer import Summarizer

__all__ = [
    "ChatRelay",
    "Translator",
    "sse_frame",
    "STAGE_PROGRESS",
    "PipelineStage",
    "ResolvedAudio",
    "Summary",
    "ProgressBoard",
    "ProgressTracker",
    "Summarizer",
]
