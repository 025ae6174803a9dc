"""Handler layer exports."""

from handlers.summary_pipeline import SummaryPipeline

__all__ = ["SummaryPipeline"]
