"""Transcript summarization."""

from media_summary_common.logging import setup_logging

from exceptions import LLMServiceError, SummarizationError
from infrastructure.interfaces.llm_service import LLMService

logger = setup_logging()


class Summarizer:
    """Produces a natural-language summary of a transcript."""

    def __init__(self, llm_service: LLMService, prompt: str, temperature: float):
        self._llm = llm_service
        self._prompt = prompt
        self._temperature = temperature

    def summarize(self, transcript: str) -> str:
        """
        Summarizes a transcript with the fixed summary instruction.

        The service's text is returned verbatim, without trimming or capping.

        Raises:
            SummarizationError: If the text-generation call fails.
        """
        try:
            summary = self._llm.generate(self._prompt, transcript, self._temperature)
        except LLMServiceError as e:
            raise SummarizationError(e) from e

        logger.info(
            "Transcript summarized",
            extra={"transcript_chars": len(transcript), "summary_chars": len(summary)},
        )
        return summary
