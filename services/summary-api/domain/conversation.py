"""Follow-up chat and translation over a previously produced summary."""

import json
from collections.abc import Iterator

from media_summary_common.logging import setup_logging

from exceptions import LLMServiceError, TranslationError
from infrastructure.interfaces.llm_service import LLMService

logger = setup_logging()


def sse_frame(payload: dict) -> str:
    """Formats a payload as a server-sent event frame with compact JSON."""
    return f"data: {json.dumps(payload, separators=(',', ':'))}\n\n"


class ChatRelay:
    """Relays an incremental LLM reply about a summary as server-sent event frames."""

    def __init__(self, llm_service: LLMService, prompt: str, temperature: float):
        self._llm = llm_service
        self._prompt = prompt
        self._temperature = temperature

    def stream(self, message: str, summary: str) -> Iterator[str]:
        """
        Yields a ``start`` frame, one ``content`` frame per fragment, then ``done``.

        An upstream failure after the stream has begun yields a single
        ``error`` frame and ends the stream without ``done``.
        """
        yield sse_frame({"start": True})

        system_instruction = self._prompt + summary
        fragments = 0
        try:
            for fragment in self._llm.generate_stream(
                system_instruction, message, self._temperature
            ):
                fragments += 1
                yield sse_frame({"content": fragment})
        except LLMServiceError as e:
            logger.error(
                "Chat relay failed mid-stream",
                extra={"fragments_sent": fragments, "error": str(e)},
            )
            yield sse_frame({"error": "An error occurred during the chat process."})
            return

        logger.info("Chat relay completed", extra={"fragments_sent": fragments})
        yield sse_frame({"done": True})


class Translator:
    """Translates text into a target language in a single call."""

    def __init__(self, llm_service: LLMService, prompt: str, temperature: float):
        self._llm = llm_service
        self._prompt = prompt
        self._temperature = temperature

    def translate(self, text: str, target_language: str) -> str:
        """
        Returns the service's translation of ``text`` verbatim.

        Raises:
            TranslationError: If the text-generation call fails.
        """
        system_instruction = self._prompt.format(target_language=target_language)
        try:
            translation = self._llm.generate(system_instruction, text, self._temperature)
        except LLMServiceError as e:
            raise TranslationError(target_language, e) from e

        logger.info("Text translated", extra={"target_language": target_language})
        return translation
