"""Gemini LLM service implementation."""

from collections.abc import Iterator

from google import genai
from media_summary_common.logging import setup_logging

from exceptions import LLMServiceError
from infrastructure.interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def generate(self, system_instruction: str, content: str, temperature: float) -> str:
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=content,
                config={
                    "system_instruction": system_instruction,
                    "temperature": temperature,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e

        if response.text is None:
            raise LLMServiceError("Gemini returned no text")
        logger.info("LLM generation completed", extra={"model": self._model_name})
        return response.text

    def generate_stream(
        self, system_instruction: str, content: str, temperature: float
    ) -> Iterator[str]:
        try:
            stream = self._client.models.generate_content_stream(
                model=self._model_name,
                contents=content,
                config={
                    "system_instruction": system_instruction,
                    "temperature": temperature,
                },
            )
            for chunk in stream:
                if chunk.text:
                    yield chunk.text
        except Exception as e:
            logger.exception("Gemini streaming call failed")
            raise LLMServiceError(f"Gemini streaming failed: {e}", cause=e) from e
        logger.info("LLM stream completed", extra={"model": self._model_name})
