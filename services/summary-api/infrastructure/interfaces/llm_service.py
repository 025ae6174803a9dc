"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class LLMService(ABC):
    """Abstract base class for text-generation backends."""

    @abstractmethod
    def generate(self, system_instruction: str, content: str, temperature: float) -> str:
        """
        Generates a complete response in a single call.

        Args:
            system_instruction: Instruction steering the model.
            content: The user content to respond to.
            temperature: Sampling temperature.

        Returns:
            The generated text, unmodified.

        Raises:
            LLMServiceError: If the LLM call fails or returns nothing.
        """
        pass

    @abstractmethod
    def generate_stream(
        self, system_instruction: str, content: str, temperature: float
    ) -> Iterator[str]:
        """
        Generates a response incrementally, yielding text fragments as they arrive.

        Raises:
            LLMServiceError: If the LLM call fails, possibly after fragments
                have already been yielded.
        """
        pass
