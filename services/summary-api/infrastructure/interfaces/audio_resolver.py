"""Abstract interface for source-to-audio resolution."""

from abc import ABC, abstractmethod

from domain.models import ResolvedAudio


class AudioResolver(ABC):
    """Abstract base class for services that convert a media URL to audio."""

    @abstractmethod
    def resolve(self, source_url: str) -> ResolvedAudio:
        """
        Resolves a media source URL to a directly downloadable audio file.

        Args:
            source_url: The media page URL supplied by the caller.

        Returns:
            ResolvedAudio with the direct audio URL and a display title.

        Raises:
            ResolutionError: If the service errors, returns malformed data,
                or returns no usable download URL.
        """
