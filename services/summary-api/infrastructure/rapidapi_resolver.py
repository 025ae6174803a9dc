"""RapidAPI implementation of the AudioResolver interface."""

import httpx
from media_summary_common.logging import setup_logging

from config import ConverterConfig
from domain.models import ResolvedAudio
from exceptions import ResolutionError

from .interfaces import AudioResolver

logger = setup_logging()


class RapidAPIAudioResolver(AudioResolver):
    """Resolves media URLs to MP3 download links via a RapidAPI converter."""

    def __init__(self, client: httpx.Client, config: ConverterConfig):
        self._client = client
        self._config = config

    def resolve(self, source_url: str) -> ResolvedAudio:
        """
        Asks the converter for an MP3 rendition of ``source_url``.

        Format and quality come from configuration, never from the caller.
        """
        try:
            response = self._client.post(
                self._config.endpoint,
                params={
                    "url": source_url,
                    "format": self._config.audio_format,
                    "quality": self._config.quality,
                },
                headers={
                    "x-rapidapi-key": self._config.api_key,
                    "x-rapidapi-host": self._config.host,
                },
                json={},
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("Converter request failed", extra={"source_url": source_url})
            raise ResolutionError(source_url, e) from e

        if not isinstance(payload, dict):
            raise ResolutionError(
                source_url, Exception("Converter returned a non-object payload")
            )

        download_url = payload.get("downloadUrl")
        if not isinstance(download_url, str) or not download_url:
            raise ResolutionError(
                source_url, Exception("Converter returned no download URL")
            )

        title = payload.get("title")
        resolved = ResolvedAudio(
            direct_url=download_url,
            title=title if isinstance(title, str) else "",
        )
        logger.info(
            "Audio resolved",
            extra={"source_url": source_url, "download_url": resolved.direct_url},
        )
        return resolved
