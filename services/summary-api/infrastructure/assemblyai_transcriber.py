"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import assemblyai as aai
from media_summary_common.logging import setup_logging

from exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, file_path: Path) -> str:
        """
        Transcribes a local audio file using AssemblyAI.

        The SDK uploads the file from its path, so the audio is never held
        in memory as a single value. The file is removed after a successful
        transcription.
        """
        try:
            transcription = self._transcriber.transcribe(str(file_path))

            if transcription.status == aai.TranscriptStatus.error:
                raise TranscriptionError(
                    file_path.name,
                    Exception(transcription.error),
                )

            if transcription.text is None:
                raise TranscriptionError(
                    file_path.name,
                    Exception("Transcription returned no text"),
                )

        except TranscriptionError:
            logger.error(
                "AssemblyAI transcription failed", extra={"file_name": file_path.name}
            )
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(file_path.name, e) from e

        file_path.unlink(missing_ok=True)

        logger.info(
            "Audio transcription successful",
            extra={"file_name": file_path.name, "characters": len(transcription.text)},
        )
        return transcription.text
