"""Handler orchestrating the URL-to-summary pipeline."""

from media_summary_common.logging import setup_logging

from domain import (
    STAGE_PROGRESS,
    PipelineStage,
    ProgressBoard,
    ProgressTracker,
    Summarizer,
    Summary,
)
from exceptions import SummaryPipelineError
from infrastructure.interfaces import AudioDownloader, AudioResolver, TranscriptionService
from infrastructure.scratch_storage import ScratchSpace

logger = setup_logging()


class SummaryPipeline:
    """Orchestrates resolve, download, transcribe and summarize for one source URL."""

    def __init__(
        self,
        resolver: AudioResolver,
        downloader: AudioDownloader,
        transcription_service: TranscriptionService,
        summarizer: Summarizer,
        progress_board: ProgressBoard,
        scratch: ScratchSpace,
    ):
        self._resolver = resolver
        self._downloader = downloader
        self._transcription_service = transcription_service
        self._summarizer = summarizer
        self._progress_board = progress_board
        self._scratch = scratch

    def run(self, source_url: str, invocation_id: str) -> Summary:
        """
        Turns a media source URL into a titled summary.

        Progress reads 20, 60, 80 and 100 on entering resolving, downloading,
        transcribing and done. It is reset to 0 on every exit path, and the
        scratch audio file never outlives the call.

        Args:
            source_url: Media page URL to summarize.
            invocation_id: Key for this invocation's progress and scratch file.

        Returns:
            Summary with the generated text and the converter's title.

        Raises:
            SummaryPipelineError: If any stage fails; no partial result is returned.
        """
        progress = self._progress_board.open(invocation_id)
        stage = PipelineStage.IDLE
        log_extra = {"invocation_id": invocation_id, "source_url": source_url}

        try:
            progress.reset()
            logger.info("Summary pipeline started", extra=log_extra)

            stage = self._enter(PipelineStage.RESOLVING, progress)
            audio = self._resolver.resolve(source_url)

            stage = self._enter(PipelineStage.DOWNLOADING, progress)
            with self._scratch.allocate(invocation_id) as audio_path:
                self._downloader.download(audio.direct_url, audio_path)

                stage = self._enter(PipelineStage.TRANSCRIBING, progress)
                transcript = self._transcription_service.transcribe(audio_path)

            stage = PipelineStage.SUMMARIZING
            summary_text = self._summarizer.summarize(transcript)

            stage = self._enter(PipelineStage.DONE, progress)
            logger.info("Summary pipeline completed", extra={**log_extra, "title": audio.title})
            return Summary(text=summary_text, title=audio.title)

        except Exception as e:
            logger.exception(
                "Summary pipeline failed", extra={**log_extra, "stage": stage.value}
            )
            raise SummaryPipelineError(stage.value, e) from e

        finally:
            self._progress_board.close(invocation_id, progress)

    def _enter(self, stage: PipelineStage, progress: ProgressTracker) -> PipelineStage:
        progress.set(STAGE_PROGRESS[stage])
        return stage
