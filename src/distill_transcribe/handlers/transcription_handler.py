"""Handler for turning an uploaded media object into a transcript."""

import threading

from distill_transcribe.domain import (
    IndeterminateOutcome,
    JobCompleted,
    JobFailedOutcome,
    JobOrchestrator,
    TranscriptBuilder,
    TranscriptionInput,
    parse_language_code,
)
from distill_transcribe.infrastructure.interfaces import ResultFetcher
from distill_transcribe.logging import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates media-to-transcript operations."""

    def __init__(
        self,
        orchestrator: JobOrchestrator,
        result_fetcher: ResultFetcher,
        transcript_builder: TranscriptBuilder,
    ):
        self._orchestrator = orchestrator
        self._result_fetcher = result_fetcher
        self._transcript_builder = transcript_builder

    def process(
        self,
        request: TranscriptionInput,
        cancel_event: threading.Event | None = None,
    ) -> str:
        """
        Transcribes an already-uploaded media object.

        Args:
            request: Media reference, language code and media format.
            cancel_event: Optional event that abandons polling when set.

        Returns:
            The reconstructed transcript, or a descriptive message when the
            job failed or ended without a usable result.

        Raises:
            UnsupportedLanguageError: If the language code is not supported.
            SubmissionError: If the job could not be submitted.
            PollingTransportError: If a status check failed.
            PollingAbandonedError: If polling was abandoned.
            ResultFetchError: If the result payload could not be downloaded.
            TranscriptParseError: If the result payload is malformed.
        """
        language_code = parse_language_code(request.language_code)

        logger.info(
            "Processing transcription",
            extra={
                "media_reference": request.media_reference,
                "language_code": language_code.value,
            },
        )

        outcome = self._orchestrator.submit_and_await(
            request.media_reference,
            language_code,
            request.media_format,
            cancel_event=cancel_event,
        )

        if not isinstance(outcome, JobCompleted):
            return self.describe(outcome)

        payload = self._result_fetcher.fetch(outcome.result_location)
        transcript = self._transcript_builder.build(payload)

        logger.info(
            "Transcription processed",
            extra={"job_id": outcome.job_id, "transcript_length": len(transcript)},
        )
        return transcript

    @staticmethod
    def describe(outcome: JobFailedOutcome | IndeterminateOutcome) -> str:
        """Converts an unsuccessful job outcome into a user-facing message."""
        if isinstance(outcome, JobFailedOutcome):
            if outcome.failure_reason:
                return f"Transcription job failed: {outcome.failure_reason}"
            return "Transcription job failed for an unknown reason."
        return outcome.message
