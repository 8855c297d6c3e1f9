"""Core business logic for submitting and tracking a transcription job."""

import threading
import time
import uuid
from collections.abc import Callable

from distill_transcribe.config import PollingConfig
from distill_transcribe.domain.languages import LanguageCode
from distill_transcribe.domain.models import (
    DiarizationSettings,
    IndeterminateOutcome,
    JobCompleted,
    JobFailedOutcome,
    JobOutcome,
    JobRecord,
    JobStatus,
    MediaFormat,
    TranscriptionJob,
    TranscriptionRequest,
)
from distill_transcribe.exceptions import (
    PollingAbandonedError,
    PollingTransportError,
    SubmissionError,
)
from distill_transcribe.infrastructure.interfaces import JobService
from distill_transcribe.logging import setup_logging

logger = setup_logging()

MISSING_RESULT_MESSAGE = "Transcript file URI is missing."
UNEXPECTED_STATUS_MESSAGE = (
    "Job ended with an unexpected status or status could not be determined."
)


def new_job_id() -> str:
    return f"transcription-{uuid.uuid4()}"


class JobOrchestrator:
    """Submits one transcription job and polls it with backoff until terminal."""

    def __init__(
        self,
        job_service: JobService,
        polling: PollingConfig,
        settings: DiarizationSettings = DiarizationSettings(),
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._job_service = job_service
        self._polling = polling
        self._settings = settings
        self._sleep = sleep
        self._clock = clock

    def submit_and_await(
        self,
        media_reference: str,
        language_code: LanguageCode,
        media_format: MediaFormat,
        cancel_event: threading.Event | None = None,
    ) -> JobOutcome:
        """
        Submits a job and waits for it to reach a terminal state.

        Args:
            media_reference: URI of the already-uploaded media object.
            language_code: Validated language of the audio.
            media_format: Resolved container/codec type of the media.
            cancel_event: Optional event; when set, polling stops at the next
                sleep boundary.

        Returns:
            JobCompleted, JobFailedOutcome or IndeterminateOutcome.

        Raises:
            SubmissionError: If the job service rejects the request.
            PollingTransportError: If a status read fails.
            PollingAbandonedError: If the deadline passes or cancellation is
                requested. The job keeps running on the external side.
        """
        job = self._submit(media_reference, language_code, media_format)
        job = self._poll(job, cancel_event)
        return self._classify(job)

    def _submit(
        self,
        media_reference: str,
        language_code: LanguageCode,
        media_format: MediaFormat,
    ) -> TranscriptionJob:
        request = TranscriptionRequest(
            job_id=new_job_id(),
            media_reference=media_reference,
            language_code=language_code,
            media_format=media_format,
            settings=self._settings,
        )

        try:
            job_id = self._job_service.submit(request)
        except Exception as e:
            logger.exception(
                "Transcription job submission failed",
                extra={"job_id": request.job_id},
            )
            raise SubmissionError(request.job_id, e) from e

        logger.info(
            "Transcription job submitted",
            extra={
                "job_id": job_id,
                "language_code": language_code.value,
                "media_format": media_format.value,
            },
        )

        return TranscriptionJob(
            job_id=job_id,
            media_reference=media_reference,
            language_code=language_code,
            media_format=media_format,
        )

    def _poll(
        self, job: TranscriptionJob, cancel_event: threading.Event | None
    ) -> TranscriptionJob:
        """Reads the job status until it leaves SUBMITTED/IN_PROGRESS."""
        started = self._clock()
        interval = self._polling.initial_interval_seconds

        job = job.with_record(self._read_status(job.job_id))

        while not job.status.is_terminal:
            self._check_abandoned(job.job_id, started, interval, cancel_event)

            logger.info(
                "Waiting for transcription job",
                extra={
                    "job_id": job.job_id,
                    "status": job.status.value,
                    "interval_seconds": interval,
                },
            )
            self._sleep(interval)

            job = job.with_record(self._read_status(job.job_id))
            interval = self._next_interval(interval)

        logger.info(
            "Transcription job finished",
            extra={"job_id": job.job_id, "status": job.status.value},
        )
        return job

    def _read_status(self, job_id: str) -> JobRecord:
        try:
            return self._job_service.get_status(job_id)
        except Exception as e:
            logger.exception(
                "Transcription job status check failed", extra={"job_id": job_id}
            )
            raise PollingTransportError(job_id, e) from e

    def _next_interval(self, interval: float) -> float:
        interval *= 2
        cap = self._polling.max_interval_seconds
        if cap is not None:
            interval = min(interval, cap)
        return interval

    def _check_abandoned(
        self,
        job_id: str,
        started: float,
        interval: float,
        cancel_event: threading.Event | None,
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.warning("Polling cancelled by caller", extra={"job_id": job_id})
            raise PollingAbandonedError(job_id, "cancelled by caller")

        max_wait = self._polling.max_wait_seconds
        if max_wait is not None and self._clock() - started + interval > max_wait:
            logger.warning(
                "Polling deadline reached",
                extra={"job_id": job_id, "max_wait_seconds": max_wait},
            )
            raise PollingAbandonedError(
                job_id, f"no terminal status within {max_wait:g} seconds"
            )

    def _classify(self, job: TranscriptionJob) -> JobOutcome:
        if job.status is JobStatus.COMPLETED:
            if job.result_location:
                return JobCompleted(
                    job_id=job.job_id, result_location=job.result_location
                )
            logger.warning(
                "Completed job has no result location", extra={"job_id": job.job_id}
            )
            return IndeterminateOutcome(
                job_id=job.job_id, status=job.status, message=MISSING_RESULT_MESSAGE
            )

        if job.status is JobStatus.FAILED:
            logger.warning(
                "Transcription job failed",
                extra={"job_id": job.job_id, "failure_reason": job.failure_reason},
            )
            return JobFailedOutcome(
                job_id=job.job_id, failure_reason=job.failure_reason
            )

        return IndeterminateOutcome(
            job_id=job.job_id, status=job.status, message=UNEXPECTED_STATUS_MESSAGE
        )
