"""Abstract interface for transcription job service operations."""

from abc import ABC, abstractmethod

from distill_transcribe.domain.models import JobRecord, TranscriptionRequest


class JobService(ABC):
    """Abstract base class for asynchronous transcription job backends."""

    @abstractmethod
    def submit(self, request: TranscriptionRequest) -> str:
        """
        Submits a transcription job.

        Args:
            request: The job request, including diarization settings.

        Returns:
            The identifier of the submitted job.

        Raises:
            Exception: Any failure; the orchestrator wraps it in SubmissionError.
        """

    @abstractmethod
    def get_status(self, job_id: str) -> JobRecord:
        """
        Reads the current state of a job.

        Args:
            job_id: The identifier returned by ``submit``.

        Returns:
            JobRecord with status, and result location or failure reason
            when the job is terminal.

        Raises:
            Exception: Any failure; the orchestrator wraps it in
                PollingTransportError.
        """
