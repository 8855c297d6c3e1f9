"""Amazon Transcribe implementation of the JobService interface."""

from typing import Any

from distill_transcribe.domain.models import JobRecord, JobStatus, TranscriptionRequest
from distill_transcribe.logging import setup_logging

from .interfaces import JobService

logger = setup_logging()

_STATUS_MAP = {
    "QUEUED": JobStatus.SUBMITTED,
    "IN_PROGRESS": JobStatus.IN_PROGRESS,
    "COMPLETED": JobStatus.COMPLETED,
    "FAILED": JobStatus.FAILED,
}


class AWSTranscribeJobService(JobService):
    """Runs batch transcription jobs on Amazon Transcribe."""

    def __init__(self, client: Any):
        """
        Args:
            client: A boto3 ``transcribe`` client.
        """
        self._client = client

    def submit(self, request: TranscriptionRequest) -> str:
        self._client.start_transcription_job(
            TranscriptionJobName=request.job_id,
            LanguageCode=request.language_code.value,
            MediaFormat=request.media_format.value,
            Media={"MediaFileUri": request.media_reference},
            Settings={
                "ShowSpeakerLabels": request.settings.show_speaker_labels,
                "MaxSpeakerLabels": request.settings.max_speaker_labels,
                "ChannelIdentification": request.settings.channel_identification,
            },
        )
        logger.info(
            "Transcribe job started",
            extra={
                "job_id": request.job_id,
                "media_reference": request.media_reference,
            },
        )
        return request.job_id

    def get_status(self, job_id: str) -> JobRecord:
        response = self._client.get_transcription_job(TranscriptionJobName=job_id)
        job = response.get("TranscriptionJob") or {}

        raw_status = job.get("TranscriptionJobStatus")
        status = _STATUS_MAP.get(raw_status, JobStatus.UNKNOWN)
        if status is JobStatus.UNKNOWN:
            logger.warning(
                "Unrecognized Transcribe job status",
                extra={"job_id": job_id, "raw_status": raw_status},
            )

        transcript = job.get("Transcript") or {}
        return JobRecord(
            job_id=job_id,
            status=status,
            result_location=transcript.get("TranscriptFileUri") or None,
            failure_reason=job.get("FailureReason") or None,
        )
