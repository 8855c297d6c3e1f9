"""Domain models for the transcription job and transcript reconstruction."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel

from distill_transcribe.domain.languages import LanguageCode


class MediaFormat(str, Enum):
    """Container/codec types accepted by the transcription job service."""

    AMR = "amr"
    FLAC = "flac"
    M4A = "m4a"
    MP3 = "mp3"
    MP4 = "mp4"
    OGG = "ogg"
    WAV = "wav"
    WEBM = "webm"


class JobStatus(str, Enum):
    """Lifecycle states of a transcription job."""

    SUBMITTED = "submitted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        return self not in (JobStatus.SUBMITTED, JobStatus.IN_PROGRESS)


class DiarizationSettings(BaseModel, frozen=True):
    """Speaker attribution settings requested for every job."""

    show_speaker_labels: bool = True
    max_speaker_labels: int = 10
    channel_identification: bool = False


class TranscriptionRequest(BaseModel, frozen=True):
    """A job submission as sent to the job service."""

    job_id: str
    media_reference: str
    language_code: LanguageCode
    media_format: MediaFormat
    settings: DiarizationSettings = DiarizationSettings()


class JobRecord(BaseModel, frozen=True):
    """A single status read of a job from the job service."""

    job_id: str
    status: JobStatus
    result_location: str | None = None
    failure_reason: str | None = None


class TranscriptionJob(BaseModel, frozen=True):
    """
    Client-side view of a submitted job.

    Created with status SUBMITTED; every later state comes from a JobRecord
    read from the job service via ``with_record``.
    """

    job_id: str
    media_reference: str
    language_code: LanguageCode
    media_format: MediaFormat
    status: JobStatus = JobStatus.SUBMITTED
    result_location: str | None = None
    failure_reason: str | None = None

    def with_record(self, record: JobRecord) -> "TranscriptionJob":
        return self.model_copy(
            update={
                "status": record.status,
                "result_location": record.result_location,
                "failure_reason": record.failure_reason,
            }
        )


class JobCompleted(BaseModel, frozen=True):
    """The job completed and its result payload can be fetched."""

    kind: Literal["completed"] = "completed"
    job_id: str
    result_location: str


class JobFailedOutcome(BaseModel, frozen=True):
    """The job ran to a FAILED terminal state."""

    kind: Literal["failed"] = "failed"
    job_id: str
    failure_reason: str | None = None


class IndeterminateOutcome(BaseModel, frozen=True):
    """The job stopped in a state that yields no usable transcript."""

    kind: Literal["indeterminate"] = "indeterminate"
    job_id: str
    status: JobStatus
    message: str


JobOutcome = JobCompleted | JobFailedOutcome | IndeterminateOutcome


class EventKind(str, Enum):
    """Token event types present in a transcription result payload."""

    WORD = "pronunciation"
    PUNCTUATION = "punctuation"


class TranscriptEvent(BaseModel, frozen=True):
    """One word or punctuation token from the result payload."""

    kind: EventKind
    text: str
    speaker_label: str | None = None


class TranscriptLine(BaseModel, frozen=True):
    """A contiguous run of text spoken by one speaker."""

    speaker_label: str
    text: str

    def render(self) -> str:
        return f"{self.speaker_label}: {self.text}\n"


class TranscriptionInput(BaseModel, frozen=True):
    """What a caller provides to obtain a transcript."""

    media_reference: str
    language_code: str
    media_format: MediaFormat
