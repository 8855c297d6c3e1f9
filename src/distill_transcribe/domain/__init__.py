"""Domain layer exports."""

from .languages import LanguageCode, parse_language_code
from .models import (
    DiarizationSettings,
    EventKind,
    IndeterminateOutcome,
    JobCompleted,
    JobFailedOutcome,
    JobOutcome,
    JobRecord,
    JobStatus,
    MediaFormat,
    TranscriptEvent,
    TranscriptionInput,
    TranscriptionJob,
    TranscriptionRequest,
    TranscriptLine,
)
from .transcript_builder import TranscriptBuilder
from .job_orchestrator import JobOrchestrator

__all__ = [
    "DiarizationSettings",
    "EventKind",
    "IndeterminateOutcome",
    "JobCompleted",
    "JobFailedOutcome",
    "JobOrchestrator",
    "JobOutcome",
    "JobRecord",
    "JobStatus",
    "LanguageCode",
    "MediaFormat",
    "TranscriptBuilder",
    "TranscriptEvent",
    "TranscriptionInput",
    "TranscriptionJob",
    "TranscriptionRequest",
    "TranscriptLine",
    "parse_language_code",
]
