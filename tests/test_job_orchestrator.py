import threading

import pytest

from conftest import FakeJobService, record
from distill_transcribe.config import PollingConfig
from distill_transcribe.domain import (
    IndeterminateOutcome,
    JobCompleted,
    JobFailedOutcome,
    JobStatus,
    LanguageCode,
    MediaFormat,
)
from distill_transcribe.domain.job_orchestrator import (
    MISSING_RESULT_MESSAGE,
    UNEXPECTED_STATUS_MESSAGE,
)
from distill_transcribe.exceptions import (
    PollingAbandonedError,
    PollingTransportError,
    SubmissionError,
)

MEDIA = "s3://meetings/standup.mp3"


def run(orchestrator, **kwargs):
    return orchestrator.submit_and_await(
        MEDIA, LanguageCode.EN_US, MediaFormat.MP3, **kwargs
    )


def test_polls_with_doubling_backoff(make_orchestrator, sleep_recorder):
    service = FakeJobService(
        [
            record(JobStatus.IN_PROGRESS),
            record(JobStatus.IN_PROGRESS),
            record(JobStatus.COMPLETED, result_location="https://results/t.json"),
        ]
    )

    outcome = run(make_orchestrator(service))

    assert len(service.status_calls) == 3
    assert sleep_recorder.calls == [5, 10]
    assert isinstance(outcome, JobCompleted)
    assert outcome.result_location == "https://results/t.json"


def test_submitted_status_keeps_polling(make_orchestrator, sleep_recorder):
    service = FakeJobService(
        [
            record(JobStatus.SUBMITTED),
            record(JobStatus.IN_PROGRESS),
            record(JobStatus.IN_PROGRESS),
            record(JobStatus.COMPLETED, result_location="https://results/t.json"),
        ]
    )

    run(make_orchestrator(service))

    assert sleep_recorder.calls == [5, 10, 20]


def test_immediately_completed_job_never_sleeps(make_orchestrator, sleep_recorder):
    service = FakeJobService(
        [record(JobStatus.COMPLETED, result_location="https://results/t.json")]
    )

    run(make_orchestrator(service))

    assert sleep_recorder.calls == []
    assert len(service.status_calls) == 1


def test_submission_request_enables_diarization(make_orchestrator):
    service = FakeJobService(
        [record(JobStatus.COMPLETED, result_location="https://results/t.json")]
    )

    run(make_orchestrator(service))

    (request,) = service.submitted
    assert request.job_id.startswith("transcription-")
    assert request.media_reference == MEDIA
    assert request.language_code is LanguageCode.EN_US
    assert request.media_format is MediaFormat.MP3
    assert request.settings.show_speaker_labels is True
    assert request.settings.max_speaker_labels == 10
    assert request.settings.channel_identification is False
    assert service.status_calls == [request.job_id]


def test_job_ids_are_unique(make_orchestrator):
    service = FakeJobService(
        [record(JobStatus.COMPLETED, result_location="https://r/1")] * 2
    )
    orchestrator = make_orchestrator(service)

    run(orchestrator)
    run(orchestrator)

    first, second = service.submitted
    assert first.job_id != second.job_id


def test_failed_job_returns_failure_reason(make_orchestrator):
    service = FakeJobService(
        [
            record(JobStatus.IN_PROGRESS),
            record(JobStatus.FAILED, failure_reason="insufficient audio quality"),
        ]
    )

    outcome = run(make_orchestrator(service))

    assert isinstance(outcome, JobFailedOutcome)
    assert outcome.failure_reason == "insufficient audio quality"


def test_failed_job_without_reason(make_orchestrator):
    service = FakeJobService([record(JobStatus.FAILED)])

    outcome = run(make_orchestrator(service))

    assert isinstance(outcome, JobFailedOutcome)
    assert outcome.failure_reason is None


def test_completed_without_result_location_is_indeterminate(make_orchestrator):
    service = FakeJobService([record(JobStatus.COMPLETED)])

    outcome = run(make_orchestrator(service))

    assert isinstance(outcome, IndeterminateOutcome)
    assert outcome.message == MISSING_RESULT_MESSAGE
    assert outcome.status is JobStatus.COMPLETED


def test_unknown_status_is_terminal(make_orchestrator, sleep_recorder):
    service = FakeJobService([record(JobStatus.IN_PROGRESS), record(JobStatus.UNKNOWN)])

    outcome = run(make_orchestrator(service))

    assert isinstance(outcome, IndeterminateOutcome)
    assert outcome.message == UNEXPECTED_STATUS_MESSAGE
    assert len(service.status_calls) == 2
    assert sleep_recorder.calls == [5]


def test_submission_failure_raises_without_polling(make_orchestrator):
    service = FakeJobService(submit_error=RuntimeError("AccessDenied"))

    with pytest.raises(SubmissionError) as exc_info:
        run(make_orchestrator(service))

    assert isinstance(exc_info.value.cause, RuntimeError)
    assert service.status_calls == []


def test_status_transport_error_raises(make_orchestrator):
    service = FakeJobService(status_error=ConnectionError("timed out"))

    with pytest.raises(PollingTransportError) as exc_info:
        run(make_orchestrator(service))

    assert exc_info.value.job_id.startswith("transcription-")
    assert len(service.status_calls) == 1


def test_interval_cap(make_orchestrator, sleep_recorder):
    service = FakeJobService(
        [record(JobStatus.IN_PROGRESS)] * 4
        + [record(JobStatus.COMPLETED, result_location="https://r/1")]
    )
    polling = PollingConfig(initial_interval_seconds=5, max_interval_seconds=12)

    run(make_orchestrator(service, polling=polling))

    assert sleep_recorder.calls == [5, 10, 12, 12]


def test_deadline_abandons_polling(make_orchestrator, sleep_recorder):
    service = FakeJobService([record(JobStatus.IN_PROGRESS)] * 10)
    polling = PollingConfig(initial_interval_seconds=5, max_wait_seconds=20)

    def clock():
        return sum(sleep_recorder.calls)

    with pytest.raises(PollingAbandonedError) as exc_info:
        run(make_orchestrator(service, polling=polling, clock=clock))

    # 5 + 10 fits in 20 seconds, a further 20 second sleep does not
    assert sleep_recorder.calls == [5, 10]
    assert "20" in exc_info.value.reason


def test_cancel_event_abandons_polling(make_orchestrator, sleep_recorder):
    service = FakeJobService([record(JobStatus.IN_PROGRESS)] * 3)
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(PollingAbandonedError):
        run(make_orchestrator(service), cancel_event=cancel)

    assert sleep_recorder.calls == []
    assert len(service.status_calls) == 1
