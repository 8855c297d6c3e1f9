import json
from pathlib import Path

import pytest

from distill_transcribe.config import PollingConfig
from distill_transcribe.domain import (
    JobOrchestrator,
    JobRecord,
    JobStatus,
    MediaFormat,
    TranscriptBuilder,
    TranscriptionRequest,
)
from distill_transcribe.exceptions import BucketNotFoundError
from distill_transcribe.handlers import TranscriptionHandler
from distill_transcribe.infrastructure.interfaces import (
    JobService,
    MediaFormatResolver,
    ResultFetcher,
    StorageClient,
)


class FakeJobService(JobService):
    """Replays a scripted sequence of status reads."""

    def __init__(self, records=(), submit_error=None, status_error=None):
        self.records = list(records)
        self.submit_error = submit_error
        self.status_error = status_error
        self.submitted: list[TranscriptionRequest] = []
        self.status_calls: list[str] = []

    def submit(self, request):
        if self.submit_error is not None:
            raise self.submit_error
        self.submitted.append(request)
        return request.job_id

    def get_status(self, job_id):
        self.status_calls.append(job_id)
        if self.status_error is not None:
            raise self.status_error
        record = self.records.pop(0)
        return record.model_copy(update={"job_id": job_id})

    @property
    def call_count(self):
        return len(self.submitted) + len(self.status_calls)


class FakeResultFetcher(ResultFetcher):
    def __init__(self, payload=b""):
        self.payload = payload
        self.fetched: list[str] = []

    def fetch(self, uri):
        self.fetched.append(uri)
        return self.payload


class FakeStorage(StorageClient):
    def __init__(self, region="eu-west-1", existing=("meetings",)):
        self.region = region
        self.existing = set(existing)
        self.uploads: list[tuple[str, str, Path]] = []

    def upload_file(self, bucket_name, object_name, file_path):
        self.uploads.append((bucket_name, object_name, file_path))
        return f"s3://{bucket_name}/{object_name}"

    def bucket_exists(self, bucket_name):
        return bucket_name in self.existing

    def bucket_region(self, bucket_name):
        if bucket_name not in self.existing:
            raise BucketNotFoundError(bucket_name)
        return self.region


class FakeMediaResolver(MediaFormatResolver):
    def __init__(self, media_format=MediaFormat.MP3):
        self.media_format = media_format

    def resolve(self, file_path):
        return self.media_format


class SleepRecorder:
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def record(status, result_location=None, failure_reason=None):
    return JobRecord(
        job_id="pending",
        status=status,
        result_location=result_location,
        failure_reason=failure_reason,
    )


def word(content, speaker):
    return {
        "type": "pronunciation",
        "speaker_label": speaker,
        "alternatives": [{"confidence": "0.99", "content": content}],
    }


def punctuation(content):
    return {
        "type": "punctuation",
        "alternatives": [{"confidence": "0.0", "content": content}],
    }


def payload(*items):
    return json.dumps(
        {"jobName": "transcription-test", "results": {"items": list(items)}}
    ).encode("utf-8")


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def polling_config():
    return PollingConfig(initial_interval_seconds=5)


@pytest.fixture
def make_orchestrator(sleep_recorder, polling_config):
    def _make(job_service, polling=None, clock=None):
        kwargs = {"sleep": sleep_recorder}
        if clock is not None:
            kwargs["clock"] = clock
        return JobOrchestrator(job_service, polling or polling_config, **kwargs)

    return _make


@pytest.fixture
def make_handler(make_orchestrator):
    def _make(job_service, fetcher):
        return TranscriptionHandler(
            make_orchestrator(job_service), fetcher, TranscriptBuilder()
        )

    return _make


@pytest.fixture
def completed_records():
    return [
        record(JobStatus.IN_PROGRESS),
        record(JobStatus.COMPLETED, result_location="https://results/transcript.json"),
    ]
