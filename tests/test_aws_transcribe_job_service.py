from unittest.mock import Mock

import pytest

from distill_transcribe.domain import (
    DiarizationSettings,
    JobStatus,
    LanguageCode,
    MediaFormat,
    TranscriptionRequest,
)
from distill_transcribe.infrastructure import AWSTranscribeJobService


@pytest.fixture
def client():
    return Mock()


def test_submit_sends_diarization_settings(client):
    service = AWSTranscribeJobService(client)
    request = TranscriptionRequest(
        job_id="transcription-123",
        media_reference="s3://meetings/standup.wav",
        language_code=LanguageCode.DE_DE,
        media_format=MediaFormat.WAV,
        settings=DiarizationSettings(max_speaker_labels=4),
    )

    job_id = service.submit(request)

    assert job_id == "transcription-123"
    client.start_transcription_job.assert_called_once_with(
        TranscriptionJobName="transcription-123",
        LanguageCode="de-DE",
        MediaFormat="wav",
        Media={"MediaFileUri": "s3://meetings/standup.wav"},
        Settings={
            "ShowSpeakerLabels": True,
            "MaxSpeakerLabels": 4,
            "ChannelIdentification": False,
        },
    )


def test_submit_propagates_client_errors(client):
    client.start_transcription_job.side_effect = RuntimeError("LimitExceeded")
    request = TranscriptionRequest(
        job_id="transcription-123",
        media_reference="s3://m/a.mp3",
        language_code=LanguageCode.EN_US,
        media_format=MediaFormat.MP3,
    )

    with pytest.raises(RuntimeError):
        AWSTranscribeJobService(client).submit(request)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("QUEUED", JobStatus.SUBMITTED),
        ("IN_PROGRESS", JobStatus.IN_PROGRESS),
        ("COMPLETED", JobStatus.COMPLETED),
        ("FAILED", JobStatus.FAILED),
        ("PAUSED", JobStatus.UNKNOWN),
        (None, JobStatus.UNKNOWN),
    ],
)
def test_get_status_maps_statuses(client, raw, expected):
    client.get_transcription_job.return_value = {
        "TranscriptionJob": {"TranscriptionJobName": "j", "TranscriptionJobStatus": raw}
    }

    record = AWSTranscribeJobService(client).get_status("j")

    assert record.status is expected
    client.get_transcription_job.assert_called_once_with(TranscriptionJobName="j")


def test_get_status_completed_exposes_result_location(client):
    client.get_transcription_job.return_value = {
        "TranscriptionJob": {
            "TranscriptionJobStatus": "COMPLETED",
            "Transcript": {"TranscriptFileUri": "https://s3/transcript.json"},
        }
    }

    record = AWSTranscribeJobService(client).get_status("j")

    assert record.result_location == "https://s3/transcript.json"
    assert record.failure_reason is None


def test_get_status_failed_exposes_reason(client):
    client.get_transcription_job.return_value = {
        "TranscriptionJob": {
            "TranscriptionJobStatus": "FAILED",
            "FailureReason": "insufficient audio quality",
        }
    }

    record = AWSTranscribeJobService(client).get_status("j")

    assert record.failure_reason == "insufficient audio quality"
    assert record.result_location is None


def test_get_status_missing_job_is_unknown(client):
    client.get_transcription_job.return_value = {}

    assert AWSTranscribeJobService(client).get_status("j").status is JobStatus.UNKNOWN
