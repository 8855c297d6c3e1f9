"""Dependency injection configuration for the distill-transcribe CLI."""

import boto3
import requests

from distill_transcribe.config import AppConfig, load_config
from distill_transcribe.domain import (
    DiarizationSettings,
    JobOrchestrator,
    TranscriptBuilder,
)
from distill_transcribe.handlers import TranscriptionHandler
from distill_transcribe.infrastructure import (
    AWSTranscribeJobService,
    HTTPResultFetcher,
    MagicMediaFormatResolver,
    S3StorageClient,
)
from distill_transcribe.infrastructure.interfaces import (
    MediaFormatResolver,
    ResultFetcher,
    StorageClient,
)
from distill_transcribe.logging import setup_logging

logger = setup_logging()

_config = load_config()

# S3 setup
_s3_client = boto3.client("s3", region_name=_config.aws.region)
_storage = S3StorageClient(_s3_client)

# Result download setup
_http_session = requests.Session()
_result_fetcher = HTTPResultFetcher(
    _http_session, timeout_seconds=_config.transcribe.result_fetch_timeout_seconds
)

_media_resolver = MagicMediaFormatResolver()

_diarization = DiarizationSettings(
    max_speaker_labels=_config.transcribe.max_speaker_labels
)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    return _storage


def get_result_fetcher() -> ResultFetcher:
    """Returns the configured result fetcher."""
    return _result_fetcher


def get_media_resolver() -> MediaFormatResolver:
    """Returns the configured media format resolver."""
    return _media_resolver


def get_orchestrator(region: str) -> JobOrchestrator:
    """Returns a job orchestrator bound to a Transcribe client in ``region``."""
    transcribe_client = boto3.client("transcribe", region_name=region)
    return JobOrchestrator(
        AWSTranscribeJobService(transcribe_client),
        _config.polling,
        settings=_diarization,
    )


def get_handler(region: str) -> TranscriptionHandler:
    """Returns the transcription handler for media stored in ``region``."""
    logger.info("Using Transcribe region", extra={"region": region})
    return TranscriptionHandler(
        get_orchestrator(region), _result_fetcher, TranscriptBuilder()
    )
