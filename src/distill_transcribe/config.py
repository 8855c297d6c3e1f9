"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field


class AWSConfig(BaseModel, frozen=True):
    """AWS connection configuration."""

    region: str = "us-east-1"
    s3_bucket_name: str = ""


class PollingConfig(BaseModel, frozen=True):
    """
    Job status polling configuration.

    The interval doubles after every non-terminal status read. Growth is
    unbounded unless ``max_interval_seconds`` is set. ``max_wait_seconds``
    bounds the total client-side wait; reaching it abandons the poll loop
    while the job keeps running on the external side.
    """

    initial_interval_seconds: float = Field(default=5.0, gt=0)
    max_interval_seconds: float | None = Field(default=None, gt=0)
    max_wait_seconds: float | None = Field(default=None, gt=0)


class TranscribeConfig(BaseModel, frozen=True):
    """Amazon Transcribe job configuration."""

    max_speaker_labels: int = Field(default=10, ge=2, le=30)
    default_language_code: str = "en-US"
    result_fetch_timeout_seconds: float = 60.0


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AWSConfig
    polling: PollingConfig
    transcribe: TranscribeConfig


def _optional_float(name: str) -> float | None:
    value = os.getenv(name, "")
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        aws=AWSConfig(
            region=os.getenv("AWS_REGION", "us-east-1"),
            s3_bucket_name=os.getenv("DISTILL_S3_BUCKET", ""),
        ),
        polling=PollingConfig(
            initial_interval_seconds=float(
                os.getenv("DISTILL_POLL_INITIAL_SECONDS", "5")
            ),
            max_interval_seconds=_optional_float("DISTILL_POLL_MAX_SECONDS"),
            max_wait_seconds=_optional_float("DISTILL_POLL_MAX_WAIT_SECONDS"),
        ),
        transcribe=TranscribeConfig(
            max_speaker_labels=int(os.getenv("DISTILL_MAX_SPEAKER_LABELS", "10")),
            default_language_code=os.getenv("DISTILL_LANGUAGE_CODE", "en-US"),
            result_fetch_timeout_seconds=float(
                os.getenv("DISTILL_RESULT_FETCH_TIMEOUT_SECONDS", "60")
            ),
        ),
    )
