"""Infrastructure layer exports."""

from .aws_transcribe_job_service import AWSTranscribeJobService
from .http_result_fetcher import HTTPResultFetcher
from .magic_media_resolver import MagicMediaFormatResolver
from .s3_storage import S3StorageClient

__all__ = [
    "AWSTranscribeJobService",
    "HTTPResultFetcher",
    "MagicMediaFormatResolver",
    "S3StorageClient",
]
