"""Amazon S3 implementation of the StorageClient interface."""

from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from distill_transcribe.exceptions import (
    BucketNotFoundError,
    StorageAccessError,
    StorageUploadError,
)
from distill_transcribe.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class S3StorageClient(StorageClient):
    """Handles media uploads using Amazon S3."""

    def __init__(self, client: Any):
        self._client = client

    def upload_file(self, bucket_name: str, object_name: str, file_path: Path) -> str:
        if not self.bucket_exists(bucket_name):
            raise BucketNotFoundError(bucket_name)

        try:
            self._client.upload_file(str(file_path), bucket_name, object_name)
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "S3 upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

        logger.info(
            "File uploaded to S3",
            extra={"bucket_name": bucket_name, "object_name": object_name},
        )
        return f"s3://{bucket_name}/{object_name}"

    def bucket_exists(self, bucket_name: str) -> bool:
        try:
            self._client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in ("404", "NoSuchBucket", "NotFound"):
                return False
            logger.exception(
                "S3 bucket check failed", extra={"bucket_name": bucket_name}
            )
            raise StorageAccessError(bucket_name, e) from e
        except BotoCoreError as e:
            logger.exception(
                "S3 bucket check failed", extra={"bucket_name": bucket_name}
            )
            raise StorageAccessError(bucket_name, e) from e

    def bucket_region(self, bucket_name: str) -> str:
        if not self.bucket_exists(bucket_name):
            raise BucketNotFoundError(bucket_name)

        try:
            response = self._client.get_bucket_location(Bucket=bucket_name)
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "S3 bucket location lookup failed",
                extra={"bucket_name": bucket_name},
            )
            raise StorageAccessError(bucket_name, e) from e

        # buckets in us-east-1 report no location constraint
        return response.get("LocationConstraint") or "us-east-1"
