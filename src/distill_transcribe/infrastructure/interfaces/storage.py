"""Abstract interface for media object storage operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload_file(self, bucket_name: str, object_name: str, file_path: Path) -> str:
        """
        Uploads a local file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            file_path: The local file to upload.

        Returns:
            The media reference URI of the uploaded object.

        Raises:
            BucketNotFoundError: If the bucket does not exist.
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Returns True if the bucket exists and is accessible.

        Raises:
            StorageAccessError: If the bucket cannot be queried.
        """

    @abstractmethod
    def bucket_region(self, bucket_name: str) -> str:
        """
        Returns the region the bucket lives in.

        Raises:
            BucketNotFoundError: If the bucket does not exist.
            StorageAccessError: If the bucket cannot be queried.
        """
