"""Abstract interface for retrieving transcription result payloads."""

from abc import ABC, abstractmethod


class ResultFetcher(ABC):
    """Abstract base class for result payload retrieval."""

    @abstractmethod
    def fetch(self, uri: str) -> bytes:
        """
        Downloads the raw result payload of a completed job.

        Args:
            uri: The result location reported by the job service.

        Returns:
            The payload bytes.

        Raises:
            ResultFetchError: If the download fails.
        """
