"""Abstract interface for media format detection."""

from abc import ABC, abstractmethod
from pathlib import Path

from distill_transcribe.domain.models import MediaFormat


class MediaFormatResolver(ABC):
    """Abstract base class for determining the media format of a local file."""

    @abstractmethod
    def resolve(self, file_path: Path) -> MediaFormat:
        """
        Determines the media format of an audio or video file.

        Args:
            file_path: Path to the local media file.

        Returns:
            The detected MediaFormat.

        Raises:
            UnsupportedMediaFormatError: If the format cannot be determined.
        """
