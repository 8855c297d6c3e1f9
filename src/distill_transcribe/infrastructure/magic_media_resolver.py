"""libmagic implementation of the MediaFormatResolver interface."""

from pathlib import Path

import magic

from distill_transcribe.domain.models import MediaFormat
from distill_transcribe.exceptions import UnsupportedMediaFormatError
from distill_transcribe.logging import setup_logging

from .interfaces import MediaFormatResolver

logger = setup_logging()

MIME_FORMATS = {
    "audio/amr": MediaFormat.AMR,
    "audio/flac": MediaFormat.FLAC,
    "audio/x-flac": MediaFormat.FLAC,
    "audio/m4a": MediaFormat.M4A,
    "audio/x-m4a": MediaFormat.M4A,
    "audio/mpeg": MediaFormat.MP3,
    "audio/mp4": MediaFormat.MP4,
    "video/mp4": MediaFormat.MP4,
    "audio/ogg": MediaFormat.OGG,
    "audio/opus": MediaFormat.OGG,
    "audio/wav": MediaFormat.WAV,
    "audio/x-wav": MediaFormat.WAV,
    "audio/webm": MediaFormat.WEBM,
    "video/webm": MediaFormat.WEBM,
}

EXTENSION_FORMATS = {f".{fmt.value}": fmt for fmt in MediaFormat}


class MagicMediaFormatResolver(MediaFormatResolver):
    """Detects media formats by content sniffing, falling back to the extension."""

    def resolve(self, file_path: Path) -> MediaFormat:
        try:
            mime_type = magic.from_file(str(file_path), mime=True)
        except (OSError, magic.MagicException) as e:
            raise UnsupportedMediaFormatError(
                str(file_path), f"error determining media format: {e}"
            ) from e

        media_format = MIME_FORMATS.get(mime_type)
        if media_format is None:
            # libmagic reports some MP3s without ID3 tags as octet-stream
            media_format = EXTENSION_FORMATS.get(file_path.suffix.lower())

        if media_format is None:
            raise UnsupportedMediaFormatError(str(file_path), f"MIME type {mime_type}")

        logger.info(
            "Media format resolved",
            extra={"file_path": str(file_path), "mime_type": mime_type},
        )
        return media_format
