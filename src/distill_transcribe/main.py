"""
Distill Transcribe CLI.

Uploads an audio file to S3, transcribes it with Amazon Transcribe and
delivers a speaker-attributed transcript.
"""

import argparse
import os
import sys
from collections.abc import Callable
from pathlib import Path

from ddtrace import patch_all

from distill_transcribe import dependencies
from distill_transcribe.domain import TranscriptionInput, parse_language_code
from distill_transcribe.exceptions import (
    BucketNotFoundError,
    InputError,
    OutputWriteError,
    PollingAbandonedError,
    PollingTransportError,
    ResultFetchError,
    StorageAccessError,
    StorageUploadError,
    SubmissionError,
    TranscriptParseError,
)
from distill_transcribe.handlers import TranscriptionHandler
from distill_transcribe.infrastructure.interfaces import (
    MediaFormatResolver,
    StorageClient,
)
from distill_transcribe.logging import setup_logging
from distill_transcribe.output import OutputType, write_transcript

logger = setup_logging()

HANDLED_ERRORS = (
    InputError,
    BucketNotFoundError,
    StorageAccessError,
    StorageUploadError,
    SubmissionError,
    PollingTransportError,
    PollingAbandonedError,
    ResultFetchError,
    TranscriptParseError,
    OutputWriteError,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="distill-transcribe",
        description="Transcribe an audio file (e.g., a meeting) using Amazon"
        " Transcribe.",
    )
    parser.add_argument("-i", "--input-audio-file", required=True, type=Path)
    parser.add_argument(
        "-o",
        "--output-type",
        type=str.lower,
        choices=[t.value for t in OutputType],
        default=OutputType.TERMINAL.value,
    )
    parser.add_argument(
        "-l",
        "--language-code",
        default=None,
        help="Locale tag of the spoken language (default from DISTILL_LANGUAGE_CODE).",
    )
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    return parser.parse_args(argv)


def run(
    args: argparse.Namespace,
    storage: StorageClient,
    media_resolver: MediaFormatResolver,
    handler_factory: Callable[[str], TranscriptionHandler],
    bucket_name: str,
    default_language_code: str,
) -> Path | None:
    """
    Runs one upload-transcribe-deliver cycle.

    Raises:
        InputError: If no bucket is configured, the language code is not
            supported, or the file is missing or of an unsupported format.
        BucketNotFoundError: If the configured bucket does not exist.
        StorageAccessError: If the bucket cannot be queried.
    """
    if not bucket_name:
        raise InputError("No S3 bucket configured; set DISTILL_S3_BUCKET.")

    language_code = parse_language_code(args.language_code or default_language_code)

    file_path = Path(os.path.expanduser(str(args.input_audio_file)))
    if not file_path.exists():
        raise InputError(f"The path {file_path} does not exist.")
    file_path = file_path.resolve()

    media_format = media_resolver.resolve(file_path)

    region = storage.bucket_region(bucket_name)
    media_reference = storage.upload_file(bucket_name, file_path.name, file_path)

    handler = handler_factory(region)
    transcript = handler.process(
        TranscriptionInput(
            media_reference=media_reference,
            language_code=language_code.value,
            media_format=media_format,
        )
    )

    return write_transcript(transcript, OutputType(args.output_type), args.output_dir)


def main(argv: list[str] | None = None) -> int:
    """Parses arguments and runs the CLI."""
    patch_all()
    args = parse_args(argv)
    config = dependencies.get_config()

    try:
        path = run(
            args,
            storage=dependencies.get_storage(),
            media_resolver=dependencies.get_media_resolver(),
            handler_factory=dependencies.get_handler,
            bucket_name=config.aws.s3_bucket_name,
            default_language_code=config.transcribe.default_language_code,
        )
    except HANDLED_ERRORS as e:
        logger.exception("Transcription run failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if path is not None:
        print(f"Transcription written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
