"""Writers for delivering the finished transcript."""

from enum import Enum
from pathlib import Path

from distill_transcribe.exceptions import OutputWriteError
from distill_transcribe.logging import setup_logging

logger = setup_logging()


class OutputType(str, Enum):
    """Where the transcript is delivered."""

    TERMINAL = "terminal"
    TEXT = "text"
    MARKDOWN = "markdown"


def format_text(transcript: str) -> str:
    return f"Transcription:\n{transcript}"


def format_markdown(transcript: str) -> str:
    """Renders the transcript as Markdown with a blank line between speakers."""
    lines = transcript.splitlines()
    if not lines:
        return "# Transcription\n"
    return "# Transcription\n\n\n" + "\n\n".join(lines) + "\n"


def write_transcript(
    transcript: str, output_type: OutputType, output_dir: Path
) -> Path | None:
    """
    Delivers the transcript to the terminal or to a file.

    Args:
        transcript: The reconstructed transcript text.
        output_type: Delivery target.
        output_dir: Directory for file outputs.

    Returns:
        The written file path, or None for terminal output.

    Raises:
        OutputWriteError: If the output file cannot be written.
    """
    if output_type is OutputType.TERMINAL:
        print(f"\n{format_text(transcript)}")
        return None

    if output_type is OutputType.TEXT:
        path = output_dir / "transcript.txt"
        content = format_text(transcript)
    else:
        path = output_dir / "transcript.md"
        content = format_markdown(transcript)

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.exception("Transcript write failed", extra={"path": str(path)})
        raise OutputWriteError(str(path), e) from e

    logger.info("Transcript written", extra={"path": str(path)})
    return path
