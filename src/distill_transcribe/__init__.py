"""Speaker-attributed transcripts from Amazon Transcribe batch jobs."""

__version__ = "0.1.0"
