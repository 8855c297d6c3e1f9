"""Custom exceptions for the distill-transcribe service."""


class InputError(Exception):
    """Raised when caller input is rejected before any job is submitted."""


class UnsupportedLanguageError(InputError):
    """Raised when a language code is not a supported Transcribe locale."""

    def __init__(self, language_code: str):
        self.language_code = language_code
        super().__init__(f"Unsupported language code: '{language_code}'")


class UnsupportedMediaFormatError(InputError):
    """Raised when the media format of an input file cannot be determined."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Unsupported media format for '{file_path}': {reason}")


class SubmissionError(Exception):
    """Raised when the job service rejects or cannot accept a job request."""

    def __init__(self, job_id: str, cause: Exception | None = None):
        self.job_id = job_id
        self.cause = cause
        super().__init__(f"Failed to submit transcription job '{job_id}'")


class PollingTransportError(Exception):
    """Raised when a job status check fails at the transport or service layer."""

    def __init__(self, job_id: str, cause: Exception | None = None):
        self.job_id = job_id
        self.cause = cause
        super().__init__(f"Failed to read status of transcription job '{job_id}'")


class PollingAbandonedError(Exception):
    """
    Raised when the caller abandons the poll loop (deadline or cancellation).

    The job itself is not cancelled and keeps running on the external side.
    """

    def __init__(self, job_id: str, reason: str):
        self.job_id = job_id
        self.reason = reason
        super().__init__(
            f"Stopped waiting for transcription job '{job_id}': {reason}"
        )


class ResultFetchError(Exception):
    """Raised when the result payload of a completed job cannot be downloaded."""

    def __init__(self, uri: str, cause: Exception | None = None):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Failed to fetch transcription result from '{uri}'")


class TranscriptParseError(Exception):
    """Raised when a transcription result payload is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        index: int | None = None,
        cause: Exception | None = None,
    ):
        self.field = field
        self.index = index
        self.cause = cause
        location = []
        if index is not None:
            location.append(f"item {index}")
        if field is not None:
            location.append(f"field '{field}'")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class BucketNotFoundError(Exception):
    """Raised when the configured storage bucket does not exist."""

    def __init__(self, bucket_name: str):
        self.bucket_name = bucket_name
        super().__init__(f"Storage bucket '{bucket_name}' was not found")


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageAccessError(Exception):
    """Raised when the storage backend cannot be queried about a bucket."""

    def __init__(self, bucket_name: str, cause: Exception | None = None):
        self.bucket_name = bucket_name
        self.cause = cause
        super().__init__(f"Failed to access storage bucket '{bucket_name}'")


class OutputWriteError(Exception):
    """Raised when the transcript cannot be written to its output file."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write transcript to '{path}'")
