"""Infrastructure interface exports."""

from .job_service import JobService
from .media_format_resolver import MediaFormatResolver
from .result_fetcher import ResultFetcher
from .storage import StorageClient

__all__ = ["JobService", "MediaFormatResolver", "ResultFetcher", "StorageClient"]
