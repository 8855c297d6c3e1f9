"""HTTP implementation of the ResultFetcher interface."""

import requests

from distill_transcribe.exceptions import ResultFetchError
from distill_transcribe.logging import setup_logging

from .interfaces import ResultFetcher

logger = setup_logging()


class HTTPResultFetcher(ResultFetcher):
    """Downloads result payloads from the pre-signed URI of a completed job."""

    def __init__(self, session: requests.Session, timeout_seconds: float = 60.0):
        self._session = session
        self._timeout_seconds = timeout_seconds

    def fetch(self, uri: str) -> bytes:
        try:
            response = self._session.get(uri, timeout=self._timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as e:
            # pre-signed URIs carry credentials in the query string
            logger.exception(
                "Result download failed", extra={"uri": uri.split("?", 1)[0]}
            )
            raise ResultFetchError(uri.split("?", 1)[0], e) from e

        logger.info("Result downloaded", extra={"size": len(response.content)})
        return response.content
