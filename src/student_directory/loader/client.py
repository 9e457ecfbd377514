"""HTTP access to the remote student collection"""

import logging

import requests

from student_directory.config import settings
from student_directory.loader.errors import DecodeError, HttpStatusError, NetworkError
from student_directory.models.record import Record, RecordDecodeError, parse_records


class CollectionClient:
    """
    Fetches the whole record collection with a single GET.

    Every failure is raised as a `LoadError` subclass so callers only have
    to handle one exception family.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.url: str = url or settings.DIRECTORY_ENDPOINT
        self.timeout: float = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self._session: requests.Session = session or requests.Session()
        self.logger: logging.Logger = logging.getLogger("CollectionClient")

    def fetch_records(self) -> tuple[Record, ...]:
        """
        Download and decode the collection.

        Raises:
            NetworkError: The request did not complete
            HttpStatusError: The response status is not 2xx
            DecodeError: The body is not a JSON array of records
        """
        self.logger.debug("GET %s", self.url)
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(type(e).__name__) from e

        if not 200 <= resp.status_code < 300:
            raise HttpStatusError(resp.status_code, resp.reason or "")

        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError("body is not valid JSON") from e
        except RecursionError as e:
            raise DecodeError("body is nested too deeply") from e

        try:
            records = parse_records(payload)
        except RecordDecodeError as e:
            raise DecodeError(str(e)) from e

        self.logger.debug("Fetched %d records", len(records))
        return records

    def close(self):
        self._session.close()
