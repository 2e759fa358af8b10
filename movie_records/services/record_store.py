from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from movie_records.core.exceptions import TransportError, ValidationError, ValidationIssue
from movie_records.core.record import Record

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINTS: Dict[str, str] = {
    "fetch": "fetch.php",
    "create": "create.php",
    "delete": "delete.php",
}
DEFAULT_TIMEOUT = 10.0


def validate_new_record(actor_name: Any, movie_name: Any) -> Tuple[str, str]:
    """
    Trim and check the fields of a record about to be created.

    :return: the trimmed (actor_name, movie_name)
    :raises ValidationError: if either field is empty after trimming
    """
    actor = str(actor_name or "").strip()
    movie = str(movie_name or "").strip()

    issues = []
    if not actor:
        issues.append(ValidationIssue("empty_actor_name", "Actor name is required."))
    if not movie:
        issues.append(ValidationIssue("empty_movie_name", "Movie name is required."))
    if issues:
        raise ValidationError(issues)

    return actor, movie


class RecordStore:
    """
    Owns the authoritative in-memory record list and keeps it in sync with
    the remote records API.

    The snapshot is an immutable tuple that is only ever replaced as a whole,
    so readers never see a half-applied update. A failed call leaves the
    snapshot exactly as it was and raises TransportError to the caller.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        endpoints: Optional[Dict[str, str]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.endpoints = {**DEFAULT_ENDPOINTS, **(endpoints or {})}
        self._records: Tuple[Record, ...] = ()

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def _url(self, operation: str) -> str:
        return f"{self.base_url}/{self.endpoints[operation].lstrip('/')}"

    def _request(self, operation: str, method: str, **kwargs: Any) -> requests.Response:
        url = self._url(operation)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(
                "Records API returned an error status",
                extra={"operation": operation, "url": url, "status_code": status},
            )
            raise TransportError(operation, str(e), status_code=status) from e
        except requests.RequestException as e:
            logger.warning(
                "Records API request failed",
                extra={"operation": operation, "url": url, "error": str(e)},
            )
            raise TransportError(operation, str(e)) from e
        return resp

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def fetch_all(self) -> Tuple[Record, ...]:
        """
        Replace the snapshot with the server's current record list.

        :raises TransportError: on network/HTTP failure or a payload that is
            not a JSON list of record objects; the old snapshot is kept.
        """
        resp = self._request("fetch", "GET")

        try:
            payload = resp.json()
        except ValueError as e:
            raise TransportError("fetch", "response body is not valid JSON") from e

        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise TransportError("fetch", "expected a JSON list of record objects")

        self._records = tuple(Record.from_wire(item) for item in payload)
        logger.info("Fetched records", extra={"n_records": len(self._records)})
        return self._records

    def create(self, actor_name: Any, movie_name: Any) -> None:
        """
        Submit a new record.

        The server assigns id and created_at, and does not echo them back,
        so the new record only shows up after the next fetch_all().

        :raises ValidationError: if a field is blank; nothing is sent
        :raises TransportError: if the API call fails
        """
        actor, movie = validate_new_record(actor_name, movie_name)
        self._request("create", "POST", json={"actor_name": actor, "movie_name": movie})
        logger.info("Created record", extra={"actor_name": actor, "movie_name": movie})

    def delete(self, record_id: Any) -> None:
        """
        Delete a record remotely, then drop it from the local snapshot.

        :raises TransportError: if the API call fails; the snapshot is unchanged
        """
        self._request("delete", "DELETE", json={"id": record_id})
        self._records = tuple(r for r in self._records if r.id != record_id)
        logger.info("Deleted record", extra={"record_id": record_id})
