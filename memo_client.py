"""Memo API client.

This module defines a small client wrapper around the memo REST API
served by ``memo_api``.  The client uses the ``requests`` library
internally to make HTTP calls.

The client exposes one method per operation:

* :meth:`list_memos` – return all memos.
* :meth:`get_memo` – fetch a single memo by its identifier.
* :meth:`create_memo` – store a new memo.
* :meth:`update_memo` – replace the content of a memo.
* :meth:`delete_memo` – remove a memo.

No method raises on HTTP or network failures.  Every call returns a
tuple ``(data, error)`` where ``error`` is ``None`` on success and a
dictionary with ``status_code`` and ``message`` otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

MEMOS_PATH = "/api/v1/memos"


class MemoAPI:
    """Client for interacting with the memo API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Memo operations
    # ------------------------------------------------------------------
    def list_memos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all memos.

        Returns:
            A tuple ``(memos, error)``. ``memos`` is empty on failure.
        """
        data, error = self._request("GET", MEMOS_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_memo(self, memo_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single memo by ID."""
        return self._request("GET", f"{MEMOS_PATH}/{memo_id}")

    def create_memo(self, content: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a memo with the given content."""
        return self._request("POST", MEMOS_PATH, json_body={"content": content})

    def update_memo(
        self, memo_id: int, content: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace the content of memo ``memo_id``."""
        return self._request("PUT", f"{MEMOS_PATH}/{memo_id}", json_body={"content": content})

    def delete_memo(self, memo_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a memo.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{MEMOS_PATH}/{memo_id}")
        if error:
            return False, error
        return True, None
