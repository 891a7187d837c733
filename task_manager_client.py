"""Task Manager API client.

A small synchronous wrapper around the ``/tasks`` endpoints for scripts
and bots that talk to the service.  It uses the ``requests`` library
and never raises on HTTP or transport errors; every method returns a
``(data, error)`` tuple instead:

* :meth:`list_tasks` – all tasks.
* :meth:`get_task` – one task by id.
* :meth:`create_task` – create a task from a title and description.
* :meth:`update_task` – overwrite title and description of a task.
* :meth:`delete_task` – remove a task.

``error`` is ``None`` on success, otherwise a dictionary with keys
``status_code`` (``None`` for transport failures) and ``message``.  For
HTTP errors the message is the ``error`` field of the service's JSON
body, e.g. ``"Task not found"``.

The base URL defaults to the ``TASKS_API_URL`` environment variable,
falling back to ``http://localhost:4000``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000"

Error = Dict[str, Any]


class TaskManagerAPI:
    """Client for the task endpoints of the Task Manager API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:4000``.
                Defaults to ``TASKS_API_URL``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        base_url = base_url or os.getenv("TASKS_API_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/tasks``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response on success; on failure it is ``None`` and ``error``
            describes the problem.
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
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        # A Response with a 4xx/5xx status is falsy, so compare with None.
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        if response is not None:
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("error") or body.get("detail") or ""
                    if not isinstance(message, str):
                        message = str(message)
            except ValueError:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message}

    @staticmethod
    def _payload(title: Optional[str], description: Optional[str]) -> Dict[str, Optional[str]]:
        return {"title": title, "description": description}

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all tasks.

        Returns:
            A tuple ``(tasks, error)``.  ``tasks`` is empty on failure.
        """
        data, error = self._request("GET", "/tasks")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_task(self, task_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single task by id."""
        return self._request("GET", f"/tasks/{task_id}")

    def create_task(
        self, title: Optional[str] = None, description: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task and return it with its assigned id."""
        return self._request("POST", "/tasks", json_body=self._payload(title, description))

    def update_task(
        self,
        task_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Overwrite both fields of a task.

        The service replaces title and description together, so pass
        the current value of any field you do not mean to clear.
        """
        return self._request(
            "PUT", f"/tasks/{task_id}", json_body=self._payload(title, description)
        )

    def delete_task(self, task_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a task.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/tasks/{task_id}")
        if error:
            return False, error
        return True, None
