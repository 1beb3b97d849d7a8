"""Guitars API client.

This module defines a small client wrapper around the Guitars REST
API for scripts and other services that want to manage the collection
without a browser.  It follows the same rules as the browser script:

* :meth:`GuitarsAPI.list_guitars` – return every guitar with its ``link``.
* :meth:`GuitarsAPI.create_guitar` – add a guitar; its ``link`` is read
  from the ``Location`` header of the response, never built locally.
* :meth:`GuitarsAPI.delete_guitar` – delete the guitar at a ``link``
  previously handed out by the server.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GuitarsAPI:
    """Client for interacting with the Guitars API."""

    collection_path = "/guitars"

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Root URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the server mounts its routes under, if
                any (its ``API_PREFIX`` setting).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{self.api_prefix}{self.collection_path}"

    def _url(self, path_or_link: str) -> str:
        # Links handed out by the server are absolute paths that already
        # include the API prefix.
        if path_or_link.startswith(("http://", "https://")):
            return path_or_link
        return f"{self.base_url}/{path_or_link.lstrip('/')}"

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(response, error)``.  ``response`` is the
            successful response; on failure it is ``None`` and ``error``
            describes the issue.
        """
        url = self._url(path)
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                allow_redirects=False,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
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
    # Guitar operations
    # ------------------------------------------------------------------
    def list_guitars(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all guitars in display order.

        Returns:
            A tuple ``(guitars, error)``.  Each guitar is a dictionary
            with ``name`` and ``link``.
        """
        response, error = self._request("GET", self.collection_url)
        if error:
            return [], error
        data = response.json()
        if not isinstance(data, list):
            return [], {"status_code": response.status_code, "message": "Unexpected listing payload"}
        return data, None

    def create_guitar(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a guitar.

        Returns:
            A tuple ``(guitar, error)``.  ``guitar`` holds the confirmed
            ``name`` and the ``link`` from the ``Location`` header.
        """
        response, error = self._request("POST", self.collection_url, json_body={"name": name})
        if error:
            return None, error
        link = response.headers.get("Location")
        if not link:
            return None, {"status_code": response.status_code, "message": "Response has no Location header"}
        data = response.json()
        return {"name": data.get("name", name), "link": link}, None

    def delete_guitar(self, link: str) -> Tuple[bool, Optional[Error]]:
        """Delete the guitar at ``link``.

        Deleting a guitar that is already gone succeeds too.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", link)
        if error:
            return False, error
        return True, None
