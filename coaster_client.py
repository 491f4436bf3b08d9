"""Coaster API client.

A thin wrapper around the Coaster API's HTTP surface built on the
``requests`` library.  Every public method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.

* :meth:`CoasterAPI.list_coasters` – all stored coasters.
* :meth:`CoasterAPI.get_coaster` – a single coaster by id.
* :meth:`CoasterAPI.create_coaster` – store a new coaster.
* :meth:`CoasterAPI.random_coaster_id` – id behind ``/coasters/random``.
* :meth:`CoasterAPI.admin_page` – the admin portal HTML.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CoasterAPI:
    """Client for interacting with the Coaster API."""

    def __init__(
        self,
        *,
        base_url: str,
        admin_password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            admin_password: Password of the ``admin`` account, used only
                by :meth:`admin_page`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.admin_password = admin_password
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, **kwargs: Any
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and translate failures into an error dict.

        Redirects are never followed so that callers can inspect them.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                allow_redirects=False,
                **kwargs,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Coaster operations
    # ------------------------------------------------------------------
    def list_coasters(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        response, error = self._request("GET", "/coasters")
        if error:
            return [], error
        return response.json(), None

    def get_coaster(self, coaster_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        response, error = self._request("GET", f"/coasters/{coaster_id}")
        if error:
            return None, error
        return response.json(), None

    def create_coaster(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a coaster.

        Args:
            payload: Coaster fields (``name``, ``inPark``,
                ``manufacturer``, ``height``).  Any ``id`` is ignored by
                the server.
        Returns:
            A tuple ``(coaster, error)``; ``coaster`` carries the
            assigned id.
        """
        response, error = self._request("POST", "/coasters", json=payload)
        if error:
            return None, error
        return response.json(), None

    def random_coaster_id(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the id the random endpoint redirects to.

        The redirect is not followed; the id is taken from the
        ``Location`` header.
        """
        response, error = self._request("GET", "/coasters/random")
        if error:
            return None, error
        location = response.headers.get("Location", "")
        prefix = "/coasters/"
        if response.status_code != 302 or not location.startswith(prefix):
            message = f"Unexpected response {response.status_code} with location '{location}'"
            logger.error(message)
            return None, {"status_code": response.status_code, "message": message}
        return location[len(prefix):], None

    # ------------------------------------------------------------------
    # Admin portal
    # ------------------------------------------------------------------
    def admin_page(self) -> Tuple[Optional[str], Optional[Error]]:
        if self.admin_password is None:
            return None, {"status_code": None, "message": "No admin password configured"}
        response, error = self._request("GET", "/admin", auth=("admin", self.admin_password))
        if error:
            return None, error
        return response.text, None
