"""Customer API client.

This module defines a thin client wrapper around the Customer REST
API.  It uses the ``requests`` library and HTTP Basic authentication.

The client exposes one method per operation:

* :meth:`list_customers` – return all customers.
* :meth:`get_customer` – fetch a single customer by its identifier.
* :meth:`create_customer` – create a customer and return its new id.
* :meth:`update_customer` – replace a customer's name and version.
* :meth:`patch_customer` – update only the supplied fields.
* :meth:`delete_customer` – delete a customer.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message``.  A 404 therefore shows
up as ``(None, {"status_code": 404, ...})`` rather than an exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CUSTOMER_PATH = "/api/v1/customer"

Error = Dict[str, Any]


class CustomerAPI:
    """Client for interacting with the Customer API."""

    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        password: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            username: HTTP Basic username.
            password: HTTP Basic password.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns a tuple ``(response, error)``.  Non‑2xx responses and
        transport failures are converted into an error dictionary.
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
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _customer_path(customer_id: Any) -> str:
        return f"{CUSTOMER_PATH}/{customer_id}"

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all customers."""
        response, error = self._request("GET", CUSTOMER_PATH)
        if error:
            return [], error
        return response.json(), None

    def get_customer(self, customer_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single customer by ID."""
        response, error = self._request("GET", self._customer_path(customer_id))
        if error:
            return None, error
        return response.json(), None

    def create_customer(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Create a customer.

        Args:
            payload: Customer fields, e.g. ``{"customerName": "Ada"}``.
        Returns:
            A tuple ``(customer_id, error)``.  The id is taken from the
            last segment of the ``Location`` response header.
        """
        response, error = self._request("POST", CUSTOMER_PATH, json_body=payload)
        if error:
            return None, error
        location = response.headers.get("Location")
        if not location:
            return None, {"status_code": response.status_code, "message": "Missing Location header"}
        return location.rstrip("/").rsplit("/", 1)[-1], None

    def update_customer(self, customer_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace a customer's name and version."""
        _, error = self._request("PUT", self._customer_path(customer_id), json_body=payload)
        return error is None, error

    def patch_customer(self, customer_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Update only the fields present in ``payload``."""
        _, error = self._request("PATCH", self._customer_path(customer_id), json_body=payload)
        return error is None, error

    def delete_customer(self, customer_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a customer.  The server treats unknown ids as already deleted."""
        _, error = self._request("DELETE", self._customer_path(customer_id))
        return error is None, error
