"""Products API client.

This module defines a small client wrapper around the Products API
served by ``products_api.app.main``.  The client uses the
``requests`` library internally to make HTTP calls and exposes
high‑level methods for every route:

* :meth:`list_products`, :meth:`get_product`, :meth:`create_product`,
  :meth:`update_product` and :meth:`delete_product` for the catalog,
* :meth:`echo` for the echo endpoint,
* :meth:`record_visit` and :meth:`list_visits` for the visit log,
* :meth:`current_time` and :meth:`logged_times` for the time log.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dict with
``status_code`` and ``message`` keys.  The API reports errors as
plain text, so ``message`` is the response body.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ProductsAPI:
    """Client for interacting with the Products API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response (or the text of a non‑JSON response, or ``None``
            for an empty one).
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        if response.headers.get("Content-Type", "").startswith("application/json"):
            return response.json(), None
        return response.text, None

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/products")
        if error:
            return [], error
        return data or [], None

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/products/{product_id}")

    def create_product(self, name: str, price: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product and return it with its assigned ``id``."""
        return self._request("POST", "/products", json_body={"name": name, "price": price})

    def update_product(
        self, product_id: int, name: str, price: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name and price of an existing product."""
        return self._request(
            "PUT", f"/products/{product_id}", json_body={"name": name, "price": price}
        )

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/products/{product_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Echo, visits and time log
    # ------------------------------------------------------------------
    def echo(self, name: str, content: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/echo", json_body={"name": name, "content": content})

    def record_visit(self, document: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/visits", json_body=document)

    def list_visits(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/visits")
        if error:
            return [], error
        return data or [], None

    def current_time(self) -> Tuple[Optional[str], Optional[Error]]:
        data, error = self._request("GET", "/current-time")
        if error:
            return None, error
        return data.get("current_time"), None

    def logged_times(self) -> Tuple[List[str], Optional[Error]]:
        data, error = self._request("GET", "/logged-times")
        if error:
            return [], error
        return data.get("timestamps") or [], None
