"""Async HTTP client for the storefront's REST backend.

Both resource families (``products`` and ``orders``) share one contract:

- a non-2xx response raises ``HttpError("HTTP error! status: <code>")``
- a transport failure propagates as the original ``httpx`` exception
- either way the failure is logged once, labelled with the operation
  that produced it, before it is re-raised

``check_server_health`` is the exception: it never raises and reports
any failure as ``False``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gamehub.infrastructure.http.exceptions import HttpError

logger = logging.getLogger(__name__)

API_BASE_URL = "http://localhost:3001"
DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0)


def handle_response(response: httpx.Response) -> Any:
    """Return the parsed body of a successful response, else raise HttpError."""
    if not response.is_success:
        raise HttpError(response.status_code)
    # DELETE on json-server may answer with no body at all
    if not response.content:
        return {}
    return response.json()


class ResourceAPI:
    """CRUD operations on one collection, e.g. ``/products``."""

    def __init__(self, http: httpx.AsyncClient, collection: str, singular: str) -> None:
        self._http = http
        self._collection = collection
        self._singular = singular

    async def get_all(self) -> list[dict[str, Any]]:
        return await self._request(
            "GET", f"/{self._collection}", f"fetching {self._collection}"
        )

    async def get_by_id(self, entity_id: int | str) -> dict[str, Any]:
        return await self._request(
            "GET", self._item_path(entity_id), f"fetching {self._singular} {entity_id}"
        )

    async def create(self, entity: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "POST", f"/{self._collection}", f"creating {self._singular}", json=entity
        )

    async def update(self, entity_id: int | str, entity: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "PUT",
            self._item_path(entity_id),
            f"updating {self._singular} {entity_id}",
            json=entity,
        )

    async def delete(self, entity_id: int | str) -> Any:
        return await self._request(
            "DELETE", self._item_path(entity_id), f"deleting {self._singular} {entity_id}"
        )

    # --- Internal helpers -----------------------------------------------------

    def _item_path(self, entity_id: int | str) -> str:
        return f"/{self._collection}/{entity_id}"

    async def _request(self, method: str, path: str, action: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
            return handle_response(response)
        except (httpx.HTTPError, HttpError, ValueError) as exc:
            logger.error("Error %s: %s", action, exc)
            raise


class ApiClient:
    """Entry point to the backend: ``products``, ``orders`` and a health probe.

    Owns an ``httpx.AsyncClient``; use it as an async context manager or
    call ``aclose()`` when done. Pass ``transport`` to route requests
    somewhere other than the network (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: httpx.Timeout | float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout
        )
        self.products = ResourceAPI(self._http, "products", "product")
        self.orders = ResourceAPI(self._http, "orders", "order")

    async def check_server_health(self) -> bool:
        """True only if the server answered with a 2xx status."""
        try:
            response = await self._http.get("/products", params={"_limit": 1})
        except httpx.HTTPError as exc:
            logger.error("Server health check failed: %s", exc)
            return False
        return response.is_success

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
