# =============================================================================
# frontend/api_client.py - Backend HTTP Client
# =============================================================================
# Async httpx wrapper around the backend's person and health endpoints.
#
# Usage:
#   client = BackendClient("http://localhost:4000")
#   persons = await client.list_persons()
#   await client.aclose()
# =============================================================================

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from core.models.person import Person

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """
    A backend call failed.

    `message` is the backend's own `error` string when it sent one, so
    validation and not-found messages reach the user verbatim.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BackendClient:
    """Thin async client for the Age Calculator backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        fallback_message: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """
        Send a request and return the decoded JSON body.

        Raises:
            BackendError: On transport failure, a non-2xx response, or a
                body that is not a JSON object
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise BackendError(fallback_message) from e

        data = _json_object(response)

        if response.is_error:
            message = fallback_message
            if data is not None and isinstance(data.get("error"), str) and data["error"]:
                message = data["error"]
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise BackendError(message, status_code=response.status_code)

        if data is None:
            logger.error(
                f"{method} {path} -> {response.status_code}: response is not a JSON object "
                f"(content-type {response.headers.get('content-type')!r})"
            )
            raise BackendError(fallback_message, status_code=response.status_code)

        return data

    async def list_persons(self) -> list[Person]:
        fallback = "Failed to load persons"
        data = await self._request("GET", "/api/persons", fallback)
        persons = data.get("persons", [])
        if not isinstance(persons, list):
            logger.error(f"Malformed persons list in backend response: {persons!r}")
            raise BackendError(fallback)
        result = [_parse_person(p, fallback) for p in persons]
        logger.debug(f"Received persons: {data.get('count', len(result))}")
        return result

    async def create_person(self, name: str, birth_date: str) -> Person:
        fallback = "Failed to add person"
        data = await self._request(
            "POST",
            "/api/persons",
            fallback,
            json={"name": name, "birthDate": birth_date},
        )
        return _parse_person(data.get("person"), fallback)

    async def delete_person(self, person_id: str) -> Person:
        fallback = "Failed to delete person"
        data = await self._request("DELETE", f"/api/persons/{person_id}", fallback)
        return _parse_person(data.get("person"), fallback)

    async def health(self, timeout: float | None = None) -> dict[str, Any]:
        """Fetch the backend liveness probe."""
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return await self._request("GET", "/health", "Backend unreachable", **kwargs)


def _json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Decode the body as a JSON object; None for anything else."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _parse_person(value: Any, fallback_message: str) -> Person:
    try:
        return Person.model_validate(value)
    except ValidationError as e:
        logger.error(f"Malformed person in backend response: {e}")
        raise BackendError(fallback_message) from e
