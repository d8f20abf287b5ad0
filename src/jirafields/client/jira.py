"""HTTP client for the Jira field listing endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jirafields.client.provider import RemoteFieldSource
from jirafields.exceptions import UpstreamError

logger = logging.getLogger(__name__)

FIELD_ENDPOINT = "/rest/api/2/field"
DEFAULT_TIMEOUT = 30.0


class JiraFieldClient(RemoteFieldSource):
    """Async client for ``GET /rest/api/2/field`` on Jira Server/Data Center.

    Jira returns every system and custom field of the instance regardless of
    entity type; filtering happens in the cache.

    Example:
        async with JiraFieldClient("https://jira.example.com", token) as client:
            records = await client.fetch_remote_fields("issue")
    """

    def __init__(
        self,
        base_url: str,
        personal_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Jira base URL, e.g. https://jira.example.com
            personal_token: Personal access token sent as a bearer token
            timeout: Request timeout in seconds
            client: Optional shared httpx client (not closed by ``aclose``)
        """
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._token = personal_token
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def field_url(self) -> str:
        return f"{self._base_url}{FIELD_ENDPOINT}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def fetch_remote_fields(self, entity_type: str) -> list[dict[str, Any]]:
        """Fetch all field records of the instance.

        Raises:
            UpstreamError: On transport errors, non-2xx responses or a payload
                that is not a JSON array.
        """
        logger.debug("Fetching remote fields", extra={"entity_type": entity_type})
        try:
            resp = await self._get_client().get(self.field_url, headers=self._headers())
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Jira returned HTTP {e.response.status_code} for {self.field_url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Request to {self.field_url} failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from {self.field_url}: {e}") from e

        if not isinstance(payload, list):
            raise UpstreamError(
                f"Expected a JSON array from {self.field_url}, got {type(payload).__name__}"
            )
        return [record for record in payload if isinstance(record, dict)]

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> JiraFieldClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
