"""Search through an HTTP data API in front of the document store."""
from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

import httpx

from ..errors import BackendUnavailable
from ..logging_config import logger
from ..models.schemas import SearchResult
from .base import SearchBackend
from .transformers import parse_results

# Characters encodeURIComponent leaves untouched besides alphanumerics.
URI_COMPONENT_SAFE = "-_.!~*'()"


def build_search_string(params: Mapping[str, Any]) -> str:
    return "&".join(f"{key}={quote(str(value), safe=URI_COMPONENT_SAFE)}" for key, value in params.items())


class DataApiBackend(SearchBackend):
    """Thin client for the data API with an ``api-key`` header."""

    name = "data_api"

    def __init__(
        self,
        endpoint: str | None,
        api_key: str | None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _build_url(self, term: str, autocomplete: bool) -> str:
        query = build_search_string({"search": term, "autocomplete": 1 if autocomplete else 0})
        return f"{self.endpoint}?{query}"

    def _headers(self) -> dict[str, str]:
        return {
            "content-type": "application/json;charset=UTF-8",
            "api-key": self.api_key or "",
        }

    async def search(self, term: str, autocomplete: bool) -> list[SearchResult]:
        if not self.endpoint:
            raise BackendUnavailable("data API endpoint is not configured")
        url = self._build_url(term, autocomplete)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self._headers())
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise BackendUnavailable(f"data API request failed: {exc}") from exc
        logger.info("backend.data_api_response", status=response.status_code, autocomplete=autocomplete)
        return parse_results(response)
