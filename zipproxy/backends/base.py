"""Common interface for the search backends."""
from __future__ import annotations

from ..models.schemas import SearchResult

AUTOCOMPLETE_LIMIT = 10
SEARCH_LIMIT = 50


class SearchBackend:
    name: str

    async def search(self, term: str, autocomplete: bool) -> list[SearchResult]:  # pragma: no cover - interface
        raise NotImplementedError

    async def close(self) -> None:
        return None


def result_limit(autocomplete: bool) -> int:
    return AUTOCOMPLETE_LIMIT if autocomplete else SEARCH_LIMIT
