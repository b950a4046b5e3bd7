"""Cache key derivation."""
from __future__ import annotations

from ..models.schemas import SearchRequest

CACHE_KEY_PREFIX = "search:"


def build_cache_key(request: SearchRequest) -> str:
    # Autocomplete and full searches for the same term share one entry.
    return f"{CACHE_KEY_PREFIX}{request.raw_query_term}"
