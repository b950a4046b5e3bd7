"""Query-string validation for search requests."""
from __future__ import annotations

from collections.abc import Mapping

from ..errors import BadRequest
from ..models.schemas import SearchRequest

MIN_TERM_LENGTH = 3


def validate_search_params(params: Mapping[str, str]) -> SearchRequest | None:
    """Turn ``query``/``search`` parameters into a :class:`SearchRequest`.

    Exactly one of the two parameters must carry a non-empty value, otherwise
    :class:`BadRequest` is raised. ``None`` is returned when the term is too
    short to be worth a backend call; callers answer with an empty result set.
    The raw value is used as-is, without trimming.
    """
    query = params.get("query")
    search = params.get("search")

    if not query and not search:
        raise BadRequest("either 'query' or 'search' is required")
    if query and search:
        raise BadRequest("'query' and 'search' are mutually exclusive")

    entry = query if query else search
    if len(entry) < MIN_TERM_LENGTH:
        return None
    return SearchRequest(raw_query_term=entry, is_autocomplete=bool(query))
