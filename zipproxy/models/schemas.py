"""Pydantic models for requests, results, cache entries and health."""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseSchema(BaseModel):
    """Base schema with attribute extraction enabled."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SystemHealth(BaseSchema):
    status: str
    components: Dict[str, str] = Field(default_factory=dict)


class SearchRequest(BaseSchema):
    model_config = ConfigDict(frozen=True)

    raw_query_term: str
    is_autocomplete: bool


class SearchResult(BaseSchema):
    zip: str
    name: str

    @field_validator("zip", "name", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # Stores frequently keep zip codes as integers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class SearchResponse(BaseSchema):
    results: List[SearchResult] = Field(default_factory=list)


class CacheEntry(BaseSchema):
    status: int = 200
    results: List[SearchResult] = Field(default_factory=list)
    headers: Dict[str, str] = Field(default_factory=dict)
