"""Turn raw backend payloads into :class:`SearchResult` lists."""
from __future__ import annotations

import json
from typing import Any, Iterable

import httpx
from pydantic import ValidationError

from ..errors import InvalidResponse, UnexpectedCall
from ..models.schemas import SearchResult

RESULT_ARRAY_KEYS = ("results", "documents")


def extract_records(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in RESULT_ARRAY_KEYS:
            records = payload.get(key)
            if isinstance(records, list):
                return records
    return []


def to_results(records: Iterable[Any]) -> list[SearchResult]:
    try:
        return [SearchResult.model_validate(record) for record in records]
    except ValidationError as exc:
        raise InvalidResponse("backend returned records without zip/name") from exc


def parse_results(response: httpx.Response | None) -> list[SearchResult]:
    if response is None:
        raise UnexpectedCall("parse_results called without a response")
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidResponse("backend returned a non-JSON body") from exc
    return to_results(extract_records(payload))
