"""Outgoing HTTP responses for every terminal state of a search request."""
from __future__ import annotations

from typing import Iterable, Mapping

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse

from ..models.schemas import SearchResponse, SearchResult
from ..utils.cors import CorsDecision


def cache_control(ttl: int) -> str:
    return f"public, maxage={ttl}, immutable"


def result_headers(ttl: int) -> dict[str, str]:
    """Headers stored alongside cached results; CORS headers are added per request."""
    return {"Cache-Control": cache_control(ttl)}


def results_response(
    results: Iterable[SearchResult],
    headers: Mapping[str, str],
    cors: CorsDecision,
    cache_hit: bool = False,
    status_code: int = 200,
) -> JSONResponse:
    body = SearchResponse(results=list(results)).model_dump()
    merged = {**headers, **cors.headers, "X-Cache-Hit": "1" if cache_hit else "0"}
    return JSONResponse(status_code=status_code, content=body, headers=merged)


def preflight_response(cors: CorsDecision) -> Response:
    return Response(status_code=204, headers=cors.headers)


def head_response(cors: CorsDecision) -> Response:
    return Response(status_code=200, headers=cors.headers)


def text_response(status_code: int, message: str, headers: Mapping[str, str] | None = None) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code, headers=dict(headers or {}))
