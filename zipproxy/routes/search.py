"""The single search route: CORS gate, validation, cache, backend."""
from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from pydantic import ValidationError

from ..backends.base import SearchBackend
from ..cache import CacheProvider
from ..config import Settings
from ..logging_config import logger
from ..models.schemas import CacheEntry
from ..services import responses
from ..utils import cors
from ..utils.cache_keys import build_cache_key
from ..utils.validation import validate_search_params

router = APIRouter(tags=["search"])

# Every method reaches the handler so the CORS gate decides what is allowed.
ROUTED_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> CacheProvider:
    return request.app.state.cache


def get_backend(request: Request) -> SearchBackend:
    return request.app.state.backend


async def _store_entry(cache: CacheProvider, key: str, entry: CacheEntry, ttl: int) -> None:
    await cache.set(key, entry.model_dump_json(), ex=ttl)
    logger.info("search.cache_stored", key=key, ttl=ttl, count=len(entry.results))


@router.api_route("/", methods=ROUTED_METHODS, include_in_schema=False)
async def search(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    cache: CacheProvider = Depends(get_cache),
    backend: SearchBackend = Depends(get_backend),
) -> Response:
    decision = cors.evaluate(request.method, request.headers.get("origin"), settings.allowed_origin)
    if request.method == "OPTIONS":
        logger.info("cors.preflight", origin_matched=decision.allowed)
        return responses.preflight_response(decision)
    if request.method == "HEAD":
        return responses.head_response(decision)

    ttl = settings.cache_ttl
    search_request = validate_search_params(request.query_params)
    if search_request is None:
        logger.info("search.short_circuit")
        return responses.results_response([], responses.result_headers(ttl), decision)

    key = build_cache_key(search_request)
    cached = await cache.get(key)
    if cached:
        try:
            entry = CacheEntry.model_validate_json(cached.value)
        except ValidationError as exc:
            logger.warning("search.cache_corrupt", key=key, error=str(exc))
        else:
            logger.info("search.cache_hit", key=key)
            return responses.results_response(entry.results, entry.headers, decision, cache_hit=True, status_code=entry.status)

    logger.info("search.lookup_start", key=key, autocomplete=search_request.is_autocomplete, backend=backend.name)
    results = await backend.search(search_request.raw_query_term, search_request.is_autocomplete)
    entry = CacheEntry(status=200, results=results, headers=responses.result_headers(ttl))
    background_tasks.add_task(_store_entry, cache, key, entry, ttl)
    logger.info("search.lookup_complete", key=key, count=len(results))
    return responses.results_response(entry.results, entry.headers, decision)
