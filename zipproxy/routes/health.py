"""Liveness probe that exercises the cache."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..backends.base import SearchBackend
from ..cache import CacheProvider
from ..logging_config import logger
from ..models.schemas import SystemHealth
from .search import get_backend, get_cache

router = APIRouter(tags=["health"])


@router.get("/health", response_model=SystemHealth)
async def health(
    cache: CacheProvider = Depends(get_cache),
    backend: SearchBackend = Depends(get_backend),
) -> SystemHealth:
    try:
        if await cache.get("__health_check__") is None:
            await cache.set("__health_check__", "ok", ex=5)
        cache_status = cache.backend_name
    except Exception as exc:
        logger.warning("health.cache_degraded", error=str(exc))
        cache_status = "degraded"
    return SystemHealth(status="ok", components={"cache": cache_status, "backend": backend.name})
