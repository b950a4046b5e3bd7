"""Response cache: Redis when configured, in-process memory otherwise."""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Callable

from redis.asyncio import Redis
from redis.exceptions import RedisError

from .logging_config import logger


@dataclass
class CacheResult:
    value: Any


class MemoryCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[Any, float | None]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        async with self._lock:
            value = self._store.get(key)
            if not value:
                return None
            payload, expires_at = value
            if expires_at is not None and expires_at <= self._clock():
                self._store.pop(key, None)
                return None
            return payload

    async def set(self, key: str, value: Any, ex: int | None = None) -> None:
        async with self._lock:
            expires_at = None
            if ex is not None:
                expires_at = self._clock() + ex
            self._purge_expired()
            self._store[key] = (value, expires_at)

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._store.items() if expires_at is not None and expires_at <= now]
        for key in expired:
            del self._store[key]


class CacheProvider:
    """Key-value store consulted before, and filled after, backend calls."""

    def __init__(self, redis_url: str | None = None) -> None:
        self._redis_url = redis_url
        self._redis: Redis | None = None
        self._initialized = False
        self._fallback = MemoryCache()

    @property
    def backend_name(self) -> str:
        return "redis" if self._redis else "memory"

    async def init(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        if not self._redis_url:
            return
        try:
            self._redis = Redis.from_url(self._redis_url, encoding="utf-8", decode_responses=True)
            await self._redis.ping()
        except (RedisError, OSError) as exc:
            logger.warning("cache.redis_unavailable", error=str(exc))
            self._redis = None

    async def get(self, key: str) -> CacheResult | None:
        await self.init()
        if self._redis:
            try:
                value = await self._redis.get(key)
                if value is not None:
                    return CacheResult(value=value)
            except RedisError as exc:
                logger.warning("cache.redis_get_failed", key=key, error=str(exc))
        payload = await self._fallback.get(key)
        if payload is None:
            return None
        return CacheResult(value=payload)

    async def set(self, key: str, value: Any, ex: int | None = None) -> None:
        if ex is not None and ex <= 0:
            logger.info("cache.store_skipped", key=key, reason="zero_ttl")
            return
        await self.init()
        if self._redis:
            try:
                await self._redis.set(key, value, ex=ex)
                return
            except RedisError as exc:
                logger.warning("cache.redis_set_failed", key=key, error=str(exc))
        await self._fallback.set(key, value, ex)

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()
            self._redis = None
        self._initialized = False
