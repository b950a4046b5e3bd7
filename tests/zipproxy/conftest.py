"""Shared fixtures: an app wired to a stub backend and an in-memory cache."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zipproxy.app import create_app
from zipproxy.backends.base import SearchBackend
from zipproxy.cache import CacheProvider
from zipproxy.config import Settings
from zipproxy.errors import BackendError
from zipproxy.models.schemas import SearchResult

ALLOWED_ORIGIN = "https://zips.example.org"


class StubBackend(SearchBackend):
    name = "stub"

    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []
        self.results: list[SearchResult] = [SearchResult(zip="01001", name="Springfield")]
        self.error: BackendError | None = None

    async def search(self, term: str, autocomplete: bool) -> list[SearchResult]:
        self.calls.append((term, autocomplete))
        if self.error is not None:
            raise self.error
        return list(self.results)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("SEARCH_BACKEND", "MONGODB_API_ENDPOINT", "MONGODB_API_SECRET", "ALLOWED_ORIGIN", "CACHE_TTL", "REDIS_URL"):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def settings() -> Settings:
    return Settings(allowed_origin=ALLOWED_ORIGIN, cache_ttl=120, redis_url=None, _env_file=None)


@pytest.fixture()
def backend() -> StubBackend:
    return StubBackend()


@pytest.fixture()
def cache() -> CacheProvider:
    return CacheProvider(None)


@pytest.fixture()
def client(settings: Settings, backend: StubBackend, cache: CacheProvider) -> TestClient:
    return TestClient(create_app(settings=settings, backend=backend, cache=cache))
