"""FastAPI application factory for the search proxy."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .backends.base import SearchBackend
from .backends.factory import build_backend
from .cache import CacheProvider
from .config import Settings, get_settings
from .errors import BackendError, BadRequest, MethodNotAllowed
from .logging_config import logger, setup_logging
from .routes import health, search
from .services.responses import text_response
from .utils.cors import ALLOWED_METHODS


def create_app(
    settings: Settings | None = None,
    backend: SearchBackend | None = None,
    cache: CacheProvider | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, service=settings.app_name)
    backend = backend or build_backend(settings)
    cache = cache or CacheProvider(str(settings.redis_url) if settings.redis_url else None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await cache.init()
        logger.info("app.start", backend=backend.name, cache=cache.backend_name, ttl=settings.cache_ttl)
        yield
        await cache.close()
        await backend.close()

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.backend = backend
    app.state.cache = cache

    @app.exception_handler(BadRequest)
    async def bad_request_handler(request: Request, exc: BadRequest) -> PlainTextResponse:
        logger.warning("search.bad_request", path=str(request.url), reason=str(exc))
        return text_response(exc.status_code, exc.message)

    @app.exception_handler(MethodNotAllowed)
    async def method_not_allowed_handler(request: Request, exc: MethodNotAllowed) -> PlainTextResponse:
        logger.warning("search.method_not_allowed", method=exc.method)
        return text_response(exc.status_code, exc.message, headers={"Allow": ", ".join(ALLOWED_METHODS)})

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError) -> PlainTextResponse:
        logger.error("search.backend_failed", kind=exc.kind, backend=backend.name, error=str(exc))
        return text_response(exc.status_code, exc.message)

    app.include_router(health.router)
    app.include_router(search.router)
    return app


app = create_app()
