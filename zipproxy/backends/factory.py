"""Pick the configured backend implementation."""
from __future__ import annotations

from ..config import Settings
from ..database import cities_table, create_engine
from .base import SearchBackend
from .data_api import DataApiBackend
from .driver import DriverBackend


def build_backend(settings: Settings) -> SearchBackend:
    if settings.search_backend == "driver":
        return DriverBackend(create_engine(settings.database_url), cities_table(settings.database_table))
    return DataApiBackend(
        settings.mongodb_api_endpoint,
        settings.mongodb_api_secret,
        timeout=settings.request_timeout_seconds,
    )
