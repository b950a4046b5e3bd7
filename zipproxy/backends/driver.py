"""Search the store directly through an async SQLAlchemy connection."""
from __future__ import annotations

from sqlalchemy import Table, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ..errors import BackendUnavailable
from ..logging_config import logger
from ..models.schemas import SearchResult
from .base import SearchBackend, result_limit
from .transformers import to_results


class DriverBackend(SearchBackend):
    name = "driver"

    def __init__(self, engine: AsyncEngine, table: Table) -> None:
        self.engine = engine
        self.table = table

    def _build_query(self, term: str, autocomplete: bool):
        return (
            select(self.table.c.zip, self.table.c.name)
            .where(self.table.c.name.icontains(term, autoescape=True))
            .limit(result_limit(autocomplete))
        )

    async def search(self, term: str, autocomplete: bool) -> list[SearchResult]:
        statement = self._build_query(term, autocomplete)
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as exc:
            raise BackendUnavailable(f"database query failed: {exc}") from exc
        logger.info("backend.driver_rows", count=len(rows), autocomplete=autocomplete)
        return to_results(dict(row) for row in rows)

    async def close(self) -> None:
        await self.engine.dispose()
