"""Engine and table definitions for direct driver access."""
from sqlalchemy import Column, MetaData, String, Table
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

metadata = MetaData()


def cities_table(name: str = "cities") -> Table:
    existing = metadata.tables.get(name)
    if existing is not None:
        return existing
    return Table(
        name,
        metadata,
        Column("zip", String(16), nullable=False),
        Column("name", String(255), nullable=False),
    )


def create_engine(database_url: str) -> AsyncEngine:
    # One connection per search; nothing is pooled between requests.
    return create_async_engine(database_url, echo=False, poolclass=NullPool)
