from typing import Any, Dict
from sqlalchemy import event, text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel


def _normalize_db_url(url: str | None) -> str | None:
    # hosted postgres often hands out "postgres://...", asyncpg needs "postgresql+asyncpg://..."
    if not url:
        return None
    if url.startswith("postgres://",):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_db_url(settings) -> str:
    if settings.DATABASE_URL:
        return _normalize_db_url(settings.DATABASE_URL)

    return URL.create(
        "postgresql+asyncpg",
        username=settings.DB_USER,
        password=settings.DB_PASSWORD or None,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=settings.DB_NAME,
    ).render_as_string(hide_password=False)


def db_connect_args(settings, url: str) -> Dict[str, Any]:
    if settings.DB_SSL and url.startswith("postgresql+asyncpg"):
        return {"ssl": "require"}
    return {}


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    # sqlite ignores ON DELETE CASCADE unless the pragma is on for every connection
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _fk_pragma(dbapi_conn, _conn_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


async def sync_schema(engine: AsyncEngine) -> None:
    """Create any missing tables for the registered models."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def check_connection(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
