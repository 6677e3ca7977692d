from typing import Annotated, AsyncGenerator

from fastapi import Path, Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.api.schemas.common import DB_INT_MAX, DB_INT_MIN
from app.config import Settings

# Ids de ruta limitados al rango de la columna; fuera de él responden 400
EntityId = Annotated[int, Path(ge=DB_INT_MIN, le=DB_INT_MAX)]


def build_engine(settings: Settings) -> AsyncEngine:
    url = settings.database_url
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or "mode=memory" in url:
            # Una sola conexión compartida: cada conexión nueva sería otra base vacía
            options["poolclass"] = StaticPool
        engine = create_async_engine(url, echo=settings.sql_echo, **options)

        @event.listens_for(engine.sync_engine, "connect")
        def _fk_pragma(dbapi_conn, conn_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_async_engine(
        url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_maker() as session:
        yield session


def get_base_url(request: Request) -> str:
    """Esquema y host del request, base de los enlaces de paginación."""
    return str(request.base_url).rstrip("/")
