"""
Endpoints de salud para monitoreo y orquestación.

- /health y /health/live: liveness, siempre 200 si el proceso responde.
- /health/db: conectividad con la base de datos.
- /health/ready: readiness, 503 mientras la base no responda.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "mottu-vision-api"


async def _database_ok(session: AsyncSession) -> bool:
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return False
    return True


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias de /health para orquestadores que esperan /health/live."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession = Depends(get_db_session)):
    if not await _database_ok(session):
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "component": "database",
                "error": "Database connection failed",
            },
        )
    return {"status": "healthy", "component": "database"}


@router.get("/health/ready")
async def health_check_ready(session: AsyncSession = Depends(get_db_session)):
    """
    Readiness: la aplicación acepta tráfico cuando la base responde.

    Devuelve 503 con el detalle de cada check si alguno falla.
    """
    if not await _database_ok(session):
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "checks": {"database": "unhealthy"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
