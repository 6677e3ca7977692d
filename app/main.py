import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from app.api.deps import build_engine, build_sessionmaker
from app.api.routers.health import router as health_router
from app.api.routers.motos import router as motos_router
from app.api.routers.patios import router as patios_router
from app.api.routers.status_grupos import router as status_grupos_router
from app.api.routers.statuses import router as statuses_router
from app.api.routers.usuarios import router as usuarios_router
from app.api.routers.zonas import router as zonas_router
from app.config import get_settings
from app.domain.errors import (
    ConflictWithDependentsError,
    DomainError,
    NotFoundError,
    ValidationFailedError,
)
from app.infrastructure.db.seeder import seed_database
from app.infrastructure.db.tables import metadata
from app.infrastructure.services import ClockImpl, hash_password

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_maker = build_sessionmaker(engine)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    if settings.seed_on_startup:
        try:
            async with app.state.session_maker() as session:
                await seed_database(session, ClockImpl(), hash_password)
        except Exception:
            # La API sigue levantando aunque el seed falle
            logger.error("Startup seeding failed, continuing without seed data")

    yield

    await engine.dispose()


app = FastAPI(
    title=get_settings().app_title,
    version=get_settings().app_version,
    description="API de gestão de motos, zonas, pátios e status da Mottu.",
    lifespan=lifespan
)


def _error_body(exc: DomainError) -> dict:
    return {"message": exc.message}


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content=_error_body(exc))


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(request: Request, exc: ValidationFailedError):
    return JSONResponse(status_code=400, content=_error_body(exc))


@app.exception_handler(ConflictWithDependentsError)
async def conflict_handler(request: Request, exc: ConflictWithDependentsError):
    logger.info(
        "Delete blocked by dependents",
        extra={"path": request.url.path, "reason": exc.message},
    )
    return JSONResponse(status_code=400, content=_error_body(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Cuerpos o parámetros mal formados devuelven 400 con el mismo formato {message}."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=400, content={"message": "; ".join(details) or "Requisição inválida."})


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handler global para no exponer stack traces al cliente.

    El error completo se registra con un error_id que también se devuelve
    en la respuesta para poder correlacionarlo.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "Ocorreu um erro inesperado. Informe o error_id ao suporte se o problema persistir."
        }
    )


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")


app.include_router(health_router, tags=["Health"])
app.include_router(usuarios_router, tags=["Usuarios"])
app.include_router(zonas_router, tags=["Zonas"])
app.include_router(patios_router, tags=["Patios"])
app.include_router(status_grupos_router, tags=["StatusGrupos"])
app.include_router(statuses_router, tags=["Statuses"])
app.include_router(motos_router, tags=["Motos"])
