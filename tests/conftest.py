"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Engine y sesiones sobre SQLite in-memory (tests de repositorios, seeder y casos de uso)
- Cliente HTTP de prueba (FastAPI TestClient) con base poblada o vacía
- Payloads de ejemplo
"""

import os
from datetime import datetime
from typing import AsyncGenerator, Generator

# La app lee la configuración al importarse: apuntar a una base en memoria antes
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
# Coste mínimo de bcrypt para que el seed de cada cliente sea rápido
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from app.api.deps import build_engine, build_sessionmaker  # noqa: E402
from app.application.interfaces.clock import FakeClock  # noqa: E402
from app.config import Settings, get_settings  # noqa: E402
from app.infrastructure.db.seeder import seed_database  # noqa: E402
from app.infrastructure.db.tables import metadata  # noqa: E402
from app.infrastructure.services import hash_password  # noqa: E402
from app.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Engine in-memory con las tablas creadas; cada test recibe una base nueva."""
    engine = build_engine(Settings(database_url=TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(test_engine)


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Sesión sobre una base vacía."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """
    Sesión sobre una base con los datos iniciales.

    El seed usa su propia sesión para que la del test empiece sin
    transacción abierta, igual que la de un request.
    """
    async with session_maker() as session:
        await seed_database(session, FakeClock(FIXED_NOW), hash_password)

    async with session_maker() as session:
        yield session


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

def _client_with_seed(monkeypatch, seed: bool) -> Generator[TestClient, None, None]:
    monkeypatch.setenv("SEED_ON_STARTUP", "true" if seed else "false")
    get_settings.cache_clear()

    # El lifespan crea un engine (y una base in-memory) por cada cliente
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def client(monkeypatch) -> Generator[TestClient, None, None]:
    """TestClient con la base poblada por el seed de arranque."""
    yield from _client_with_seed(monkeypatch, seed=True)


@pytest.fixture
def empty_client(monkeypatch) -> Generator[TestClient, None, None]:
    """TestClient con las tablas creadas y sin datos."""
    yield from _client_with_seed(monkeypatch, seed=False)


# ============================================================================
# FIXTURES DE DATOS DE PRUEBA
# ============================================================================

@pytest.fixture
def sample_moto_payload() -> dict:
    return {
        "placa": "new1a23",
        "chassi": "9bwzzz377vt009999",
        "qrCode": "QR100",
        "dataEntrada": "2025-03-01T10:00:00",
        "zonaId": 1,
        "patioId": 1,
        "statusId": 1,
        "observacoes": "Honda CG 160 - recém chegada",
    }
