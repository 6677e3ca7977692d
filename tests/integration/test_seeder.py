"""Tests del seed inicial."""

from datetime import timedelta

import pytest
from sqlalchemy import select

from app.application.interfaces.clock import FakeClock
from app.infrastructure.db.seeder import motos_by_status, seed_database, table_counts
from app.infrastructure.db.tables import moto, usuario
from app.infrastructure.services import hash_password, verify_password

EXPECTED_COUNTS = {
    "usuario": 3,
    "zona": 5,
    "patio": 5,
    "status_grupo": 3,
    "status": 9,
    "moto": 15,
}


@pytest.mark.asyncio
async def test_seed_inserts_all_tables(db_session, fixed_now):
    inserted = await seed_database(db_session, FakeClock(fixed_now), hash_password)

    assert inserted is True
    assert await table_counts(db_session) == EXPECTED_COUNTS


@pytest.mark.asyncio
async def test_seed_is_idempotent(session_maker, fixed_now):
    clock = FakeClock(fixed_now)
    async with session_maker() as session:
        assert await seed_database(session, clock, hash_password) is True
    async with session_maker() as session:
        assert await seed_database(session, clock, hash_password) is False
        assert await table_counts(session) == EXPECTED_COUNTS


@pytest.mark.asyncio
async def test_seed_skips_when_any_usuario_exists(db_session, fixed_now):
    await db_session.execute(
        usuario.insert().values(id=1, usuario="existente", senha_hash=hash_password("x"))
    )
    await db_session.commit()

    assert await seed_database(db_session, FakeClock(fixed_now), hash_password) is False
    counts = await table_counts(db_session)
    assert counts["usuario"] == 1
    assert counts["moto"] == 0


@pytest.mark.asyncio
async def test_seeded_values(seeded_session, fixed_now):
    admin = (
        await seeded_session.execute(select(usuario).where(usuario.c.usuario == "admin"))
    ).mappings().one()
    assert verify_password("admin@123", admin["senha_hash"])

    rows = (await seeded_session.execute(select(moto).order_by(moto.c.id))).mappings().all()
    first, last = rows[0], rows[-1]
    assert first["placa"] == "ABC1D23"
    assert first["chassi"] == "9BWZZZ377VT004251"
    assert first["qr_code"] == "QR001"
    assert first["data_entrada"] == fixed_now - timedelta(days=30)
    assert first["previsao_entrega"] == fixed_now + timedelta(days=1)
    assert last["placa"] == "FGH3I45"
    assert last["chassi"] == "9BWZZZ377VT004265"
    assert last["previsao_entrega"] is None


@pytest.mark.asyncio
async def test_distribution_by_status(seeded_session):
    distribution = await motos_by_status(seeded_session)

    assert distribution[0] == ("Disponível", 5)
    assert sum(total for _, total in distribution) == 15
    assert dict(distribution)["Sinistro"] == 1
    assert "Furtado" not in dict(distribution)


@pytest.mark.asyncio
async def test_seed_failure_is_rolled_back_and_raised(db_session, fixed_now):
    def broken_hasher(plain: str) -> str:
        raise RuntimeError("hasher unavailable")

    with pytest.raises(RuntimeError):
        await seed_database(db_session, FakeClock(fixed_now), broken_hasher)

    assert (await table_counts(db_session))["usuario"] == 0
