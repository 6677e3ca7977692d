"""
Tests de los casos de uso sobre SQLite in-memory.

Cada escritura corre en su propia transacción: si la validación falla
no queda nada a medio escribir.
"""

from datetime import datetime

import pytest

from app.api.dependencies import (
    get_motos_use_case,
    get_status_grupos_use_case,
    get_usuarios_use_case,
    get_zonas_use_case,
)
from app.api.schemas.motos import MotoRequest
from app.api.schemas.status import StatusGrupoRequest
from app.api.schemas.usuarios import UsuarioRequest
from app.api.schemas.zonas import ZonaRequest
from app.domain.errors import ConflictWithDependentsError, NotFoundError, ValidationFailedError
from app.infrastructure.db.seeder import table_counts


def _moto(**overrides) -> MotoRequest:
    data = {
        "placa": "NEW1A23",
        "chassi": "9BWZZZ377VT009999",
        "data_entrada": datetime(2025, 3, 1, 10, 0),
        "zona_id": 1,
        "patio_id": 1,
        "status_id": 1,
    }
    data.update(overrides)
    return MotoRequest(**data)


@pytest.mark.asyncio
async def test_create_commits_and_allocates_next_id(seeded_session, session_maker):
    created = await get_zonas_use_case(seeded_session).create(ZonaRequest(nome=" Zona Sudeste ", letra="e"))

    assert created.id == 6
    assert created.nome == "Zona Sudeste"
    assert created.letra == "E"

    async with session_maker() as other:
        assert (await get_zonas_use_case(other).get(6)).letra == "E"


@pytest.mark.asyncio
async def test_failed_create_leaves_no_rows(seeded_session):
    use_case = get_motos_use_case(seeded_session)

    with pytest.raises(ValidationFailedError) as exc:
        await use_case.create(_moto(placa=" abc1d23 "))

    assert exc.value.message == "Placa já cadastrada."
    assert (await table_counts(seeded_session))["moto"] == 15


@pytest.mark.asyncio
async def test_sequential_creates_get_consecutive_ids(seeded_session):
    use_case = get_usuarios_use_case(seeded_session)

    first = await use_case.create(UsuarioRequest(usuario="ana", senha="1"))
    second = await use_case.create(UsuarioRequest(usuario="bia", senha="2"))

    assert (first.id, second.id) == (4, 5)


@pytest.mark.asyncio
async def test_moto_validation_order(seeded_session):
    use_case = get_motos_use_case(seeded_session)

    # campo obligatorio antes que FK
    with pytest.raises(ValidationFailedError) as exc:
        await use_case.create(_moto(placa="  ", zona_id=99))
    assert exc.value.message == "Placa é obrigatória."

    # FK antes que unicidad
    with pytest.raises(ValidationFailedError) as exc:
        await use_case.create(_moto(placa="ABC1D23", zona_id=99))
    assert exc.value.message == "ZonaId inválido."

    with pytest.raises(ValidationFailedError) as exc:
        await use_case.create(_moto(chassi="9bwzzz377vt004252"))
    assert exc.value.message == "Chassi já cadastrado."


@pytest.mark.asyncio
async def test_update_missing_target_is_not_found_before_validation(seeded_session):
    use_case = get_motos_use_case(seeded_session)

    with pytest.raises(NotFoundError):
        await use_case.update(999, MotoRequest())


@pytest.mark.asyncio
async def test_update_keeps_own_plate(seeded_session):
    use_case = get_motos_use_case(seeded_session)

    updated = await use_case.update(
        1, _moto(placa="abc1d23", chassi="9BWZZZ377VT004251", status_id=2, observacoes="  ")
    )

    assert updated.placa == "ABC1D23"
    assert updated.status_id == 2
    assert updated.status.nome == "Em Uso"
    assert updated.observacoes is None


@pytest.mark.asyncio
async def test_delete_blocked_by_dependents(seeded_session):
    with pytest.raises(ConflictWithDependentsError):
        await get_zonas_use_case(seeded_session).delete(1)

    with pytest.raises(ConflictWithDependentsError):
        await get_status_grupos_use_case(seeded_session).delete(3)

    assert (await table_counts(seeded_session))["zona"] == 5


@pytest.mark.asyncio
async def test_delete_empty_status_grupo(seeded_session):
    use_case = get_status_grupos_use_case(seeded_session)
    grupo = await use_case.create(StatusGrupoRequest(nome="Temporário"))

    await use_case.delete(grupo.id)

    with pytest.raises(NotFoundError):
        await use_case.get(grupo.id)
