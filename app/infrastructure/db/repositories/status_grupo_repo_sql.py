"""Implementación SQL del repositorio de grupos de status."""

from typing import Iterable, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.status_grupo_repo import StatusGrupoRecord, StatusGrupoRepo
from app.infrastructure.db.tables import status_grupo


class StatusGrupoRepoSQL(StatusGrupoRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(status_grupo))
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> Sequence[StatusGrupoRecord]:
        stmt = select(status_grupo).order_by(status_grupo.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, grupo_id: int) -> StatusGrupoRecord | None:
        result = await self._session.execute(
            select(status_grupo).where(status_grupo.c.id == grupo_id)
        )
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def get_many(self, grupo_ids: Iterable[int]) -> dict[int, StatusGrupoRecord]:
        ids = set(grupo_ids)
        if not ids:
            return {}
        result = await self._session.execute(
            select(status_grupo).where(status_grupo.c.id.in_(ids))
        )
        return {row["id"]: self._row_to_record(row) for row in result.mappings().all()}

    async def exists(self, grupo_id: int) -> bool:
        result = await self._session.execute(
            select(status_grupo.c.id).where(status_grupo.c.id == grupo_id).limit(1)
        )
        return result.scalar() is not None

    async def create(self, record: StatusGrupoRecord) -> StatusGrupoRecord:
        await self._session.execute(insert(status_grupo).values(id=record.id, nome=record.nome))
        return record

    async def update(self, record: StatusGrupoRecord) -> StatusGrupoRecord:
        await self._session.execute(
            update(status_grupo).where(status_grupo.c.id == record.id).values(nome=record.nome)
        )
        return record

    async def delete(self, grupo_id: int) -> None:
        await self._session.execute(delete(status_grupo).where(status_grupo.c.id == grupo_id))

    def _row_to_record(self, row) -> StatusGrupoRecord:
        return StatusGrupoRecord(id=row["id"], nome=row["nome"])
