"""Implementación SQL del repositorio de status."""

from typing import Iterable, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.status_repo import StatusRecord, StatusRepo
from app.infrastructure.db.tables import status


class StatusRepoSQL(StatusRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(status))
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> Sequence[StatusRecord]:
        stmt = select(status).order_by(status.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def list_by_grupo(self, grupo_id: int) -> Sequence[StatusRecord]:
        stmt = select(status).where(status.c.status_grupo_id == grupo_id).order_by(status.c.id)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def any_in_grupo(self, grupo_id: int) -> bool:
        result = await self._session.execute(
            select(status.c.id).where(status.c.status_grupo_id == grupo_id).limit(1)
        )
        return result.scalar() is not None

    async def get_by_id(self, status_id: int) -> StatusRecord | None:
        result = await self._session.execute(select(status).where(status.c.id == status_id))
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def get_many(self, status_ids: Iterable[int]) -> dict[int, StatusRecord]:
        ids = set(status_ids)
        if not ids:
            return {}
        result = await self._session.execute(select(status).where(status.c.id.in_(ids)))
        return {row["id"]: self._row_to_record(row) for row in result.mappings().all()}

    async def exists(self, status_id: int) -> bool:
        result = await self._session.execute(
            select(status.c.id).where(status.c.id == status_id).limit(1)
        )
        return result.scalar() is not None

    async def create(self, record: StatusRecord) -> StatusRecord:
        values = {
            "id": record.id,
            "nome": record.nome,
            "status_grupo_id": record.status_grupo_id,
        }
        await self._session.execute(insert(status).values(values))
        return record

    async def update(self, record: StatusRecord) -> StatusRecord:
        stmt = (
            update(status)
            .where(status.c.id == record.id)
            .values(nome=record.nome, status_grupo_id=record.status_grupo_id)
        )
        await self._session.execute(stmt)
        return record

    async def delete(self, status_id: int) -> None:
        await self._session.execute(delete(status).where(status.c.id == status_id))

    def _row_to_record(self, row) -> StatusRecord:
        return StatusRecord(
            id=row["id"],
            nome=row["nome"],
            status_grupo_id=row["status_grupo_id"],
        )
