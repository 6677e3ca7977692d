"""Implementación SQL del repositorio de patios."""

from typing import Iterable, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.patio_repo import PatioRecord, PatioRepo
from app.infrastructure.db.tables import patio


class PatioRepoSQL(PatioRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(patio))
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> Sequence[PatioRecord]:
        stmt = select(patio).order_by(patio.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, patio_id: int) -> PatioRecord | None:
        result = await self._session.execute(select(patio).where(patio.c.id == patio_id))
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def get_many(self, patio_ids: Iterable[int]) -> dict[int, PatioRecord]:
        ids = set(patio_ids)
        if not ids:
            return {}
        result = await self._session.execute(select(patio).where(patio.c.id.in_(ids)))
        return {row["id"]: self._row_to_record(row) for row in result.mappings().all()}

    async def exists(self, patio_id: int) -> bool:
        result = await self._session.execute(
            select(patio.c.id).where(patio.c.id == patio_id).limit(1)
        )
        return result.scalar() is not None

    async def create(self, record: PatioRecord) -> PatioRecord:
        await self._session.execute(insert(patio).values(id=record.id, nome=record.nome))
        return record

    async def update(self, record: PatioRecord) -> PatioRecord:
        await self._session.execute(
            update(patio).where(patio.c.id == record.id).values(nome=record.nome)
        )
        return record

    async def delete(self, patio_id: int) -> None:
        await self._session.execute(delete(patio).where(patio.c.id == patio_id))

    def _row_to_record(self, row) -> PatioRecord:
        return PatioRecord(id=row["id"], nome=row["nome"])
