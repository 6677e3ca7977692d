"""Implementación SQL del repositorio de zonas."""

from typing import Iterable, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.zona_repo import ZonaRecord, ZonaRepo
from app.infrastructure.db.tables import zona


class ZonaRepoSQL(ZonaRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(zona))
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> Sequence[ZonaRecord]:
        stmt = select(zona).order_by(zona.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, zona_id: int) -> ZonaRecord | None:
        result = await self._session.execute(select(zona).where(zona.c.id == zona_id))
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def get_many(self, zona_ids: Iterable[int]) -> dict[int, ZonaRecord]:
        ids = set(zona_ids)
        if not ids:
            return {}
        result = await self._session.execute(select(zona).where(zona.c.id.in_(ids)))
        return {row["id"]: self._row_to_record(row) for row in result.mappings().all()}

    async def exists(self, zona_id: int) -> bool:
        result = await self._session.execute(select(zona.c.id).where(zona.c.id == zona_id).limit(1))
        return result.scalar() is not None

    async def create(self, record: ZonaRecord) -> ZonaRecord:
        await self._session.execute(
            insert(zona).values(id=record.id, nome=record.nome, letra=record.letra)
        )
        return record

    async def update(self, record: ZonaRecord) -> ZonaRecord:
        stmt = update(zona).where(zona.c.id == record.id).values(nome=record.nome, letra=record.letra)
        await self._session.execute(stmt)
        return record

    async def delete(self, zona_id: int) -> None:
        await self._session.execute(delete(zona).where(zona.c.id == zona_id))

    def _row_to_record(self, row) -> ZonaRecord:
        return ZonaRecord(id=row["id"], nome=row["nome"], letra=row["letra"])
