"""Implementación SQL del repositorio de motos."""

from typing import Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.moto_repo import MotoRecord, MotoRepo
from app.infrastructure.db.tables import moto


class MotoRepoSQL(MotoRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _filtered(self, stmt, placa_contains: str | None):
        # Las placas se guardan ya normalizadas (sin espacios y en mayúsculas)
        if placa_contains:
            stmt = stmt.where(moto.c.placa.contains(placa_contains, autoescape=True))
        return stmt

    async def count(self, placa_contains: str | None = None) -> int:
        stmt = self._filtered(select(func.count()).select_from(moto), placa_contains)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_page(
        self, offset: int, limit: int, placa_contains: str | None = None
    ) -> Sequence[MotoRecord]:
        stmt = self._filtered(select(moto), placa_contains)
        stmt = stmt.order_by(moto.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, moto_id: int) -> MotoRecord | None:
        result = await self._session.execute(select(moto).where(moto.c.id == moto_id))
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def _value_taken(self, column, value: str, exclude_id: int | None) -> bool:
        stmt = select(moto.c.id).where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(moto.c.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.scalar() is not None

    async def placa_taken(self, placa: str, exclude_id: int | None = None) -> bool:
        return await self._value_taken(moto.c.placa, placa, exclude_id)

    async def chassi_taken(self, chassi: str, exclude_id: int | None = None) -> bool:
        return await self._value_taken(moto.c.chassi, chassi, exclude_id)

    async def any_referencing(
        self,
        *,
        zona_id: int | None = None,
        patio_id: int | None = None,
        status_id: int | None = None,
    ) -> bool:
        checks = [
            (moto.c.zona_id, zona_id),
            (moto.c.patio_id, patio_id),
            (moto.c.status_id, status_id),
        ]
        conditions = [column == value for column, value in checks if value is not None]
        if not conditions:
            raise ValueError("At least one reference id is required")
        result = await self._session.execute(select(moto.c.id).where(*conditions).limit(1))
        return result.scalar() is not None

    async def create(self, record: MotoRecord) -> MotoRecord:
        values = {"id": record.id, **self._record_values(record)}
        await self._session.execute(insert(moto).values(values))
        return record

    async def update(self, record: MotoRecord) -> MotoRecord:
        stmt = update(moto).where(moto.c.id == record.id).values(self._record_values(record))
        await self._session.execute(stmt)
        return record

    async def delete(self, moto_id: int) -> None:
        await self._session.execute(delete(moto).where(moto.c.id == moto_id))

    def _record_values(self, record: MotoRecord) -> dict:
        return {
            "placa": record.placa,
            "chassi": record.chassi,
            "qr_code": record.qr_code,
            "data_entrada": record.data_entrada,
            "previsao_entrega": record.previsao_entrega,
            "fotos": record.fotos,
            "zona_id": record.zona_id,
            "patio_id": record.patio_id,
            "status_id": record.status_id,
            "observacoes": record.observacoes,
        }

    def _row_to_record(self, row) -> MotoRecord:
        return MotoRecord(
            id=row["id"],
            placa=row["placa"],
            chassi=row["chassi"],
            qr_code=row.get("qr_code"),
            data_entrada=row["data_entrada"],
            previsao_entrega=row.get("previsao_entrega"),
            fotos=row.get("fotos"),
            zona_id=row["zona_id"],
            patio_id=row["patio_id"],
            status_id=row["status_id"],
            observacoes=row.get("observacoes"),
        )
