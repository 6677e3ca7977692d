"""Implementación SQL del repositorio de usuarios."""

from typing import Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.usuario_repo import UsuarioRecord, UsuarioRepo
from app.infrastructure.db.tables import usuario


class UsuarioRepoSQL(UsuarioRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(usuario))
        return result.scalar_one()

    async def list_page(self, offset: int, limit: int) -> Sequence[UsuarioRecord]:
        stmt = select(usuario).order_by(usuario.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._row_to_record(row) for row in result.mappings().all()]

    async def get_by_id(self, usuario_id: int) -> UsuarioRecord | None:
        stmt = select(usuario).where(usuario.c.id == usuario_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_record(row)

    async def username_taken(self, usuario_name: str, exclude_id: int | None = None) -> bool:
        stmt = select(usuario.c.id).where(usuario.c.usuario == usuario_name)
        if exclude_id is not None:
            stmt = stmt.where(usuario.c.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.scalar() is not None

    async def create(self, record: UsuarioRecord) -> UsuarioRecord:
        values = {
            "id": record.id,
            "usuario": record.usuario,
            "senha_hash": record.senha_hash,
        }
        await self._session.execute(insert(usuario).values(values))
        return record

    async def update(self, record: UsuarioRecord) -> UsuarioRecord:
        stmt = (
            update(usuario)
            .where(usuario.c.id == record.id)
            .values(usuario=record.usuario, senha_hash=record.senha_hash)
        )
        await self._session.execute(stmt)
        return record

    async def delete(self, usuario_id: int) -> None:
        await self._session.execute(delete(usuario).where(usuario.c.id == usuario_id))

    def _row_to_record(self, row) -> UsuarioRecord:
        return UsuarioRecord(id=row["id"], usuario=row["usuario"], senha_hash=row["senha_hash"])
