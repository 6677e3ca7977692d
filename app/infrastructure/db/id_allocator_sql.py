from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.id_allocator import IdAllocator
from app.infrastructure.db.tables import metadata


class IdAllocatorSQL(IdAllocator):
    """SELECT COALESCE(MAX(id), 0) + 1 sobre la tabla pedida, dentro de la transacción del caller."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def next_id(self, table_name: str) -> int:
        table = metadata.tables[table_name]
        stmt = select(func.coalesce(func.max(table.c.id), 0) + 1)
        result = await self._session.execute(stmt)
        value = result.scalar()
        return int(value) if value is not None else 1
