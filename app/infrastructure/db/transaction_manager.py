import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.transaction_manager import TransactionManager

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionManager(TransactionManager):
    """
    Abre una transacción por create/update/delete sobre la sesión del request.

    Si la sesión ya tiene una transacción abierta (por ejemplo la del seeder
    o la de un test) se reutiliza y el commit queda a cargo de quien la abrió.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            yield
            return
        try:
            async with self._session.begin():
                yield
        except Exception:
            logger.debug("Transaction rolled back", exc_info=True)
            raise
