from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Unidad de trabajo de una operación de escritura: commit al salir, rollback si hay excepción."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
