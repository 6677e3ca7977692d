"""Interface IdAllocator - Puerto para asignar ids numéricos en los create."""

from abc import ABC, abstractmethod


class IdAllocator(ABC):
    """
    Calcula el próximo id de una tabla como max(id) + 1 (o 1 si está vacía).

    No reserva nada: dos creates concurrentes sobre la misma tabla pueden
    obtener el mismo valor y la primary key rechaza el segundo insert.
    """

    @abstractmethod
    async def next_id(self, table_name: str) -> int:
        raise NotImplementedError
