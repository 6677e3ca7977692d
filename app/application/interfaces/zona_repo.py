"""Interface ZonaRepo - Puerto para repositorio de zonas."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class ZonaRecord:
    id: int
    nome: str
    letra: str


class ZonaRepo(ABC):
    TABLE = "zona"

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> Sequence[ZonaRecord]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, zona_id: int) -> ZonaRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def get_many(self, zona_ids: Iterable[int]) -> dict[int, ZonaRecord]:
        raise NotImplementedError

    @abstractmethod
    async def exists(self, zona_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: ZonaRecord) -> ZonaRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: ZonaRecord) -> ZonaRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, zona_id: int) -> None:
        raise NotImplementedError
