"""Interface PatioRepo - Puerto para repositorio de patios."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class PatioRecord:
    id: int
    nome: str


class PatioRepo(ABC):
    TABLE = "patio"

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> Sequence[PatioRecord]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, patio_id: int) -> PatioRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def get_many(self, patio_ids: Iterable[int]) -> dict[int, PatioRecord]:
        raise NotImplementedError

    @abstractmethod
    async def exists(self, patio_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: PatioRecord) -> PatioRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: PatioRecord) -> PatioRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, patio_id: int) -> None:
        raise NotImplementedError
