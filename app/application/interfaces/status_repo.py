"""Interface StatusRepo - Puerto para repositorio de status."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class StatusRecord:
    id: int
    nome: str
    status_grupo_id: int


class StatusRepo(ABC):
    TABLE = "status"

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> Sequence[StatusRecord]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_grupo(self, grupo_id: int) -> Sequence[StatusRecord]:
        raise NotImplementedError

    @abstractmethod
    async def any_in_grupo(self, grupo_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, status_id: int) -> StatusRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def get_many(self, status_ids: Iterable[int]) -> dict[int, StatusRecord]:
        raise NotImplementedError

    @abstractmethod
    async def exists(self, status_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: StatusRecord) -> StatusRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: StatusRecord) -> StatusRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, status_id: int) -> None:
        raise NotImplementedError
