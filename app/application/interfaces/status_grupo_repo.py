"""Interface StatusGrupoRepo - Puerto para repositorio de grupos de status."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class StatusGrupoRecord:
    id: int
    nome: str


class StatusGrupoRepo(ABC):
    TABLE = "status_grupo"

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> Sequence[StatusGrupoRecord]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, grupo_id: int) -> StatusGrupoRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def get_many(self, grupo_ids: Iterable[int]) -> dict[int, StatusGrupoRecord]:
        raise NotImplementedError

    @abstractmethod
    async def exists(self, grupo_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: StatusGrupoRecord) -> StatusGrupoRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: StatusGrupoRecord) -> StatusGrupoRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, grupo_id: int) -> None:
        raise NotImplementedError
