"""Interface UsuarioRepo - Puerto para repositorio de usuarios."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass
class UsuarioRecord:
    id: int
    usuario: str
    senha_hash: str


class UsuarioRepo(ABC):
    TABLE = "usuario"

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> Sequence[UsuarioRecord]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, usuario_id: int) -> UsuarioRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def username_taken(self, usuario_name: str, exclude_id: int | None = None) -> bool:
        """True si otro usuario (distinto de exclude_id) ya usa ese nombre."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: UsuarioRecord) -> UsuarioRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: UsuarioRecord) -> UsuarioRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, usuario_id: int) -> None:
        raise NotImplementedError
