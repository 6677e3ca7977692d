"""Interface MotoRepo - Puerto para repositorio de motos."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence


@dataclass
class MotoRecord:
    id: int
    placa: str
    chassi: str
    data_entrada: datetime
    zona_id: int
    patio_id: int
    status_id: int
    qr_code: str | None = None
    previsao_entrega: datetime | None = None
    fotos: str | None = None
    observacoes: str | None = None


class MotoRepo(ABC):
    TABLE = "moto"

    @abstractmethod
    async def count(self, placa_contains: str | None = None) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_page(
        self, offset: int, limit: int, placa_contains: str | None = None
    ) -> Sequence[MotoRecord]:
        """Lista ordenada por id; placa_contains (ya normalizado) filtra por substring de la placa guardada."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, moto_id: int) -> MotoRecord | None:
        raise NotImplementedError

    @abstractmethod
    async def placa_taken(self, placa: str, exclude_id: int | None = None) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def chassi_taken(self, chassi: str, exclude_id: int | None = None) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def any_referencing(
        self,
        *,
        zona_id: int | None = None,
        patio_id: int | None = None,
        status_id: int | None = None,
    ) -> bool:
        """True si alguna moto apunta a la zona, patio o status indicado."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, record: MotoRecord) -> MotoRecord:
        raise NotImplementedError

    @abstractmethod
    async def update(self, record: MotoRecord) -> MotoRecord:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, moto_id: int) -> None:
        raise NotImplementedError
