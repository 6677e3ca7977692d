import logging

from app.api.schemas.zonas import ZonaRequest, ZonaResponse
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.moto_repo import MotoRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.zona_repo import ZonaRecord, ZonaRepo
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.domain.errors import ConflictWithDependentsError, NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text, normalize_code

logger = logging.getLogger(__name__)

NOT_FOUND = "Zona não encontrada"
INVALID_PAYLOAD = "Nome obrigatório e Letra deve ter exatamente 1 caractere."


def zona_to_response(record: ZonaRecord) -> ZonaResponse:
    return ZonaResponse(id=record.id, nome=record.nome, letra=record.letra)


def _validated(request: ZonaRequest) -> tuple[str, str]:
    nome = clean_text(request.nome)
    letra = normalize_code(request.letra)
    if not nome or not letra or len(letra) != 1:
        raise ValidationFailedError(INVALID_PAYLOAD)
    return nome, letra


class ZonasUseCase:
    def __init__(
        self,
        zona_repo: ZonaRepo,
        moto_repo: MotoRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._zona_repo = zona_repo
        self._moto_repo = moto_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager

    async def list_page(self, page: int | None, page_size: int | None) -> PageSlice[ZonaResponse]:
        page, page_size = normalize_paging(page, page_size)
        total = await self._zona_repo.count()
        records = await self._zona_repo.list_page(offset_for(page, page_size), page_size)
        return PageSlice(
            items=[zona_to_response(r) for r in records], page=page, page_size=page_size, total=total
        )

    async def get(self, zona_id: int) -> ZonaResponse:
        record = await self._zona_repo.get_by_id(zona_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, zona_id)
        return zona_to_response(record)

    async def create(self, request: ZonaRequest) -> ZonaResponse:
        async with self._transaction_manager.start():
            nome, letra = _validated(request)
            record = ZonaRecord(
                id=await self._id_allocator.next_id(ZonaRepo.TABLE), nome=nome, letra=letra
            )
            await self._zona_repo.create(record)

        logger.info("Zona created", extra={"zona_id": record.id, "letra": record.letra})
        return zona_to_response(record)

    async def update(self, zona_id: int, request: ZonaRequest) -> ZonaResponse:
        async with self._transaction_manager.start():
            record = await self._zona_repo.get_by_id(zona_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, zona_id)

            record.nome, record.letra = _validated(request)
            await self._zona_repo.update(record)

        return zona_to_response(record)

    async def delete(self, zona_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._zona_repo.get_by_id(zona_id) is None:
                raise NotFoundError(NOT_FOUND, zona_id)
            if await self._moto_repo.any_referencing(zona_id=zona_id):
                raise ConflictWithDependentsError(
                    "Não é possível remover zona com motos associadas."
                )
            await self._zona_repo.delete(zona_id)

        logger.info("Zona deleted", extra={"zona_id": zona_id})
