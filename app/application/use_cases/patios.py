import logging

from app.api.schemas.patios import PatioRequest, PatioResponse
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.moto_repo import MotoRepo
from app.application.interfaces.patio_repo import PatioRecord, PatioRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.domain.errors import ConflictWithDependentsError, NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text

logger = logging.getLogger(__name__)

NOT_FOUND = "Pátio não encontrado"


def patio_to_response(record: PatioRecord) -> PatioResponse:
    return PatioResponse(id=record.id, nome=record.nome)


def _validated_nome(request: PatioRequest) -> str:
    nome = clean_text(request.nome)
    if not nome:
        raise ValidationFailedError("Nome é obrigatório.", field="nome")
    return nome


class PatiosUseCase:
    def __init__(
        self,
        patio_repo: PatioRepo,
        moto_repo: MotoRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._patio_repo = patio_repo
        self._moto_repo = moto_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager

    async def list_page(self, page: int | None, page_size: int | None) -> PageSlice[PatioResponse]:
        page, page_size = normalize_paging(page, page_size)
        total = await self._patio_repo.count()
        records = await self._patio_repo.list_page(offset_for(page, page_size), page_size)
        return PageSlice(
            items=[patio_to_response(r) for r in records], page=page, page_size=page_size, total=total
        )

    async def get(self, patio_id: int) -> PatioResponse:
        record = await self._patio_repo.get_by_id(patio_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, patio_id)
        return patio_to_response(record)

    async def create(self, request: PatioRequest) -> PatioResponse:
        async with self._transaction_manager.start():
            nome = _validated_nome(request)
            record = PatioRecord(id=await self._id_allocator.next_id(PatioRepo.TABLE), nome=nome)
            await self._patio_repo.create(record)

        logger.info("Patio created", extra={"patio_id": record.id})
        return patio_to_response(record)

    async def update(self, patio_id: int, request: PatioRequest) -> PatioResponse:
        async with self._transaction_manager.start():
            record = await self._patio_repo.get_by_id(patio_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, patio_id)

            record.nome = _validated_nome(request)
            await self._patio_repo.update(record)

        return patio_to_response(record)

    async def delete(self, patio_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._patio_repo.get_by_id(patio_id) is None:
                raise NotFoundError(NOT_FOUND, patio_id)
            if await self._moto_repo.any_referencing(patio_id=patio_id):
                raise ConflictWithDependentsError(
                    "Não é possível remover pátio com motos associadas."
                )
            await self._patio_repo.delete(patio_id)

        logger.info("Patio deleted", extra={"patio_id": patio_id})
