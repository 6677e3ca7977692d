import logging

from app.api.schemas.status import (
    StatusGrupoRequest,
    StatusGrupoResponse,
    StatusGrupoWithStatusResponse,
    StatusSimpleResponse,
)
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.status_grupo_repo import StatusGrupoRecord, StatusGrupoRepo
from app.application.interfaces.status_repo import StatusRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.domain.errors import ConflictWithDependentsError, NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text

logger = logging.getLogger(__name__)

NOT_FOUND = "Status grupo não encontrado"


def status_grupo_to_response(record: StatusGrupoRecord) -> StatusGrupoResponse:
    return StatusGrupoResponse(id=record.id, nome=record.nome)


def _validated_nome(request: StatusGrupoRequest) -> str:
    nome = clean_text(request.nome)
    if not nome:
        raise ValidationFailedError("Nome é obrigatório.", field="nome")
    return nome


class StatusGruposUseCase:
    def __init__(
        self,
        status_grupo_repo: StatusGrupoRepo,
        status_repo: StatusRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._status_grupo_repo = status_grupo_repo
        self._status_repo = status_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager

    async def list_page(
        self, page: int | None, page_size: int | None
    ) -> PageSlice[StatusGrupoResponse]:
        page, page_size = normalize_paging(page, page_size)
        total = await self._status_grupo_repo.count()
        records = await self._status_grupo_repo.list_page(offset_for(page, page_size), page_size)
        return PageSlice(
            items=[status_grupo_to_response(r) for r in records],
            page=page,
            page_size=page_size,
            total=total,
        )

    async def get(self, grupo_id: int) -> StatusGrupoWithStatusResponse:
        record = await self._status_grupo_repo.get_by_id(grupo_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, grupo_id)

        statuses = await self._status_repo.list_by_grupo(grupo_id)
        return StatusGrupoWithStatusResponse(
            id=record.id,
            nome=record.nome,
            statuses=[
                StatusSimpleResponse(id=s.id, nome=s.nome, status_grupo_id=s.status_grupo_id)
                for s in statuses
            ],
        )

    async def create(self, request: StatusGrupoRequest) -> StatusGrupoResponse:
        async with self._transaction_manager.start():
            nome = _validated_nome(request)
            record = StatusGrupoRecord(
                id=await self._id_allocator.next_id(StatusGrupoRepo.TABLE), nome=nome
            )
            await self._status_grupo_repo.create(record)

        logger.info("StatusGrupo created", extra={"status_grupo_id": record.id})
        return status_grupo_to_response(record)

    async def update(self, grupo_id: int, request: StatusGrupoRequest) -> StatusGrupoResponse:
        async with self._transaction_manager.start():
            record = await self._status_grupo_repo.get_by_id(grupo_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, grupo_id)

            record.nome = _validated_nome(request)
            await self._status_grupo_repo.update(record)

        return status_grupo_to_response(record)

    async def delete(self, grupo_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._status_grupo_repo.get_by_id(grupo_id) is None:
                raise NotFoundError(NOT_FOUND, grupo_id)
            if await self._status_repo.any_in_grupo(grupo_id):
                raise ConflictWithDependentsError(
                    "Não é possível remover status grupo que contém status."
                )
            await self._status_grupo_repo.delete(grupo_id)

        logger.info("StatusGrupo deleted", extra={"status_grupo_id": grupo_id})
