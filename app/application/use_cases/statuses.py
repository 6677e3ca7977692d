import logging
from typing import Sequence

from app.api.schemas.status import StatusRequest, StatusResponse
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.moto_repo import MotoRepo
from app.application.interfaces.status_grupo_repo import StatusGrupoRecord, StatusGrupoRepo
from app.application.interfaces.status_repo import StatusRecord, StatusRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.application.use_cases.status_grupos import status_grupo_to_response
from app.domain.errors import ConflictWithDependentsError, NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text

logger = logging.getLogger(__name__)

NOT_FOUND = "Status não encontrado"


def status_to_response(record: StatusRecord, grupo: StatusGrupoRecord | None) -> StatusResponse:
    return StatusResponse(
        id=record.id,
        nome=record.nome,
        status_grupo_id=record.status_grupo_id,
        status_grupo=status_grupo_to_response(grupo) if grupo else None,
    )


async def expand_statuses(
    records: Sequence[StatusRecord], status_grupo_repo: StatusGrupoRepo
) -> list[StatusResponse]:
    """Carga los grupos de una sola vez y arma cada status con su grupo embebido."""
    grupos = await status_grupo_repo.get_many(r.status_grupo_id for r in records)
    return [status_to_response(r, grupos.get(r.status_grupo_id)) for r in records]


class StatusesUseCase:
    def __init__(
        self,
        status_repo: StatusRepo,
        status_grupo_repo: StatusGrupoRepo,
        moto_repo: MotoRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._status_repo = status_repo
        self._status_grupo_repo = status_grupo_repo
        self._moto_repo = moto_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager

    async def list_page(self, page: int | None, page_size: int | None) -> PageSlice[StatusResponse]:
        page, page_size = normalize_paging(page, page_size)
        total = await self._status_repo.count()
        records = await self._status_repo.list_page(offset_for(page, page_size), page_size)
        items = await expand_statuses(records, self._status_grupo_repo)
        return PageSlice(items=items, page=page, page_size=page_size, total=total)

    async def get(self, status_id: int) -> StatusResponse:
        record = await self._status_repo.get_by_id(status_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, status_id)
        grupo = await self._status_grupo_repo.get_by_id(record.status_grupo_id)
        return status_to_response(record, grupo)

    async def _validated(self, request: StatusRequest) -> tuple[str, int]:
        nome = clean_text(request.nome)
        if not nome:
            raise ValidationFailedError("Nome é obrigatório.", field="nome")
        if request.status_grupo_id is None or not await self._status_grupo_repo.exists(
            request.status_grupo_id
        ):
            raise ValidationFailedError("StatusGrupoId inválido.", field="statusGrupoId")
        return nome, request.status_grupo_id

    async def create(self, request: StatusRequest) -> StatusResponse:
        async with self._transaction_manager.start():
            nome, grupo_id = await self._validated(request)
            record = StatusRecord(
                id=await self._id_allocator.next_id(StatusRepo.TABLE),
                nome=nome,
                status_grupo_id=grupo_id,
            )
            await self._status_repo.create(record)
            grupo = await self._status_grupo_repo.get_by_id(grupo_id)

        logger.info("Status created", extra={"status_id": record.id, "status_grupo_id": grupo_id})
        return status_to_response(record, grupo)

    async def update(self, status_id: int, request: StatusRequest) -> StatusResponse:
        async with self._transaction_manager.start():
            record = await self._status_repo.get_by_id(status_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, status_id)

            record.nome, record.status_grupo_id = await self._validated(request)
            await self._status_repo.update(record)
            grupo = await self._status_grupo_repo.get_by_id(record.status_grupo_id)

        return status_to_response(record, grupo)

    async def delete(self, status_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._status_repo.get_by_id(status_id) is None:
                raise NotFoundError(NOT_FOUND, status_id)
            if await self._moto_repo.any_referencing(status_id=status_id):
                raise ConflictWithDependentsError(
                    "Não é possível remover status com motos associadas."
                )
            await self._status_repo.delete(status_id)

        logger.info("Status deleted", extra={"status_id": status_id})
