import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from app.api.schemas.motos import MotoRequest, MotoResponse
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.moto_repo import MotoRecord, MotoRepo
from app.application.interfaces.patio_repo import PatioRepo
from app.application.interfaces.status_grupo_repo import StatusGrupoRepo
from app.application.interfaces.status_repo import StatusRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.zona_repo import ZonaRepo
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.application.use_cases.patios import patio_to_response
from app.application.use_cases.statuses import expand_statuses
from app.application.use_cases.zonas import zona_to_response
from app.domain.errors import NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text, normalize_code

logger = logging.getLogger(__name__)

NOT_FOUND = "Moto não encontrada"


@dataclass
class _MotoInput:
    placa: str
    chassi: str
    data_entrada: datetime
    zona_id: int
    patio_id: int
    status_id: int
    qr_code: str | None
    previsao_entrega: datetime | None
    fotos: str | None
    observacoes: str | None


class MotosUseCase:
    def __init__(
        self,
        moto_repo: MotoRepo,
        zona_repo: ZonaRepo,
        patio_repo: PatioRepo,
        status_repo: StatusRepo,
        status_grupo_repo: StatusGrupoRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._moto_repo = moto_repo
        self._zona_repo = zona_repo
        self._patio_repo = patio_repo
        self._status_repo = status_repo
        self._status_grupo_repo = status_grupo_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager

    async def _expand(self, records: Sequence[MotoRecord]) -> list[MotoResponse]:
        zonas = await self._zona_repo.get_many(r.zona_id for r in records)
        patios = await self._patio_repo.get_many(r.patio_id for r in records)
        status_records = await self._status_repo.get_many(r.status_id for r in records)
        statuses = {
            s.id: s
            for s in await expand_statuses(list(status_records.values()), self._status_grupo_repo)
        }

        responses = []
        for r in records:
            zona = zonas.get(r.zona_id)
            patio = patios.get(r.patio_id)
            responses.append(
                MotoResponse(
                    id=r.id,
                    placa=r.placa,
                    chassi=r.chassi,
                    qr_code=r.qr_code,
                    data_entrada=r.data_entrada,
                    previsao_entrega=r.previsao_entrega,
                    fotos=r.fotos,
                    zona_id=r.zona_id,
                    patio_id=r.patio_id,
                    status_id=r.status_id,
                    observacoes=r.observacoes,
                    zona=zona_to_response(zona) if zona else None,
                    patio=patio_to_response(patio) if patio else None,
                    status=statuses.get(r.status_id),
                )
            )
        return responses

    async def list_page(
        self, page: int | None, page_size: int | None, placa: str | None = None
    ) -> PageSlice[MotoResponse]:
        page, page_size = normalize_paging(page, page_size)
        placa_filter = normalize_code(placa)
        total = await self._moto_repo.count(placa_contains=placa_filter)
        records = await self._moto_repo.list_page(
            offset_for(page, page_size), page_size, placa_contains=placa_filter
        )
        items = await self._expand(records)
        return PageSlice(items=items, page=page, page_size=page_size, total=total)

    async def get(self, moto_id: int) -> MotoResponse:
        record = await self._moto_repo.get_by_id(moto_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, moto_id)
        return (await self._expand([record]))[0]

    async def _validated(self, request: MotoRequest, moto_id: int | None = None) -> _MotoInput:
        placa = normalize_code(request.placa)
        chassi = normalize_code(request.chassi)
        required = [
            (placa, "placa", "Placa é obrigatória."),
            (chassi, "chassi", "Chassi é obrigatório."),
            (request.data_entrada, "dataEntrada", "DataEntrada é obrigatória."),
            (request.zona_id, "zonaId", "ZonaId é obrigatório."),
            (request.patio_id, "patioId", "PatioId é obrigatório."),
            (request.status_id, "statusId", "StatusId é obrigatório."),
        ]
        for value, field, message in required:
            if value is None:
                raise ValidationFailedError(message, field=field)

        if not await self._zona_repo.exists(request.zona_id):
            raise ValidationFailedError("ZonaId inválido.", field="zonaId")
        if not await self._patio_repo.exists(request.patio_id):
            raise ValidationFailedError("PatioId inválido.", field="patioId")
        if not await self._status_repo.exists(request.status_id):
            raise ValidationFailedError("StatusId inválido.", field="statusId")

        if await self._moto_repo.placa_taken(placa, exclude_id=moto_id):
            raise ValidationFailedError("Placa já cadastrada.", field="placa")
        if await self._moto_repo.chassi_taken(chassi, exclude_id=moto_id):
            raise ValidationFailedError("Chassi já cadastrado.", field="chassi")

        return _MotoInput(
            placa=placa,
            chassi=chassi,
            data_entrada=request.data_entrada,
            zona_id=request.zona_id,
            patio_id=request.patio_id,
            status_id=request.status_id,
            qr_code=clean_text(request.qr_code),
            previsao_entrega=request.previsao_entrega,
            fotos=clean_text(request.fotos),
            observacoes=clean_text(request.observacoes),
        )

    async def create(self, request: MotoRequest) -> MotoResponse:
        async with self._transaction_manager.start():
            data = await self._validated(request)
            record = MotoRecord(
                id=await self._id_allocator.next_id(MotoRepo.TABLE),
                placa=data.placa,
                chassi=data.chassi,
                qr_code=data.qr_code,
                data_entrada=data.data_entrada,
                previsao_entrega=data.previsao_entrega,
                fotos=data.fotos,
                zona_id=data.zona_id,
                patio_id=data.patio_id,
                status_id=data.status_id,
                observacoes=data.observacoes,
            )
            await self._moto_repo.create(record)
            response = (await self._expand([record]))[0]

        logger.info("Moto created", extra={"moto_id": record.id, "placa": record.placa})
        return response

    async def update(self, moto_id: int, request: MotoRequest) -> MotoResponse:
        async with self._transaction_manager.start():
            record = await self._moto_repo.get_by_id(moto_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, moto_id)

            data = await self._validated(request, moto_id=moto_id)
            record.placa = data.placa
            record.chassi = data.chassi
            record.qr_code = data.qr_code
            record.data_entrada = data.data_entrada
            record.previsao_entrega = data.previsao_entrega
            record.fotos = data.fotos
            record.zona_id = data.zona_id
            record.patio_id = data.patio_id
            record.status_id = data.status_id
            record.observacoes = data.observacoes
            await self._moto_repo.update(record)
            response = (await self._expand([record]))[0]

        return response

    async def delete(self, moto_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._moto_repo.get_by_id(moto_id) is None:
                raise NotFoundError(NOT_FOUND, moto_id)
            await self._moto_repo.delete(moto_id)

        logger.info("Moto deleted", extra={"moto_id": moto_id})
