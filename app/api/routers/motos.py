from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_motos_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.motos import MotoRequest, MotoResponse
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.motos import MotosUseCase

BASE_PATH = "/api/motos"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[MotoResponse],
    response_model_exclude_none=True,
    summary="Lista motos (paginado)",
    description="Filtro opcional por placa (contém, sem diferenciar maiúsculas).",
)
async def list_motos(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    placa: str | None = Query(default=None),
    base_url: str = Depends(get_base_url),
    use_case: MotosUseCase = Depends(get_motos_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size, placa=placa)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{moto_id}}",
    response_model=MotoResponse,
    response_model_exclude_none=True,
    summary="Obtém moto por ID",
    responses={404: {"model": MessageResponse}},
)
async def get_moto(
    moto_id: EntityId,
    use_case: MotosUseCase = Depends(get_motos_use_case),
) -> MotoResponse:
    return await use_case.get(moto_id)


@router.post(
    BASE_PATH,
    response_model=MotoResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Cria moto",
    description="Placa e chassi são normalizados para maiúsculas e devem ser únicos.",
    responses={400: {"model": MessageResponse}},
)
async def create_moto(
    payload: MotoRequest,
    response: Response,
    use_case: MotosUseCase = Depends(get_motos_use_case),
) -> MotoResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{moto_id}}",
    response_model=MotoResponse,
    response_model_exclude_none=True,
    summary="Atualiza moto",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_moto(
    moto_id: EntityId,
    payload: MotoRequest,
    use_case: MotosUseCase = Depends(get_motos_use_case),
) -> MotoResponse:
    return await use_case.update(moto_id, payload)


@router.delete(
    f"{BASE_PATH}/{{moto_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Exclui moto",
    responses={404: {"model": MessageResponse}},
)
async def delete_moto(
    moto_id: EntityId,
    use_case: MotosUseCase = Depends(get_motos_use_case),
) -> Response:
    await use_case.delete(moto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
