from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_zonas_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.zonas import ZonaRequest, ZonaResponse
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.zonas import ZonasUseCase

BASE_PATH = "/api/zonas"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[ZonaResponse],
    response_model_exclude_none=True,
    summary="Lista zonas (paginado)",
)
async def list_zonas(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    base_url: str = Depends(get_base_url),
    use_case: ZonasUseCase = Depends(get_zonas_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{zona_id}}",
    response_model=ZonaResponse,
    response_model_exclude_none=True,
    summary="Obtém zona por ID",
    responses={404: {"model": MessageResponse}},
)
async def get_zona(
    zona_id: EntityId,
    use_case: ZonasUseCase = Depends(get_zonas_use_case),
) -> ZonaResponse:
    return await use_case.get(zona_id)


@router.post(
    BASE_PATH,
    response_model=ZonaResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Cria zona",
    description="Letra é normalizada para maiúscula e deve ter exatamente 1 caractere.",
    responses={400: {"model": MessageResponse}},
)
async def create_zona(
    payload: ZonaRequest,
    response: Response,
    use_case: ZonasUseCase = Depends(get_zonas_use_case),
) -> ZonaResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{zona_id}}",
    response_model=ZonaResponse,
    response_model_exclude_none=True,
    summary="Atualiza zona",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_zona(
    zona_id: EntityId,
    payload: ZonaRequest,
    use_case: ZonasUseCase = Depends(get_zonas_use_case),
) -> ZonaResponse:
    return await use_case.update(zona_id, payload)


@router.delete(
    f"{BASE_PATH}/{{zona_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Exclui zona",
    description="Não remove zonas com motos associadas.",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_zona(
    zona_id: EntityId,
    use_case: ZonasUseCase = Depends(get_zonas_use_case),
) -> Response:
    await use_case.delete(zona_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
