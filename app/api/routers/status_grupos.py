from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_status_grupos_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.status import (
    StatusGrupoRequest,
    StatusGrupoResponse,
    StatusGrupoWithStatusResponse,
)
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.status_grupos import StatusGruposUseCase

BASE_PATH = "/api/statusgrupos"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[StatusGrupoResponse],
    response_model_exclude_none=True,
    summary="Lista grupos de status (paginado)",
)
async def list_status_grupos(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    base_url: str = Depends(get_base_url),
    use_case: StatusGruposUseCase = Depends(get_status_grupos_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{grupo_id}}",
    response_model=StatusGrupoWithStatusResponse,
    response_model_exclude_none=True,
    summary="Obtém grupo de status com seus status",
    responses={404: {"model": MessageResponse}},
)
async def get_status_grupo(
    grupo_id: EntityId,
    use_case: StatusGruposUseCase = Depends(get_status_grupos_use_case),
) -> StatusGrupoWithStatusResponse:
    return await use_case.get(grupo_id)


@router.post(
    BASE_PATH,
    response_model=StatusGrupoResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Cria grupo de status",
    responses={400: {"model": MessageResponse}},
)
async def create_status_grupo(
    payload: StatusGrupoRequest,
    response: Response,
    use_case: StatusGruposUseCase = Depends(get_status_grupos_use_case),
) -> StatusGrupoResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{grupo_id}}",
    response_model=StatusGrupoResponse,
    response_model_exclude_none=True,
    summary="Atualiza grupo de status",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_status_grupo(
    grupo_id: EntityId,
    payload: StatusGrupoRequest,
    use_case: StatusGruposUseCase = Depends(get_status_grupos_use_case),
) -> StatusGrupoResponse:
    return await use_case.update(grupo_id, payload)


@router.delete(
    f"{BASE_PATH}/{{grupo_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Exclui grupo de status",
    description="Não remove grupos que ainda contêm status.",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_status_grupo(
    grupo_id: EntityId,
    use_case: StatusGruposUseCase = Depends(get_status_grupos_use_case),
) -> Response:
    await use_case.delete(grupo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
