from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_statuses_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.status import StatusRequest, StatusResponse
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.statuses import StatusesUseCase

BASE_PATH = "/api/statuses"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[StatusResponse],
    response_model_exclude_none=True,
    summary="Lista status (paginado)",
)
async def list_statuses(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    base_url: str = Depends(get_base_url),
    use_case: StatusesUseCase = Depends(get_statuses_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{status_id}}",
    response_model=StatusResponse,
    response_model_exclude_none=True,
    responses={404: {"model": MessageResponse}},
)
async def get_status(
    status_id: EntityId,
    use_case: StatusesUseCase = Depends(get_statuses_use_case),
) -> StatusResponse:
    return await use_case.get(status_id)


@router.post(
    BASE_PATH,
    response_model=StatusResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    description="StatusGrupoId deve referenciar um grupo existente.",
    responses={400: {"model": MessageResponse}},
)
async def create_status(
    payload: StatusRequest,
    response: Response,
    use_case: StatusesUseCase = Depends(get_statuses_use_case),
) -> StatusResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{status_id}}",
    response_model=StatusResponse,
    response_model_exclude_none=True,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_status(
    status_id: EntityId,
    payload: StatusRequest,
    use_case: StatusesUseCase = Depends(get_statuses_use_case),
) -> StatusResponse:
    return await use_case.update(status_id, payload)


@router.delete(
    f"{BASE_PATH}/{{status_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    description="Não remove status com motos associadas.",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_status(
    status_id: EntityId,
    use_case: StatusesUseCase = Depends(get_statuses_use_case),
) -> Response:
    await use_case.delete(status_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
