from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_patios_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.patios import PatioRequest, PatioResponse
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.patios import PatiosUseCase

BASE_PATH = "/api/patios"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[PatioResponse],
    response_model_exclude_none=True,
    summary="Lista pátios (paginado)",
)
async def list_patios(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    base_url: str = Depends(get_base_url),
    use_case: PatiosUseCase = Depends(get_patios_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{patio_id}}",
    response_model=PatioResponse,
    response_model_exclude_none=True,
    responses={404: {"model": MessageResponse}},
)
async def get_patio(
    patio_id: EntityId,
    use_case: PatiosUseCase = Depends(get_patios_use_case),
) -> PatioResponse:
    return await use_case.get(patio_id)


@router.post(
    BASE_PATH,
    response_model=PatioResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def create_patio(
    payload: PatioRequest,
    response: Response,
    use_case: PatiosUseCase = Depends(get_patios_use_case),
) -> PatioResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{patio_id}}",
    response_model=PatioResponse,
    response_model_exclude_none=True,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_patio(
    patio_id: EntityId,
    payload: PatioRequest,
    use_case: PatiosUseCase = Depends(get_patios_use_case),
) -> PatioResponse:
    return await use_case.update(patio_id, payload)


@router.delete(
    f"{BASE_PATH}/{{patio_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    description="Não remove pátios com motos associadas.",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_patio(
    patio_id: EntityId,
    use_case: PatiosUseCase = Depends(get_patios_use_case),
) -> Response:
    await use_case.delete(patio_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
