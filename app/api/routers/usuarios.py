from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_usuarios_use_case
from app.api.deps import EntityId, get_base_url
from app.api.schemas.common import MessageResponse, PagedResult
from app.api.schemas.usuarios import UsuarioRequest, UsuarioResponse
from app.application.pagination import DEFAULT_PAGE_SIZE, to_paged
from app.application.use_cases.usuarios import UsuariosUseCase

BASE_PATH = "/api/usuarios"

router = APIRouter()


@router.get(
    BASE_PATH,
    response_model=PagedResult[UsuarioResponse],
    response_model_exclude_none=True,
    summary="Lista usuários (paginado)",
)
async def list_usuarios(
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    base_url: str = Depends(get_base_url),
    use_case: UsuariosUseCase = Depends(get_usuarios_use_case),
) -> PagedResult:
    page_slice = await use_case.list_page(page, page_size)
    return to_paged(base_url, page_slice, BASE_PATH)


@router.get(
    f"{BASE_PATH}/{{usuario_id}}",
    response_model=UsuarioResponse,
    response_model_exclude_none=True,
    summary="Obtém usuário por ID",
    responses={404: {"model": MessageResponse}},
)
async def get_usuario(
    usuario_id: EntityId,
    use_case: UsuariosUseCase = Depends(get_usuarios_use_case),
) -> UsuarioResponse:
    return await use_case.get(usuario_id)


@router.post(
    BASE_PATH,
    response_model=UsuarioResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Cria usuário",
    description="A senha é armazenada como hash bcrypt.",
    responses={400: {"model": MessageResponse}},
)
async def create_usuario(
    payload: UsuarioRequest,
    response: Response,
    use_case: UsuariosUseCase = Depends(get_usuarios_use_case),
) -> UsuarioResponse:
    created = await use_case.create(payload)
    response.headers["Location"] = f"{BASE_PATH}/{created.id}"
    return created


@router.put(
    f"{BASE_PATH}/{{usuario_id}}",
    response_model=UsuarioResponse,
    response_model_exclude_none=True,
    summary="Atualiza usuário",
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_usuario(
    usuario_id: EntityId,
    payload: UsuarioRequest,
    use_case: UsuariosUseCase = Depends(get_usuarios_use_case),
) -> UsuarioResponse:
    return await use_case.update(usuario_id, payload)


@router.delete(
    f"{BASE_PATH}/{{usuario_id}}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Exclui usuário",
    responses={404: {"model": MessageResponse}},
)
async def delete_usuario(
    usuario_id: EntityId,
    use_case: UsuariosUseCase = Depends(get_usuarios_use_case),
) -> Response:
    await use_case.delete(usuario_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
