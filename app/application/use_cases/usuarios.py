import logging
from typing import Callable

from app.api.schemas.usuarios import UsuarioRequest, UsuarioResponse
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.usuario_repo import UsuarioRecord, UsuarioRepo
from app.application.pagination import PageSlice, normalize_paging, offset_for
from app.domain.errors import NotFoundError, ValidationFailedError
from app.domain.normalization import clean_text

logger = logging.getLogger(__name__)

NOT_FOUND = "Usuário não encontrado"


def _to_response(record: UsuarioRecord) -> UsuarioResponse:
    return UsuarioResponse(id=record.id, usuario=record.usuario, senha_hash=record.senha_hash)


class UsuariosUseCase:
    def __init__(
        self,
        usuario_repo: UsuarioRepo,
        id_allocator: IdAllocator,
        transaction_manager: TransactionManager,
        password_hasher: Callable[[str], str],
    ) -> None:
        self._usuario_repo = usuario_repo
        self._id_allocator = id_allocator
        self._transaction_manager = transaction_manager
        self._password_hasher = password_hasher

    async def list_page(self, page: int | None, page_size: int | None) -> PageSlice[UsuarioResponse]:
        page, page_size = normalize_paging(page, page_size)
        total = await self._usuario_repo.count()
        records = await self._usuario_repo.list_page(offset_for(page, page_size), page_size)
        return PageSlice(
            items=[_to_response(r) for r in records], page=page, page_size=page_size, total=total
        )

    async def get(self, usuario_id: int) -> UsuarioResponse:
        record = await self._usuario_repo.get_by_id(usuario_id)
        if record is None:
            raise NotFoundError(NOT_FOUND, usuario_id)
        return _to_response(record)

    def _validated(self, request: UsuarioRequest) -> tuple[str, str]:
        usuario = clean_text(request.usuario)
        if not usuario or not clean_text(request.senha):
            raise ValidationFailedError("Usuário e senha são obrigatórios.")
        return usuario, request.senha

    async def create(self, request: UsuarioRequest) -> UsuarioResponse:
        async with self._transaction_manager.start():
            usuario, senha = self._validated(request)
            if await self._usuario_repo.username_taken(usuario):
                raise ValidationFailedError("Usuário já existe.", field="usuario")

            record = UsuarioRecord(
                id=await self._id_allocator.next_id(UsuarioRepo.TABLE),
                usuario=usuario,
                senha_hash=self._password_hasher(senha),
            )
            await self._usuario_repo.create(record)

        logger.info("Usuario created", extra={"usuario_id": record.id})
        return _to_response(record)

    async def update(self, usuario_id: int, request: UsuarioRequest) -> UsuarioResponse:
        async with self._transaction_manager.start():
            record = await self._usuario_repo.get_by_id(usuario_id)
            if record is None:
                raise NotFoundError(NOT_FOUND, usuario_id)

            usuario, senha = self._validated(request)
            if await self._usuario_repo.username_taken(usuario, exclude_id=usuario_id):
                raise ValidationFailedError("Já existe outro usuário com esse nome.", field="usuario")

            record.usuario = usuario
            record.senha_hash = self._password_hasher(senha)
            await self._usuario_repo.update(record)

        return _to_response(record)

    async def delete(self, usuario_id: int) -> None:
        async with self._transaction_manager.start():
            if await self._usuario_repo.get_by_id(usuario_id) is None:
                raise NotFoundError(NOT_FOUND, usuario_id)
            await self._usuario_repo.delete(usuario_id)

        logger.info("Usuario deleted", extra={"usuario_id": usuario_id})
