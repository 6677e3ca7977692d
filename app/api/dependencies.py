from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.application.use_cases.motos import MotosUseCase
from app.application.use_cases.patios import PatiosUseCase
from app.application.use_cases.status_grupos import StatusGruposUseCase
from app.application.use_cases.statuses import StatusesUseCase
from app.application.use_cases.usuarios import UsuariosUseCase
from app.application.use_cases.zonas import ZonasUseCase
from app.infrastructure.db.id_allocator_sql import IdAllocatorSQL
from app.infrastructure.db.repositories.moto_repo_sql import MotoRepoSQL
from app.infrastructure.db.repositories.patio_repo_sql import PatioRepoSQL
from app.infrastructure.db.repositories.status_grupo_repo_sql import StatusGrupoRepoSQL
from app.infrastructure.db.repositories.status_repo_sql import StatusRepoSQL
from app.infrastructure.db.repositories.usuario_repo_sql import UsuarioRepoSQL
from app.infrastructure.db.repositories.zona_repo_sql import ZonaRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.services.password_hasher import hash_password


def get_usuarios_use_case(session: AsyncSession = Depends(get_db_session)) -> UsuariosUseCase:
    return UsuariosUseCase(
        usuario_repo=UsuarioRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
        password_hasher=hash_password,
    )


def get_zonas_use_case(session: AsyncSession = Depends(get_db_session)) -> ZonasUseCase:
    return ZonasUseCase(
        zona_repo=ZonaRepoSQL(session),
        moto_repo=MotoRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )


def get_patios_use_case(session: AsyncSession = Depends(get_db_session)) -> PatiosUseCase:
    return PatiosUseCase(
        patio_repo=PatioRepoSQL(session),
        moto_repo=MotoRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )


def get_status_grupos_use_case(
    session: AsyncSession = Depends(get_db_session),
) -> StatusGruposUseCase:
    return StatusGruposUseCase(
        status_grupo_repo=StatusGrupoRepoSQL(session),
        status_repo=StatusRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )


def get_statuses_use_case(session: AsyncSession = Depends(get_db_session)) -> StatusesUseCase:
    return StatusesUseCase(
        status_repo=StatusRepoSQL(session),
        status_grupo_repo=StatusGrupoRepoSQL(session),
        moto_repo=MotoRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )


def get_motos_use_case(session: AsyncSession = Depends(get_db_session)) -> MotosUseCase:
    return MotosUseCase(
        moto_repo=MotoRepoSQL(session),
        zona_repo=ZonaRepoSQL(session),
        patio_repo=PatioRepoSQL(session),
        status_repo=StatusRepoSQL(session),
        status_grupo_repo=StatusGrupoRepoSQL(session),
        id_allocator=IdAllocatorSQL(session),
        transaction_manager=SQLAlchemyTransactionManager(session),
    )
