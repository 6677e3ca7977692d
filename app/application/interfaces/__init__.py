"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.clock import Clock, FakeClock
from app.application.interfaces.id_allocator import IdAllocator
from app.application.interfaces.moto_repo import MotoRecord, MotoRepo
from app.application.interfaces.patio_repo import PatioRecord, PatioRepo
from app.application.interfaces.status_grupo_repo import StatusGrupoRecord, StatusGrupoRepo
from app.application.interfaces.status_repo import StatusRecord, StatusRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.usuario_repo import UsuarioRecord, UsuarioRepo
from app.application.interfaces.zona_repo import ZonaRecord, ZonaRepo

__all__ = [
    # Repositories
    "UsuarioRepo",
    "UsuarioRecord",
    "ZonaRepo",
    "ZonaRecord",
    "PatioRepo",
    "PatioRecord",
    "StatusGrupoRepo",
    "StatusGrupoRecord",
    "StatusRepo",
    "StatusRecord",
    "MotoRepo",
    "MotoRecord",
    # Infrastructure
    "IdAllocator",
    "TransactionManager",
    # Utilities
    "Clock",
    "FakeClock",
]
