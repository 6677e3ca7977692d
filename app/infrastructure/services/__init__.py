"""Servicios de infraestructura."""

from app.infrastructure.services.clock_impl import ClockImpl
from app.infrastructure.services.password_hasher import hash_password, verify_password

__all__ = [
    "ClockImpl",
    "hash_password",
    "verify_password",
]
