"""Implementación real del servicio de reloj."""

from datetime import datetime

from app.application.interfaces.clock import Clock


class ClockImpl(Clock):
    """
    Implementación real del Clock que usa el reloj del sistema.

    Para testing, usar FakeClock de application.interfaces.clock.
    """

    def now(self) -> datetime:
        """Hora local sin microsegundos."""
        return datetime.now().replace(microsecond=0)
