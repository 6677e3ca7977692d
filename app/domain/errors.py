"""Excepciones de dominio para el registro de motos, patios y zonas."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(DomainError):
    """El id no corresponde a ningún registro existente."""

    def __init__(self, message: str, entity_id: int | None = None):
        super().__init__(message=message, code="NOT_FOUND")
        self.entity_id = entity_id


class ValidationFailedError(DomainError):
    """Campo obligatorio vacío, formato inválido, FK inexistente o duplicado."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, code="VALIDATION_FAILED")
        self.field = field


class ConflictWithDependentsError(DomainError):
    """El borrado dejaría registros dependientes huérfanos."""

    def __init__(self, message: str):
        super().__init__(message=message, code="CONFLICT_WITH_DEPENDENTS")
