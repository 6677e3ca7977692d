"""
Capa de Dominio - Mottu Vision.

Sin dependencias de frameworks.

- errors.py: Excepciones específicas del dominio
- normalization.py: Limpieza de texto y códigos (placa, chassi, letra)
"""

from app.domain.errors import (
    ConflictWithDependentsError,
    DomainError,
    NotFoundError,
    ValidationFailedError,
)
from app.domain.normalization import clean_text, normalize_code

__all__ = [
    # Errors
    "DomainError",
    "NotFoundError",
    "ValidationFailedError",
    "ConflictWithDependentsError",
    # Normalization
    "clean_text",
    "normalize_code",
]
