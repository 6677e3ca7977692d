"""Normalización de textos de entrada."""


def clean_text(value: str | None) -> str | None:
    """Recorta espacios; un texto vacío o solo con espacios se trata como ausente."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_code(value: str | None) -> str | None:
    """Placa, chassi y letra de zona: sin espacios en los extremos y en mayúsculas."""
    value = clean_text(value)
    return value.upper() if value else None
