"""Hash de contraseñas de usuarios con bcrypt (sal aleatoria por hash)."""

import bcrypt

from app.config import get_settings

# bcrypt solo considera los primeros 72 bytes de la contraseña
_BCRYPT_MAX_BYTES = 72


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Compara una contraseña en claro con un hash almacenado."""
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # El valor almacenado no es un hash bcrypt válido
        return False
