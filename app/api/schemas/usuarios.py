from pydantic import ConfigDict

from app.api.schemas.common import ApiModel


class UsuarioRequest(ApiModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"usuario": "operador2", "senha": "senha@123"}}
    )

    usuario: str | None = None
    senha: str | None = None


class UsuarioResponse(ApiModel):
    id: int
    usuario: str
    senha_hash: str
