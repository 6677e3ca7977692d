from pydantic import ConfigDict

from app.api.schemas.common import ApiModel


class PatioRequest(ApiModel):
    model_config = ConfigDict(json_schema_extra={"example": {"nome": "Pátio Guarulhos"}})

    nome: str | None = None


class PatioResponse(ApiModel):
    id: int
    nome: str
