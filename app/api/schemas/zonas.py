from pydantic import ConfigDict

from app.api.schemas.common import ApiModel


class ZonaRequest(ApiModel):
    model_config = ConfigDict(json_schema_extra={"example": {"nome": "Zona Norte", "letra": "N"}})

    nome: str | None = None
    letra: str | None = None


class ZonaResponse(ApiModel):
    id: int
    nome: str
    letra: str
