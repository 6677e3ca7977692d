from pydantic import ConfigDict, Field

from app.api.schemas.common import ApiModel, DbInt


class StatusGrupoRequest(ApiModel):
    model_config = ConfigDict(json_schema_extra={"example": {"nome": "Operacional"}})

    nome: str | None = None


class StatusGrupoResponse(ApiModel):
    id: int
    nome: str


class StatusSimpleResponse(ApiModel):
    id: int
    nome: str
    status_grupo_id: int


class StatusGrupoWithStatusResponse(ApiModel):
    """Grupo con sus status, sin volver a anidar el grupo en cada status."""

    id: int
    nome: str
    statuses: list[StatusSimpleResponse] = Field(default_factory=list)


class StatusRequest(ApiModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"nome": "Disponível", "statusGrupoId": 1}}
    )

    nome: str | None = None
    status_grupo_id: DbInt | None = None


class StatusResponse(ApiModel):
    id: int
    nome: str
    status_grupo_id: int
    status_grupo: StatusGrupoResponse | None = None
