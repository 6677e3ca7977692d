from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Rango de un INTEGER de 64 bits con signo, el de las columnas de id
DB_INT_MIN = -(2**63)
DB_INT_MAX = 2**63 - 1

DbInt = Annotated[int, Field(ge=DB_INT_MIN, le=DB_INT_MAX)]


class ApiModel(BaseModel):
    """Base de los payloads: camelCase en JSON y claves de entrada sin distinguir mayúsculas."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            known[name.lower()] = alias
            known[alias.lower()] = alias
        return {known.get(str(key).lower(), key): value for key, value in data.items()}


class MessageResponse(BaseModel):
    message: str


class Link(BaseModel):
    rel: str
    href: str
    method: str = "GET"


class PagedResult(ApiModel, Generic[T]):
    items: list[T] = Field(default_factory=list)
    page: int
    page_size: int
    total_count: int
    links: list[Link] = Field(default_factory=list)
