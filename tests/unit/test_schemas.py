from datetime import datetime

import pytest
from pydantic import ValidationError

from app.api.schemas.motos import MotoRequest, MotoResponse
from app.api.schemas.status import StatusRequest
from app.api.schemas.zonas import ZonaRequest


def test_request_keys_are_case_insensitive():
    zona = ZonaRequest.model_validate({"Nome": "Norte", "LETRA": "n"})

    assert zona.nome == "Norte"
    assert zona.letra == "n"


def test_request_accepts_camel_and_snake_case():
    camel = StatusRequest.model_validate({"nome": "Em Uso", "statusGrupoId": 1})
    pascal = StatusRequest.model_validate({"Nome": "Em Uso", "StatusGrupoId": 1})
    snake = StatusRequest.model_validate({"nome": "Em Uso", "status_grupo_id": 1})

    assert camel == pascal == snake
    assert camel.status_grupo_id == 1


def test_missing_fields_are_none():
    moto = MotoRequest.model_validate({})

    assert moto.placa is None
    assert moto.data_entrada is None
    assert moto.zona_id is None


def test_unparseable_date_is_rejected():
    with pytest.raises(ValidationError):
        MotoRequest.model_validate({"dataEntrada": "ontem"})


def test_response_dumps_camel_case_without_nulls():
    response = MotoResponse(
        id=1,
        placa="ABC1D23",
        chassi="9BWZZZ377VT004251",
        data_entrada=datetime(2025, 1, 10, 8, 30),
        zona_id=1,
        patio_id=1,
        status_id=1,
    )

    body = response.model_dump(by_alias=True, exclude_none=True)

    assert body["dataEntrada"] == datetime(2025, 1, 10, 8, 30)
    assert body["zonaId"] == 1
    assert "previsaoEntrega" not in body
    assert "zona" not in body
