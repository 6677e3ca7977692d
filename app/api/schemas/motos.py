from datetime import datetime

from pydantic import ConfigDict

from app.api.schemas.common import ApiModel, DbInt
from app.api.schemas.patios import PatioResponse
from app.api.schemas.status import StatusResponse
from app.api.schemas.zonas import ZonaResponse


class MotoRequest(ApiModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "placa": "ABC1D23",
                "chassi": "9BWZZZ377VT004251",
                "qrCode": "QR001",
                "dataEntrada": "2025-01-10T08:30:00",
                "previsaoEntrega": "2025-01-20T18:00:00",
                "fotos": "foto_001.jpg,foto_002.jpg",
                "zonaId": 1,
                "patioId": 1,
                "statusId": 1,
                "observacoes": "Honda CG 160 - revisão em dia",
            }
        }
    )

    placa: str | None = None
    chassi: str | None = None
    qr_code: str | None = None
    data_entrada: datetime | None = None
    previsao_entrega: datetime | None = None
    fotos: str | None = None
    zona_id: DbInt | None = None
    patio_id: DbInt | None = None
    status_id: DbInt | None = None
    observacoes: str | None = None


class MotoResponse(ApiModel):
    id: int
    placa: str
    chassi: str
    qr_code: str | None = None
    data_entrada: datetime
    previsao_entrega: datetime | None = None
    fotos: str | None = None
    zona_id: int
    patio_id: int
    status_id: int
    observacoes: str | None = None
    zona: ZonaResponse | None = None
    patio: PatioResponse | None = None
    status: StatusResponse | None = None
