"""Tests de la aplicación: arranque, manejo de errores y listados vacíos."""

from fastapi.testclient import TestClient

from app.api.dependencies import get_zonas_use_case
from app.config import get_settings
from app.main import app


def test_root_redirects_to_docs(empty_client: TestClient):
    res = empty_client.get("/", follow_redirects=False)

    assert res.status_code in (302, 307)
    assert res.headers["location"] == "/docs"


def test_empty_database_lists(empty_client: TestClient):
    for path in ("/api/usuarios", "/api/zonas", "/api/patios", "/api/statusgrupos", "/api/statuses", "/api/motos"):
        body = empty_client.get(path).json()
        assert body["items"] == []
        assert body["totalCount"] == 0
        assert [link["rel"] for link in body["links"]] == ["self"]


def test_page_beyond_last_returns_self_and_prev(empty_client: TestClient):
    body = empty_client.get("/api/zonas", params={"page": 3}).json()

    assert body["items"] == []
    assert body["page"] == 3
    assert [link["rel"] for link in body["links"]] == ["self", "prev"]


def test_first_create_gets_id_one(empty_client: TestClient):
    res = empty_client.post("/api/statusgrupos", json={"nome": "Operacional"})

    assert res.status_code == 201
    assert res.json()["id"] == 1


def test_malformed_body_is_bad_request(empty_client: TestClient):
    res = empty_client.post(
        "/api/zonas", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert res.status_code == 400
    assert "message" in res.json()


def test_wrong_field_type_is_bad_request(empty_client: TestClient):
    res = empty_client.post("/api/zonas", json={"nome": 123, "letra": "n"})

    assert res.status_code == 400
    assert "nome" in res.json()["message"]


def test_invalid_query_param_is_bad_request(empty_client: TestClient):
    res = empty_client.get("/api/motos", params={"page": "primeira"})

    assert res.status_code == 400
    assert "message" in res.json()


def test_unhandled_error_returns_500_with_error_id(empty_client: TestClient):
    class BrokenUseCase:
        async def get(self, zona_id: int):
            raise RuntimeError("boom")

    app.dependency_overrides[get_zonas_use_case] = lambda: BrokenUseCase()
    safe_client = TestClient(app, raise_server_exceptions=False)

    res = safe_client.get("/api/zonas/1")

    assert res.status_code == 500
    body = res.json()
    assert body["detail"] == "Internal server error"
    assert "error_id" in body
    assert "boom" not in res.text


def test_seed_failure_does_not_stop_startup(monkeypatch):
    async def failing_seed(*args, **kwargs):
        raise RuntimeError("seed failed")

    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    monkeypatch.setattr("app.main.seed_database", failing_seed)
    get_settings.cache_clear()
    try:
        with TestClient(app) as test_client:
            assert test_client.get("/health").status_code == 200
            assert test_client.get("/api/usuarios").json()["totalCount"] == 0
    finally:
        get_settings.cache_clear()
