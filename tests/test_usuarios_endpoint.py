from fastapi.testclient import TestClient

from app.infrastructure.services import verify_password


def test_list_usuarios(client: TestClient):
    res = client.get("/api/usuarios")

    assert res.status_code == 200
    body = res.json()
    assert body["page"] == 1
    assert body["pageSize"] == 20
    assert body["totalCount"] == 3
    assert [u["usuario"] for u in body["items"]] == ["admin", "operador", "supervisor"]
    assert verify_password("admin@123", body["items"][0]["senhaHash"])
    assert body["links"] == [
        {"rel": "self", "href": "http://testserver/api/usuarios?page=1&pageSize=20", "method": "GET"}
    ]


def test_second_page_of_two_usuarios(client: TestClient):
    assert client.delete("/api/usuarios/3").status_code == 204

    res = client.get("/api/usuarios", params={"page": 2, "pageSize": 1})

    assert res.status_code == 200
    body = res.json()
    assert [u["usuario"] for u in body["items"]] == ["operador"]
    rels = {link["rel"]: link["href"] for link in body["links"]}
    assert rels["prev"] == "http://testserver/api/usuarios?page=1&pageSize=1"
    assert "next" not in rels


def test_create_usuario(client: TestClient):
    res = client.post("/api/usuarios", json={"Usuario": " operador2 ", "Senha": "senha@123"})

    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 4
    assert body["usuario"] == "operador2"
    assert body["senhaHash"] != "senha@123"
    assert verify_password("senha@123", body["senhaHash"])
    assert res.headers["location"] == "/api/usuarios/4"


def test_create_duplicate_usuario(client: TestClient):
    res = client.post("/api/usuarios", json={"usuario": "admin", "senha": "x"})

    assert res.status_code == 400
    assert res.json() == {"message": "Usuário já existe."}


def test_create_usuario_requires_both_fields(client: TestClient):
    res = client.post("/api/usuarios", json={"usuario": "novo", "senha": "   "})

    assert res.status_code == 400
    assert "message" in res.json()


def test_update_usuario(client: TestClient):
    res = client.put("/api/usuarios/2", json={"usuario": "operador.sp", "senha": "nova"})

    assert res.status_code == 200
    assert res.json()["usuario"] == "operador.sp"
    assert verify_password("nova", res.json()["senhaHash"])
    assert client.get("/api/usuarios/2").json()["usuario"] == "operador.sp"


def test_update_usuario_name_taken_by_other(client: TestClient):
    res = client.put("/api/usuarios/2", json={"usuario": "admin", "senha": "x"})

    assert res.status_code == 400
    assert res.json()["message"] == "Já existe outro usuário com esse nome."


def test_update_usuario_can_keep_own_name(client: TestClient):
    res = client.put("/api/usuarios/1", json={"usuario": "admin", "senha": "trocada"})

    assert res.status_code == 200


def test_usuario_not_found(client: TestClient):
    assert client.get("/api/usuarios/99").json() == {"message": "Usuário não encontrado"}
    assert client.put("/api/usuarios/99", json={"usuario": "x", "senha": "y"}).status_code == 404
    assert client.delete("/api/usuarios/99").status_code == 404
