from fastapi.testclient import TestClient


class TestStatusGrupos:
    def test_list(self, client: TestClient):
        body = client.get("/api/statusgrupos").json()

        assert [g["nome"] for g in body["items"]] == ["Operacional", "Manutenção", "Exceção"]
        assert body["totalCount"] == 3

    def test_get_embeds_statuses(self, client: TestClient):
        res = client.get("/api/statusgrupos/2")

        assert res.status_code == 200
        body = res.json()
        assert body["nome"] == "Manutenção"
        assert body["statuses"] == [
            {"id": 4, "nome": "Manutenção Preventiva", "statusGrupoId": 2},
            {"id": 5, "nome": "Manutenção Corretiva", "statusGrupoId": 2},
            {"id": 6, "nome": "Aguardando Peças", "statusGrupoId": 2},
        ]

    def test_create_update_and_delete_empty_group(self, client: TestClient):
        created = client.post("/api/statusgrupos", json={"nome": "Logística"})
        assert created.status_code == 201
        assert created.json() == {"id": 4, "nome": "Logística"}
        assert created.headers["location"] == "/api/statusgrupos/4"

        updated = client.put("/api/statusgrupos/4", json={"nome": "Logística Reversa"})
        assert updated.json()["nome"] == "Logística Reversa"
        assert client.get("/api/statusgrupos/4").json()["statuses"] == []

        assert client.delete("/api/statusgrupos/4").status_code == 204

    def test_delete_group_with_statuses(self, client: TestClient):
        res = client.delete("/api/statusgrupos/1")

        assert res.status_code == 400
        assert res.json() == {"message": "Não é possível remover status grupo que contém status."}

    def test_not_found(self, client: TestClient):
        res = client.get("/api/statusgrupos/77")

        assert res.status_code == 404
        assert res.json() == {"message": "Status grupo não encontrado"}


class TestStatuses:
    def test_list_embeds_group(self, client: TestClient):
        body = client.get("/api/statuses", params={"pageSize": 3, "page": 3}).json()

        assert [s["nome"] for s in body["items"]] == ["Sinistro", "Furtado", "Baixado"]
        assert all(s["statusGrupo"] == {"id": 3, "nome": "Exceção"} for s in body["items"])
        assert [link["rel"] for link in body["links"]] == ["self", "prev"]

    def test_get(self, client: TestClient):
        body = client.get("/api/statuses/4").json()

        assert body == {
            "id": 4,
            "nome": "Manutenção Preventiva",
            "statusGrupoId": 2,
            "statusGrupo": {"id": 2, "nome": "Manutenção"},
        }

    def test_create(self, client: TestClient):
        res = client.post("/api/statuses", json={"Nome": "Em Trânsito", "StatusGrupoId": 1})

        assert res.status_code == 201
        assert res.json()["id"] == 10
        assert res.json()["statusGrupo"]["nome"] == "Operacional"
        assert res.headers["location"] == "/api/statuses/10"

    def test_create_with_unknown_group(self, client: TestClient):
        res = client.post("/api/statuses", json={"nome": "Perdido", "statusGrupoId": 99})

        assert res.status_code == 400
        assert res.json() == {"message": "StatusGrupoId inválido."}

    def test_create_with_group_id_beyond_integer_range(self, client: TestClient):
        res = client.post("/api/statuses", json={"nome": "Perdido", "statusGrupoId": 10**20})

        assert res.status_code == 400
        assert "statusGrupoId" in res.json()["message"]
        assert client.get("/api/statuses").json()["totalCount"] == 9

    def test_update_moves_status_to_other_group(self, client: TestClient):
        res = client.put("/api/statuses/9", json={"nome": "Baixado", "statusGrupoId": 2})

        assert res.status_code == 200
        assert res.json()["statusGrupoId"] == 2
        assert len(client.get("/api/statusgrupos/2").json()["statuses"]) == 4

    def test_delete_rules(self, client: TestClient):
        blocked = client.delete("/api/statuses/1")
        assert blocked.status_code == 400
        assert blocked.json() == {"message": "Não é possível remover status com motos associadas."}

        # "Baixado" não tem motos
        assert client.delete("/api/statuses/9").status_code == 204
        assert client.get("/api/statuses/9").json() == {"message": "Status não encontrado"}
