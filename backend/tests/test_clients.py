from factories import make_budget, make_client


def test_create_client_assembles_missing_address(client):
    res = client.post(
        "/api/clients",
        json={
            "name": "Construtora Alfa",
            "personType": "cnpj",
            "addresses": [
                {"label": "Obra", "street": "Rua das Flores", "number": "50", "city": "Aparecida de Goiânia", "state": "GO"},
                {"label": "Sede", "address": "Av. Goiás, 1000", "latitude": -16.68, "longitude": -49.25},
            ],
        },
    )
    assert res.status_code == 201
    addresses = res.json()["data"]["addresses"]
    assert addresses[0]["address"] == "Rua das Flores | 50 | Aparecida de Goiânia | GO"
    assert addresses[1]["address"] == "Av. Goiás, 1000"
    assert addresses[1]["latitude"] == -16.68


def test_update_replaces_addresses_only_when_sent(client, db):
    owner = make_client(db, addresses=[{"address": "Rua A, 1"}])
    res = client.put(f"/api/clients/{owner.id}", json={"phone": "62 99999-0000"})
    data = res.json()["data"]
    assert data["phone"] == "62 99999-0000"
    assert [a["address"] for a in data["addresses"]] == ["Rua A, 1"]

    res = client.put(f"/api/clients/{owner.id}", json={"name": None, "addresses": [{"address": "Rua B, 2"}]})
    data = res.json()["data"]
    assert data["name"] == "Construtora Alfa"
    assert [a["address"] for a in data["addresses"]] == ["Rua B, 2"]


def test_client_with_budgets_cannot_be_deleted(client, db):
    owner = make_client(db)
    make_budget(db, owner)
    assert client.delete(f"/api/clients/{owner.id}").status_code == 409
    lonely = make_client(db, name="Sem orçamentos")
    assert client.delete(f"/api/clients/{lonely.id}").status_code == 204
    assert client.get(f"/api/clients/{lonely.id}").status_code == 404


def test_list_clients(client, db):
    make_client(db, name="Beta")
    make_client(db, name="Alfa")
    names = [c["name"] for c in client.get("/api/clients").json()["data"]]
    assert names == ["Alfa", "Beta"]
