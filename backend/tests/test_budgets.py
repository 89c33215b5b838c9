from backoffice import models
from backoffice.models.budget import BudgetStatus
from factories import make_budget, make_client

SERVICE = {"service": "Estaca hélice contínua", "diametro": "40", "profundidade": "12", "quantidade": "4", "finalValue": 1500}


def budget_payload(client_id, **overrides):
    payload = {
        "clientId": client_id,
        "services": [SERVICE],
        "value": 1500,
        "finalValue": 1500,
        "selectedAddress": "Rua das Flores, 50",
        "travelDistanceKm": 13,
        "travelPrice": 78,
        "travelDescription": "13km × R$ 3.00/km × 2 (ida e volta)",
    }
    payload.update(overrides)
    return payload


def test_create_numbers_budgets_sequentially(client, db):
    owner = make_client(db)
    first = client.post("/api/budgets", json=budget_payload(owner.id))
    second = client.post("/api/budgets", json=budget_payload(owner.id, clientName="Obra Norte"))
    assert first.status_code == 201
    a, b = first.json()["data"], second.json()["data"]
    assert a["seq"] == 1
    assert a["title"] == "Orçamento Construtora Alfa - ORC000001"
    assert a["status"] == "pendente"
    assert a["services"][0]["finalValue"] == 1500
    assert b["seq"] == 2
    assert b["title"] == "Orçamento Obra Norte - ORC000002"


def test_counter_continues_from_existing_budgets(client, db):
    owner = make_client(db)
    make_budget(db, owner, seq=41)
    res = client.post("/api/budgets", json=budget_payload(owner.id))
    assert res.json()["data"]["seq"] == 42


def test_create_requires_services(client, db):
    owner = make_client(db)
    res = client.post("/api/budgets", json=budget_payload(owner.id, services=[]))
    assert res.status_code == 400
    assert "services" in res.json()["issues"]["fieldErrors"]


def test_create_for_unknown_client(client):
    res = client.post("/api/budgets", json=budget_payload(999))
    assert res.status_code == 404


def test_cannot_create_converted_budget(client, db):
    owner = make_client(db)
    res = client.post("/api/budgets", json=budget_payload(owner.id, status="convertido"))
    assert res.status_code == 400
    assert "status" in res.json()["issues"]["fieldErrors"]


def test_list_includes_services_count(client, db):
    owner = make_client(db)
    make_budget(db, owner)
    data = client.get("/api/budgets").json()["data"]
    assert len(data) == 1
    assert data[0]["servicesCount"] == 1
    assert "services" not in data[0]
    by_client = client.get(f"/api/budgets/client/{owner.id}").json()["data"]
    assert [b["id"] for b in by_client] == [data[0]["id"]]


def test_update_regenerates_title(client, db):
    owner = make_client(db)
    budget = make_budget(db, owner, seq=7)
    res = client.put(f"/api/budgets/{budget.id}", json={"clientName": "Nova Obra", "status": "aprovado"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["title"] == "Orçamento Nova Obra - ORC000007"
    assert data["status"] == "aprovado"
    assert data["services"][0]["service"] == "Estaca hélice"


def test_converted_status_is_locked(client, db):
    owner = make_client(db)
    budget = make_budget(db, owner, status=BudgetStatus.CONVERTED)
    res = client.put(f"/api/budgets/{budget.id}", json={"status": "pendente"})
    assert res.status_code == 409


def test_delete_budget(client, db):
    owner = make_client(db)
    budget = make_budget(db, owner)
    assert client.delete(f"/api/budgets/{budget.id}").status_code == 204
    assert client.get(f"/api/budgets/{budget.id}").status_code == 404


def test_delete_converted_budget_is_refused(client, db):
    owner = make_client(db)
    job = models.Job(seq=1, title="OS", client_id=owner.id)
    db.add(job)
    db.commit()
    budget = make_budget(db, owner, status=BudgetStatus.CONVERTED, job_id=job.id)
    res = client.delete(f"/api/budgets/{budget.id}")
    assert res.status_code == 409
    assert db.get(models.Budget, budget.id) is not None


def test_public_link_approval(client, db):
    owner = make_client(db)
    budget = make_budget(db, owner)
    res = client.post(
        f"/api/budgets/{budget.id}/generate-link",
        headers={"Origin": "https://painel.example.com"},
    )
    assert res.status_code == 200
    link = res.json()["data"]
    token = link["publicToken"]
    assert len(token) == 64
    assert link["publicLink"] == f"https://painel.example.com/budget/{token}"

    again = client.post(f"/api/budgets/{budget.id}/generate-link").json()["data"]
    assert again["publicToken"] == token
    assert again["publicLink"] == f"https://app.example.com/budget/{token}"

    public = client.get(f"/api/budgets/public/{token}")
    assert public.json()["data"]["id"] == budget.id

    approved = client.post(f"/api/budgets/public/{token}/approve", json={"signature": "data:image/png;base64,AAAA"})
    assert approved.status_code == 200
    data = approved.json()["data"]
    assert data["status"] == "aprovado"
    assert data["approved"] is True
    assert data["approvedAt"] is not None

    twice = client.post(f"/api/budgets/public/{token}/reject", json={"rejectionReason": "Caro"})
    assert twice.status_code == 409


def test_public_rejection_requires_reason(client, db):
    owner = make_client(db)
    budget = make_budget(db, owner, public_token="a" * 64)
    res = client.post(f"/api/budgets/public/{'a' * 64}/reject", json={})
    assert res.status_code == 400
    res = client.post(f"/api/budgets/public/{'a' * 64}/reject", json={"rejectionReason": "Prazo"})
    data = res.json()["data"]
    assert data["status"] == "rejeitado"
    assert data["rejectionReason"] == "Prazo"
    db.expire_all()
    assert db.get(models.Budget, budget.id).rejected is True


def test_unknown_public_token(client):
    assert client.get("/api/budgets/public/nope").status_code == 404
