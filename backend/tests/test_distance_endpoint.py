from backoffice import models
from backoffice.models.travel_pricing import PricingType


def seed(db):
    db.add(models.CompanySettings(headquarters_address="Av. Principal, 100, Goiânia, GO"))
    db.add(
        models.TravelPricingRule(
            type=PricingType.PER_KM,
            up_to_km=20,
            price_per_km=3,
            round_trip=True,
            order=1,
            description="Até 20km",
        )
    )
    db.commit()


def test_end_to_end_quote(client, db, fake_maps):
    seed(db)
    res = client.post(
        "/api/distance/calculate",
        json={"clientAddress": "Rua das Flores, 50, Aparecida de Goiânia, GO"},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["distanceKm"] == 13
    assert data["travelPrice"] == 78
    assert data["travelDescription"] == "13km × R$ 3.00/km × 2 (ida e volta)"
    assert data["companyAddress"] == "Av. Principal, 100, Goiânia, GO"
    assert data["clientAddress"] == "Rua das Flores, 50, Aparecida de Goiânia, GO"
    assert fake_maps.calls[-1]["params"]["key"] == "test-key"


def test_every_request_hits_the_routing_service(client, db, fake_maps):
    seed(db)
    for _ in range(2):
        client.post("/api/distance/calculate", json={"clientAddress": "Rua A, 1"})
    assert len(fake_maps.calls) == 2


def test_headquarters_not_configured(client, fake_maps):
    res = client.post("/api/distance/calculate", json={"clientAddress": "Rua A, 1"})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Endereço da empresa não configurado")
    assert fake_maps.calls == []


def test_missing_client_address_is_rejected(client, db, fake_maps):
    seed(db)
    res = client.post("/api/distance/calculate", json={})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Dados inválidos"
    assert "clientAddress" in body["issues"]["fieldErrors"]


def test_address_not_found_body(client, db, fake_maps):
    from factories import distance_payload

    seed(db)
    fake_maps.set_payload(distance_payload(0, element_status="NOT_FOUND"))
    res = client.post("/api/distance/calculate", json={"clientAddress": "Lugar nenhum"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Endereço não encontrado"
    assert "Lugar nenhum" in body["detail"]
    assert body["clientAddress"] == "Lugar nenhum"
