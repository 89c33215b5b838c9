import httpx
import pytest

from backoffice.services import distance_service
from backoffice.utils.errors import (
    AddressNotFound,
    ConfigurationError,
    NoRouteFound,
    UpstreamError,
    ValidationError,
)
from factories import distance_payload

COMPANY = "Av. Principal, 100, Goiânia, GO"
CLIENT = "Rua das Flores | 50 | Aparecida de Goiânia | GO"


@pytest.mark.parametrize("meters,expected", [(1499, 1), (1500, 2), (2501, 3), (12700, 13)])
def test_distance_is_rounded_to_nearest_km(fake_maps, meters, expected):
    fake_maps.set_payload(distance_payload(meters))
    metrics = distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert metrics.distance_km == expected


def test_request_uses_normalized_addresses_and_timeout(fake_maps):
    metrics = distance_service.resolve_distance(COMPANY, CLIENT, api_key="k", timeout=3)
    call = fake_maps.calls[-1]
    assert call["url"] == distance_service.DISTANCE_MATRIX_URL
    assert call["timeout"] == 3
    assert call["params"]["mode"] == "driving"
    assert call["params"]["destinations"] == "Rua das Flores, 50, Aparecida de Goiânia, GO"
    assert metrics.client_address == "Rua das Flores, 50, Aparecida de Goiânia, GO"
    assert metrics.duration_seconds == 900


def test_missing_company_address():
    with pytest.raises(ConfigurationError) as exc:
        distance_service.resolve_distance(None, CLIENT, api_key="k")
    assert exc.value.status_code == 400


def test_missing_client_address():
    with pytest.raises(ValidationError):
        distance_service.resolve_distance(COMPANY, "  ", api_key="k")


def test_missing_api_key():
    with pytest.raises(ConfigurationError) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="")
    assert exc.value.status_code == 500


def test_not_found_mentions_both_addresses(fake_maps):
    fake_maps.set_payload(distance_payload(0, element_status="NOT_FOUND"))
    with pytest.raises(AddressNotFound) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert COMPANY in exc.value.detail
    assert "Rua das Flores, 50, Aparecida de Goiânia, GO" in exc.value.detail
    assert exc.value.to_dict()["companyAddress"] == COMPANY


def test_zero_results(fake_maps):
    fake_maps.set_payload(distance_payload(0, element_status="ZERO_RESULTS"))
    with pytest.raises(NoRouteFound):
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")


def test_top_level_error_status_is_forwarded(fake_maps):
    fake_maps.set_payload({"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."})
    with pytest.raises(UpstreamError) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert exc.value.status_code == 400
    assert exc.value.detail == "The provided API key is invalid."


def test_incomplete_element(fake_maps):
    fake_maps.set_payload({"status": "OK", "rows": [{"elements": [{"status": "OK"}]}]})
    with pytest.raises(UpstreamError) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert exc.value.detail == "Dados incompletos da API do Google Maps"


def test_element_without_values(fake_maps):
    fake_maps.set_payload(
        {
            "status": "OK",
            "rows": [{"elements": [{"status": "OK", "distance": {"text": "5 km"}, "duration": {"text": "10 min"}}]}],
        }
    )
    with pytest.raises(UpstreamError) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert exc.value.detail == "Dados incompletos da API do Google Maps"


def test_transport_failure_is_bad_gateway(monkeypatch):
    def boom(url, params=None, timeout=None):
        raise httpx.ConnectTimeout("timed out")

    monkeypatch.setattr(distance_service.httpx, "get", boom)
    with pytest.raises(UpstreamError) as exc:
        distance_service.resolve_distance(COMPANY, CLIENT, api_key="k")
    assert exc.value.status_code == 502
