"""Driving distance between the company headquarters and a client address.

Single entrypoint :func:`resolve_distance` calls the Google Distance Matrix
API once per request (no caching, no retries) and returns a
:class:`DistanceMetrics`. Failures are raised as the domain errors from
:mod:`backoffice.utils.errors` so the API layer can render them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import settings
from ..utils.addresses import normalize_address
from ..utils.errors import (
    AddressNotFound,
    ConfigurationError,
    NoRouteFound,
    UpstreamError,
    error_response,
)

logger = logging.getLogger(__name__)

DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


@dataclass
class DistanceMetrics:
    distance_km: int
    distance_text: str
    duration_seconds: int
    duration_text: str
    company_address: str
    client_address: str


def _first_element(data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    rows = data.get("rows") or []
    if not rows:
        return None
    elements = rows[0].get("elements") or []
    return elements[0] if elements else None


def resolve_distance(
    company_address: Optional[str],
    client_address: Optional[str],
    *,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> DistanceMetrics:
    """Return the driving distance/duration from ``company_address`` to ``client_address``.

    Both addresses are normalized with :func:`normalize_address` before the
    request. ``distance_km`` is ``round(meters / 1000)``.
    """
    if not company_address or not company_address.strip():
        raise ConfigurationError(
            "Endereço da empresa não configurado. Configure em Configurações.",
            status_code=400,
        )
    if not client_address or not client_address.strip():
        raise error_response(
            "Endereço do cliente é obrigatório", {"clientAddress": "required"}
        )

    key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
    if not key:
        logger.error("GOOGLE_MAPS_API_KEY is not configured")
        raise ConfigurationError("Google Maps API Key não configurada no servidor")

    origin = normalize_address(company_address)
    destination = normalize_address(client_address)
    params = {
        "origins": origin,
        "destinations": destination,
        "mode": "driving",
        "units": "metric",
        "language": settings.GOOGLE_MAPS_LANGUAGE,
        "key": key,
    }
    logger.debug(
        "Distance Matrix request: origins=%s destinations=%s", origin, destination
    )
    try:
        resp = httpx.get(
            DISTANCE_MATRIX_URL,
            params=params,
            timeout=timeout if timeout is not None else settings.GOOGLE_MAPS_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Distance Matrix request failed: %s", exc)
        raise UpstreamError(
            "Falha ao consultar o Google Maps", str(exc), status_code=502
        ) from exc

    top_status = data.get("status")
    if top_status != "OK":
        error_message = data.get("error_message")
        logger.warning("Distance Matrix status=%s message=%s", top_status, error_message)
        if error_message and "LegacyApiNotActivatedMapError" in error_message:
            raise UpstreamError(
                "Distance Matrix API não está ativada",
                "Ative a Distance Matrix API no Google Cloud Console: "
                "https://console.cloud.google.com/apis/library/distance-matrix-backend.googleapis.com",
            )
        raise UpstreamError(
            "Não foi possível calcular a distância", error_message or top_status
        )

    element = _first_element(data)
    element_status = element.get("status") if element else None
    if element_status != "OK":
        logger.warning("Distance Matrix element status=%s", element_status)
        context = {"companyAddress": origin, "clientAddress": destination}
        if element_status == "NOT_FOUND":
            raise AddressNotFound(
                "Endereço não encontrado",
                "O Google Maps não conseguiu localizar um dos endereços:\n\n"
                f"📍 Empresa: {origin}\n\n"
                f"📍 Cliente: {destination}\n\n"
                "Verifique se os endereços estão completos e corretos.",
                extra=context,
            )
        if element_status == "ZERO_RESULTS":
            raise NoRouteFound(
                "Nenhuma rota encontrada",
                "Não foi possível encontrar uma rota entre os endereços informados.",
                extra=context,
            )
        raise UpstreamError(
            "Não foi possível calcular a rota",
            element_status or "Rota não encontrada",
            extra=context,
        )

    distance = element.get("distance")
    duration = element.get("duration")
    if not distance or not duration or "value" not in distance or "value" not in duration:
        raise UpstreamError(
            "Não foi possível calcular a distância",
            "Dados incompletos da API do Google Maps",
        )

    distance_km = int(round(distance["value"] / 1000))
    return DistanceMetrics(
        distance_km=distance_km,
        distance_text=distance.get("text") or f"{distance_km} km",
        duration_seconds=int(duration["value"]),
        duration_text=duration.get("text") or "",
        company_address=origin,
        client_address=destination,
    )
