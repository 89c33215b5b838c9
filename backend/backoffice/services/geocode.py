"""Reverse geocoding (lat/lng -> address parts) via the Google Geocoding API.

Used by the address forms: the frontend sends the device
coordinates and pre-fills the address form with the parsed components.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

import httpx

from ..core.config import settings
from ..utils.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

_STREET_NUMBER_RE = re.compile(r"^(.+?)\s*,?\s*(\d+)?$")


def parse_address_components(
    components: List[Dict[str, Any]], formatted_address: Optional[str]
) -> Dict[str, str]:
    """Map Google address components to street/number/neighborhood/city/state/zip.

    When no ``route`` component is present the street (and trailing house
    number) is taken from the first segment of ``formatted_address``.
    """
    parts = {
        "street": "",
        "number": "",
        "neighborhood": "",
        "city": "",
        "state": "",
        "zip": "",
    }
    for component in components or []:
        types = component.get("types") or []
        if "route" in types:
            parts["street"] = component.get("long_name", "")
        elif "street_number" in types:
            parts["number"] = component.get("long_name", "")
        elif "sublocality_level_1" in types or "sublocality" in types:
            parts["neighborhood"] = component.get("long_name", "")
        elif "administrative_area_level_2" in types:
            parts["city"] = component.get("long_name", "")
        elif "administrative_area_level_1" in types:
            parts["state"] = component.get("short_name", "")
        elif "postal_code" in types:
            parts["zip"] = component.get("long_name", "")

    if not parts["street"] and formatted_address:
        first = formatted_address.split(",")[0].strip()
        match = _STREET_NUMBER_RE.match(first)
        if match:
            parts["street"] = match.group(1).strip()
            if not parts["number"] and match.group(2):
                parts["number"] = match.group(2).strip()
        else:
            parts["street"] = first
    return parts


def reverse_geocode(
    lat: float,
    lng: float,
    *,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
    if not key:
        logger.error("GOOGLE_MAPS_API_KEY is not configured")
        raise ConfigurationError("Google Maps API Key não configurada no servidor")

    params = {
        "latlng": f"{lat},{lng}",
        "language": settings.GOOGLE_MAPS_LANGUAGE,
        "key": key,
    }
    try:
        resp = httpx.get(
            GEOCODE_URL,
            params=params,
            timeout=timeout if timeout is not None else settings.GOOGLE_MAPS_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Geocoding request failed: %s", exc)
        raise UpstreamError(
            "Falha ao consultar o Google Maps", str(exc), status_code=502
        ) from exc

    results = data.get("results") or []
    if data.get("status") != "OK" or not results:
        logger.warning(
            "Geocoding status=%s message=%s", data.get("status"), data.get("error_message")
        )
        raise UpstreamError(
            "Não foi possível obter o endereço para as coordenadas fornecidas",
            data.get("error_message") or data.get("status"),
        )

    result = results[0]
    formatted_address = result.get("formatted_address")
    parts = parse_address_components(result.get("address_components") or [], formatted_address)
    return {
        "formatted_address": formatted_address,
        **parts,
        "latitude": lat,
        "longitude": lng,
    }
