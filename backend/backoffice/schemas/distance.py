from typing import Optional

from pydantic import Field

from .common import CamelModel


class DistanceCalculateRequest(CamelModel):
    client_address: str = Field(min_length=1)


class DistanceQuote(CamelModel):
    distance_km: int
    distance_text: str
    duration_seconds: int
    duration_text: str
    travel_price: float
    travel_description: str
    company_address: str
    client_address: str


class GeocodeRequest(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class GeocodedAddress(CamelModel):
    formatted_address: Optional[str] = None
    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    latitude: float
    longitude: float
