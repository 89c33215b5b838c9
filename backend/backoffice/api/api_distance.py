from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from .. import crud, models, schemas
from ..services import distance_service, geocode
from ..services.travel_pricing import quote_travel
from .dependencies import get_company_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["distance"])


@router.post(
    "/distance/calculate",
    response_model=schemas.DataResponse[schemas.DistanceQuote],
)
def calculate_distance(
    payload: schemas.DistanceCalculateRequest,
    db: Session = Depends(get_db),
    company: Optional[models.CompanySettings] = Depends(get_company_settings),
):
    """Driving distance from headquarters plus the travel fee it implies."""
    metrics = distance_service.resolve_distance(
        company.headquarters_address if company else None,
        payload.client_address,
    )
    rules = crud.crud_travel_pricing.list_rules(db)
    price = quote_travel(rules, metrics.distance_km)
    logger.info(
        "Distance %skm priced at %s (%s)",
        metrics.distance_km,
        price.travel_price,
        price.travel_description,
    )
    quote = schemas.DistanceQuote(
        **asdict(metrics),
        travel_price=price.travel_price,
        travel_description=price.travel_description,
    )
    return {"data": quote}


@router.post(
    "/distance/geocode",
    response_model=schemas.DataResponse[schemas.GeocodedAddress],
)
def geocode_coordinates(payload: schemas.GeocodeRequest):
    """Reverse-geocode a latitude/longitude pair into address parts."""
    result = geocode.reverse_geocode(payload.lat, payload.lng)
    return {"data": schemas.GeocodedAddress(**result)}
