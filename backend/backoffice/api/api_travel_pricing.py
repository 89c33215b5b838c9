from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, schemas

router = APIRouter(tags=["travel-pricing"])

ListResponse = schemas.DataResponse[list[schemas.TravelPricingRuleRead]]
ItemResponse = schemas.DataResponse[schemas.TravelPricingRuleRead]


@router.get("/travel-pricing", response_model=ListResponse)
def list_travel_pricing(db: Session = Depends(get_db)):
    return {"data": crud.crud_travel_pricing.list_rules(db)}


@router.get("/travel-pricing/{rule_id}", response_model=ItemResponse)
def read_travel_pricing(rule_id: int, db: Session = Depends(get_db)):
    return {"data": crud.crud_travel_pricing.get_rule(db, rule_id)}


@router.post("/travel-pricing", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_travel_pricing(
    rule_in: schemas.TravelPricingRuleCreate, db: Session = Depends(get_db)
):
    return {"data": crud.crud_travel_pricing.create_rule(db, rule_in)}


@router.put("/travel-pricing/{rule_id}", response_model=ItemResponse)
def update_travel_pricing(
    rule_id: int,
    rule_in: schemas.TravelPricingRuleCreate,
    db: Session = Depends(get_db),
):
    return {"data": crud.crud_travel_pricing.update_rule(db, rule_id, rule_in)}


@router.delete("/travel-pricing/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_travel_pricing(rule_id: int, db: Session = Depends(get_db)):
    crud.crud_travel_pricing.delete_rule(db, rule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
