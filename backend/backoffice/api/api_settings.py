from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from .. import crud, schemas

router = APIRouter(tags=["settings"])
logger = logging.getLogger(__name__)

SettingsResponse = schemas.DataResponse[schemas.CompanySettingsRead]


@router.get("/settings", response_model=SettingsResponse)
def read_settings(db: Session = Depends(get_db)):
    return {"data": crud.crud_settings.get_settings(db)}


@router.put("/settings", response_model=SettingsResponse)
def update_settings(
    settings_in: schemas.CompanySettingsUpdate, db: Session = Depends(get_db)
):
    row = crud.crud_settings.update_settings(db, settings_in)
    logger.info("Company settings updated (headquarters=%s)", row.headquarters_address)
    return {"data": row}
