from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..crud import crud_settings
from .. import models


def get_company_settings(db: Session = Depends(get_db)) -> Optional[models.CompanySettings]:
    """Company settings row for this request (``None`` when never saved)."""
    return crud_settings.find_settings(db)
