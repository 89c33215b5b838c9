from typing import Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def find_settings(db: Session) -> Optional[models.CompanySettings]:
    return db.query(models.CompanySettings).order_by(models.CompanySettings.id.asc()).first()


def get_settings(db: Session) -> models.CompanySettings:
    """Return the company settings row, creating an empty one on first access."""
    settings_row = find_settings(db)
    if settings_row is None:
        settings_row = models.CompanySettings()
        db.add(settings_row)
        db.commit()
        db.refresh(settings_row)
    return settings_row


def update_settings(
    db: Session, settings_in: schemas.CompanySettingsUpdate
) -> models.CompanySettings:
    settings_row = find_settings(db)
    if settings_row is None:
        settings_row = models.CompanySettings()
        db.add(settings_row)
    for field, value in settings_in.model_dump(exclude_unset=True).items():
        setattr(settings_row, field, value)
    db.commit()
    db.refresh(settings_row)
    return settings_row
