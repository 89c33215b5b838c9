from sqlalchemy import Column, Integer, String, Text

from .base import BaseModel


class CompanySettings(BaseModel):
    """Single-row table with company data (headquarters, contact)."""

    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String, nullable=True)
    headquarters_address = Column(String, nullable=True)
    headquarters_street = Column(String, nullable=True)
    headquarters_number = Column(String, nullable=True)
    headquarters_neighborhood = Column(String, nullable=True)
    headquarters_city = Column(String, nullable=True)
    headquarters_state = Column(String, nullable=True)
    headquarters_zip = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    # Base64 encoded signature image
    company_signature = Column(Text, nullable=True)
