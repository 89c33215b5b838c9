from datetime import datetime
from typing import Any, Optional

from pydantic import EmailStr, field_validator

from .common import CamelModel


class CompanySettingsUpdate(CamelModel):
    company_name: Optional[str] = None
    headquarters_address: Optional[str] = None
    headquarters_street: Optional[str] = None
    headquarters_number: Optional[str] = None
    headquarters_neighborhood: Optional[str] = None
    headquarters_city: Optional[str] = None
    headquarters_state: Optional[str] = None
    headquarters_zip: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    company_signature: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email(cls, v: Any) -> Any:
        # The settings form posts "" for a cleared field
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CompanySettingsRead(CompanySettingsUpdate):
    id: int
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime
