from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel
from ..models.client import PersonType


class ClientAddressIn(CamelModel):
    label: Optional[str] = None
    address: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class ClientAddressRead(ClientAddressIn):
    id: int


class ClientBase(CamelModel):
    person_type: Optional[PersonType] = None
    doc_number: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class ClientCreate(ClientBase):
    name: str = Field(min_length=1)
    addresses: List[ClientAddressIn] = Field(default_factory=list)


class ClientUpdate(ClientBase):
    name: Optional[str] = Field(default=None, min_length=1)
    # None keeps the stored addresses; a list replaces them
    addresses: Optional[List[ClientAddressIn]] = None


class ClientRead(ClientBase):
    id: int
    name: str
    addresses: List[ClientAddressRead] = []
    created_at: datetime
    updated_at: datetime
