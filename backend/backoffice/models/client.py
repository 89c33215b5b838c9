import enum
from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    Enum as SQLAlchemyEnum,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class PersonType(str, enum.Enum):
    CPF = "cpf"
    CNPJ = "cnpj"


class Client(BaseModel):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    person_type = Column(
        SQLAlchemyEnum(
            PersonType,
            name="persontype",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=True,
    )
    doc_number = Column(String, nullable=True)
    contact = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)

    addresses = relationship(
        "ClientAddress",
        back_populates="client",
        order_by="ClientAddress.position",
        cascade="all, delete-orphan",
    )


class ClientAddress(BaseModel):
    __tablename__ = "client_addresses"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    label = Column(String, nullable=True)
    address = Column(String, nullable=True)
    street = Column(String, nullable=True)
    number = Column(String, nullable=True)
    neighborhood = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zip = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    client = relationship("Client", back_populates="addresses")
