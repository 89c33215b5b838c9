from sqlalchemy.orm import Session, selectinload

from .. import models, schemas
from ..utils.addresses import join_address_parts
from ..utils.errors import ConflictError, NotFoundError


def _build_addresses(addresses_in: list[schemas.ClientAddressIn]) -> list[models.ClientAddress]:
    built = []
    for position, address_in in enumerate(addresses_in):
        data = address_in.model_dump()
        if not data.get("address"):
            data["address"] = join_address_parts(
                [
                    data.get("street"),
                    data.get("number"),
                    data.get("neighborhood"),
                    data.get("city"),
                    data.get("state"),
                    data.get("zip"),
                ]
            ) or None
        built.append(models.ClientAddress(position=position, **data))
    return built


def list_clients(db: Session) -> list[models.Client]:
    return (
        db.query(models.Client)
        .options(selectinload(models.Client.addresses))
        .order_by(models.Client.name.asc())
        .all()
    )


def get_client(db: Session, client_id: int) -> models.Client:
    client = db.get(models.Client, client_id)
    if client is None:
        raise NotFoundError("Cliente não encontrado")
    return client


def create_client(db: Session, client_in: schemas.ClientCreate) -> models.Client:
    data = client_in.model_dump(exclude={"addresses"})
    client = models.Client(**data)
    client.addresses = _build_addresses(client_in.addresses)
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def update_client(db: Session, client_id: int, client_in: schemas.ClientUpdate) -> models.Client:
    client = get_client(db, client_id)
    for field, value in client_in.model_dump(exclude_unset=True, exclude={"addresses"}).items():
        if value is None and field == "name":
            continue
        setattr(client, field, value)
    if client_in.addresses is not None:
        client.addresses = _build_addresses(client_in.addresses)
    db.commit()
    db.refresh(client)
    return client


def delete_client(db: Session, client_id: int) -> None:
    client = get_client(db, client_id)
    has_budgets = (
        db.query(models.Budget.id).filter(models.Budget.client_id == client.id).first()
        is not None
    )
    if has_budgets:
        raise ConflictError("Não é possível excluir cliente com orçamentos cadastrados")
    db.delete(client)
    db.commit()
