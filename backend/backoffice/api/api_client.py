from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, schemas

router = APIRouter(tags=["clients"])

ItemResponse = schemas.DataResponse[schemas.ClientRead]


@router.get("/clients", response_model=schemas.DataResponse[list[schemas.ClientRead]])
def list_clients(db: Session = Depends(get_db)):
    return {"data": crud.crud_client.list_clients(db)}


@router.get("/clients/{client_id}", response_model=ItemResponse)
def read_client(client_id: int, db: Session = Depends(get_db)):
    return {"data": crud.crud_client.get_client(db, client_id)}


@router.post("/clients", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_client(client_in: schemas.ClientCreate, db: Session = Depends(get_db)):
    return {"data": crud.crud_client.create_client(db, client_in)}


@router.put("/clients/{client_id}", response_model=ItemResponse)
def update_client(
    client_id: int, client_in: schemas.ClientUpdate, db: Session = Depends(get_db)
):
    return {"data": crud.crud_client.update_client(db, client_id, client_in)}


@router.delete("/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: int, db: Session = Depends(get_db)):
    crud.crud_client.delete_client(db, client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
