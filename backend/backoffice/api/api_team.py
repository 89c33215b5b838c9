from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, schemas

router = APIRouter(tags=["teams"])

ItemResponse = schemas.DataResponse[schemas.TeamRead]


@router.get("/teams", response_model=schemas.DataResponse[list[schemas.TeamRead]])
def list_teams(db: Session = Depends(get_db)):
    teams = crud.crud_team.list_teams(db)
    return {"data": [schemas.TeamRead.from_team(t) for t in teams]}


@router.post("/teams", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_team(team_in: schemas.TeamCreate, db: Session = Depends(get_db)):
    team = crud.crud_team.create_team(db, team_in)
    return {"data": schemas.TeamRead.from_team(team)}


@router.put("/teams/{team_id}", response_model=ItemResponse)
def update_team(team_id: int, team_in: schemas.TeamUpdate, db: Session = Depends(get_db)):
    team = crud.crud_team.update_team(db, team_id, team_in)
    return {"data": schemas.TeamRead.from_team(team)}


@router.delete("/teams/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(team_id: int, db: Session = Depends(get_db)):
    crud.crud_team.delete_team(db, team_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
