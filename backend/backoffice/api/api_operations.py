"""Field operations portal used by crews on site.

Teams authenticate with their shared operation password; no staff session is
involved. ``/operations/{token}`` keeps the older per-team link working.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from .. import crud, models, schemas
from ..services.field_portal import authenticate_team

logger = logging.getLogger(__name__)

router = APIRouter(tags=["operations"])


def _panel(db: Session, team: models.Team) -> dict:
    jobs = crud.crud_job.list_team_jobs(db, team)
    return {"data": {"team": schemas.TeamRead.from_team(team), "jobs": jobs}}


@router.post(
    "/operations/team/{team_id}",
    response_model=schemas.DataResponse[schemas.OperationsPanel],
)
def team_login(
    team_id: int, payload: schemas.OperationsLogin, db: Session = Depends(get_db)
):
    team = authenticate_team(db, payload.password, team_id=team_id)
    logger.info("Team %s opened the operations panel", team.id)
    return _panel(db, team)


@router.patch(
    "/operations/jobs/{job_id}",
    response_model=schemas.DataResponse[schemas.JobRead],
)
def update_job_status(
    job_id: int, payload: schemas.JobStatusUpdate, db: Session = Depends(get_db)
):
    team = authenticate_team(
        db, payload.password, team_id=payload.team_id, token=payload.token
    )
    return {"data": crud.crud_job.update_job_status(db, job_id, team, payload)}


@router.post(
    "/operations/{token}",
    response_model=schemas.DataResponse[schemas.OperationsPanel],
)
def token_login(token: str, payload: schemas.OperationsLogin, db: Session = Depends(get_db)):
    team = authenticate_team(db, payload.password, token=token)
    return _panel(db, team)
