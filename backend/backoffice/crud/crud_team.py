import secrets

from sqlalchemy.orm import Session

from .. import models, schemas
from ..utils.errors import NotFoundError

_REQUIRED_FIELDS = {"name", "status", "members"}


def list_teams(db: Session) -> list[models.Team]:
    return db.query(models.Team).order_by(models.Team.created_at.desc(), models.Team.id.desc()).all()


def get_team(db: Session, team_id: int) -> models.Team:
    team = db.get(models.Team, team_id)
    if team is None:
        raise NotFoundError("Equipe não encontrada")
    return team


def find_team_by_name(db: Session, name: str) -> models.Team | None:
    return db.query(models.Team).filter(models.Team.name == name).first()


def find_team_by_token(db: Session, token: str) -> models.Team | None:
    return db.query(models.Team).filter(models.Team.operation_token == token).first()


def create_team(db: Session, team_in: schemas.TeamCreate) -> models.Team:
    team = models.Team(
        name=team_in.name,
        status=team_in.status or models.TeamStatus.ACTIVE,
        leader=team_in.leader,
        notes=team_in.notes,
        members=list(team_in.members),
        operation_token=secrets.token_urlsafe(16),
    )
    db.add(team)
    db.commit()
    db.refresh(team)
    return team


def update_team(db: Session, team_id: int, team_in: schemas.TeamUpdate) -> models.Team:
    team = get_team(db, team_id)
    for field, value in team_in.model_dump(exclude_unset=True).items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(team, field, value)
    db.commit()
    db.refresh(team)
    return team


def delete_team(db: Session, team_id: int) -> None:
    team = get_team(db, team_id)
    db.delete(team)
    db.commit()
