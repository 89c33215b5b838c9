"""Team authentication for the field operations portal."""

import hmac
from typing import Optional

from sqlalchemy.orm import Session
import logging

from .. import models
from ..crud import crud_team
from ..utils.errors import AuthenticationError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def check_team_password(team: models.Team, password: str) -> None:
    if not team.operation_pass:
        raise ForbiddenError("Senha de operação não configurada para esta equipe")
    if not hmac.compare_digest(team.operation_pass.encode(), password.encode()):
        logger.warning("Invalid portal password for team %s", team.id)
        raise AuthenticationError("Senha inválida")


def authenticate_team(
    db: Session,
    password: str,
    *,
    team_id: Optional[int] = None,
    token: Optional[str] = None,
) -> models.Team:
    """Resolve the team by id (or legacy link token) and check its password."""
    if team_id is not None:
        team = db.get(models.Team, team_id)
    elif token:
        team = crud_team.find_team_by_token(db, token)
    else:
        team = None
    if team is None:
        raise NotFoundError("Equipe não encontrada")
    check_team_password(team, password)
    return team
