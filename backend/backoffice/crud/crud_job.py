from sqlalchemy import and_, or_
from sqlalchemy.orm import Session
import logging

from .. import models, schemas
from ..models.job import JobStatus
from ..services.job_status import check_transition
from ..utils.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def list_jobs(db: Session) -> list[models.Job]:
    return (
        db.query(models.Job)
        .order_by(
            models.Job.planned_at.asc(),
            models.Job.planned_date.asc(),
            models.Job.seq.asc(),
        )
        .all()
    )


def get_job(db: Session, job_id: int) -> models.Job:
    job = db.get(models.Job, job_id)
    if job is None:
        raise NotFoundError("OS não encontrada")
    return job


def _team_filter(team: models.Team):
    # Jobs created before team ids were stored only carry the team name
    return or_(
        models.Job.team_id == team.id,
        and_(models.Job.team_id.is_(None), models.Job.team == team.name),
    )


def list_team_jobs(db: Session, team: models.Team) -> list[models.Job]:
    return (
        db.query(models.Job)
        .filter(_team_filter(team))
        .order_by(
            models.Job.planned_at.asc(),
            models.Job.planned_date.asc(),
            models.Job.seq.asc(),
        )
        .all()
    )


def belongs_to_team(job: models.Job, team: models.Team) -> bool:
    if job.team_id is not None:
        return job.team_id == team.id
    return job.team == team.name


def update_job_status(
    db: Session, job_id: int, team: models.Team, update_in: schemas.JobStatusUpdate
) -> models.Job:
    job = get_job(db, job_id)
    if not belongs_to_team(job, team):
        raise ForbiddenError("OS não pertence a esta equipe")

    changed = check_transition(job.status, update_in.status)
    if changed:
        job.status = update_in.status
    if update_in.started_at:
        job.started_at = update_in.started_at
    if update_in.finished_at:
        job.finished_at = update_in.finished_at
    if update_in.status == JobStatus.CANCELLED and update_in.cancellation_reason:
        job.cancellation_reason = update_in.cancellation_reason
    db.commit()
    db.refresh(job)
    logger.info("Job %s status=%s (team %s)", job.id, job.status.value, team.id)
    return job
