"""Turn a budget into a scheduled job (Ordem de Serviço).

The budget is claimed with a conditional ``UPDATE`` (status not yet
``convertido`` and no ``job_id``) inside the same transaction that creates
the job, so two concurrent conversions of one budget yield exactly one job.
The job number comes from the atomic ``job`` counter.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Tuple
from zoneinfo import ZoneInfo

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from .. import models, schemas
from ..core.config import settings
from ..crud import crud_budget, crud_counter, crud_team
from ..models.budget import BudgetStatus
from ..models.job import JobStatus
from ..utils import error_response, normalize_address
from ..utils.errors import AlreadyConvertedError, TeamNotFoundError

logger = logging.getLogger(__name__)

ALREADY_CONVERTED_MESSAGE = (
    "Este orçamento já foi convertido em OS e não pode ser convertido novamente"
)


def parse_planned_date(value: str, tz_name: Optional[str] = None) -> datetime:
    """Parse an ISO date/time; aware values are shown in the local timezone."""
    try:
        planned = datetime.fromisoformat(value.strip())
    except ValueError:
        raise error_response("Data planejada inválida", {"plannedDate": "Data inválida"})
    if planned.tzinfo is not None:
        planned = planned.astimezone(ZoneInfo(tz_name or settings.TIMEZONE))
    return planned


def planned_instant(planned: datetime, tz_name: Optional[str] = None) -> datetime:
    """Naive UTC value of a local planned datetime, used for ordering."""
    if planned.tzinfo is None:
        planned = planned.replace(tzinfo=ZoneInfo(tz_name or settings.TIMEZONE))
    return planned.astimezone(timezone.utc).replace(tzinfo=None)


def job_title(client_name: Optional[str], planned: datetime, seq: int) -> str:
    return f"{client_name or 'Cliente'} - {planned:%d/%m/%Y %H:%M} - {seq:06d}"


def resolve_team(
    db: Session, team_id: Optional[int] = None, team_name: Optional[str] = None
) -> models.Team:
    team = None
    if team_id is not None:
        team = db.get(models.Team, team_id)
    elif team_name:
        team = crud_team.find_team_by_name(db, team_name)
    if team is None:
        logger.warning("Team not found for conversion: id=%s name=%s", team_id, team_name)
        raise TeamNotFoundError("Equipe não encontrada")
    return team


def _has_coordinates(address: Any) -> bool:
    return address.latitude is not None and address.longitude is not None


def match_site_address(addresses: Iterable[Any], site: Optional[str]) -> Optional[Any]:
    """Pick the saved address for ``site``.

    A saved address matches when one text contains the other, ignoring case;
    the match is returned even when it has no coordinates. Only when nothing
    matches is the first saved address with coordinates used.
    """
    addresses = list(addresses)
    site_key = normalize_address(site).lower()
    if site_key:
        for address in addresses:
            text = normalize_address(address.address).lower()
            if text and (site_key in text or text in site_key):
                return address
    for address in addresses:
        if _has_coordinates(address):
            return address
    return None


def resolve_site_coordinates(
    db: Session, client_id: Optional[int], site: Optional[str]
) -> Tuple[Optional[float], Optional[float]]:
    if client_id is None:
        return None, None
    try:
        client = db.get(models.Client, client_id)
        addresses = list(client.addresses) if client is not None else []
    except SQLAlchemyError:
        logger.exception("Could not load client %s addresses; job will have no coordinates", client_id)
        return None, None
    match = match_site_address(addresses, site)
    if match is None:
        return None, None
    return match.latitude, match.longitude


def _max_job_seq(db: Session) -> int:
    return db.query(func.max(models.Job.seq)).scalar() or 0


def _claim_budget(db: Session, budget_id: int) -> None:
    stmt = (
        update(models.Budget)
        .where(
            models.Budget.id == budget_id,
            models.Budget.status != BudgetStatus.CONVERTED,
            models.Budget.job_id.is_(None),
        )
        .values(status=BudgetStatus.CONVERTED)
        .execution_options(synchronize_session=False)
    )
    if db.execute(stmt).rowcount != 1:
        logger.warning("Budget %s was converted by another request", budget_id)
        raise AlreadyConvertedError(ALREADY_CONVERTED_MESSAGE)


def convert_budget(
    db: Session, budget_id: int, convert_in: schemas.BudgetConvertRequest
) -> Tuple[models.Job, models.Budget]:
    """Create the job for ``budget_id`` and mark the budget ``convertido``.

    Raises ``NotFoundError`` for an unknown budget, ``AlreadyConvertedError``
    when the budget was converted before (or concurrently), and
    ``TeamNotFoundError`` when the team cannot be resolved. On any failure
    the budget is left unmodified.
    """
    budget = crud_budget.get_budget(db, budget_id)
    if budget.status == BudgetStatus.CONVERTED or budget.job_id is not None:
        raise AlreadyConvertedError(ALREADY_CONVERTED_MESSAGE)

    team = resolve_team(db, convert_in.team_id, convert_in.team)
    planned = parse_planned_date(convert_in.planned_date)
    site = convert_in.site or budget.selected_address
    latitude, longitude = resolve_site_coordinates(db, budget.client_id, site)

    try:
        _claim_budget(db, budget.id)
        seq = crud_counter.next_value(db, crud_counter.JOB, seed=lambda: _max_job_seq(db))
        job = models.Job(
            seq=seq,
            title=job_title(budget.client_name, planned, seq),
            client_id=budget.client_id,
            client_name=budget.client_name,
            site=site,
            site_latitude=latitude,
            site_longitude=longitude,
            team=team.name,
            team_id=team.id,
            status=JobStatus.PENDING,
            planned_date=convert_in.planned_date,
            planned_at=planned_instant(planned),
            notes=convert_in.notes or budget.notes,
            services=copy.deepcopy(budget.services or []),
            value=budget.value,
            discount_percent=budget.discount_percent,
            discount_value=budget.discount_value,
            final_value=budget.final_value,
            selected_address=budget.selected_address,
            travel_distance_km=budget.travel_distance_km,
            travel_price=budget.travel_price,
            travel_description=budget.travel_description,
        )
        db.add(job)
        db.flush()
        db.execute(
            update(models.Budget)
            .where(models.Budget.id == budget.id)
            .values(job_id=job.id)
            .execution_options(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(job)
    db.refresh(budget)
    logger.info("Budget %s converted into job %s (seq=%s)", budget.id, job.id, job.seq)
    return job, budget
