import secrets
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session
import logging

from .. import models, schemas
from ..models.base import utcnow
from ..models.budget import BudgetStatus
from ..utils import error_response
from ..utils.errors import ConflictError, NotFoundError
from . import crud_counter

logger = logging.getLogger(__name__)

DEFAULT_FRONTEND_ORIGIN = "http://localhost:3000"

# Fields that cannot be cleared through a partial update
_REQUIRED_FIELDS = {"client_id", "services", "status"}


def budget_title(client_name: str, seq: int) -> str:
    return f"Orçamento {client_name} - ORC{seq:06d}"


def _max_seq(db: Session) -> int:
    return db.query(func.max(models.Budget.seq)).scalar() or 0


def list_budgets(db: Session) -> list[models.Budget]:
    return (
        db.query(models.Budget)
        .order_by(models.Budget.created_at.desc(), models.Budget.id.desc())
        .all()
    )


def list_client_budgets(db: Session, client_id: int) -> list[models.Budget]:
    return (
        db.query(models.Budget)
        .filter(models.Budget.client_id == client_id)
        .order_by(models.Budget.created_at.desc(), models.Budget.id.desc())
        .all()
    )


def get_budget(db: Session, budget_id: int) -> models.Budget:
    budget = db.get(models.Budget, budget_id)
    if budget is None:
        raise NotFoundError("Orçamento não encontrado")
    return budget


def get_budget_by_token(db: Session, token: str) -> models.Budget:
    budget = db.query(models.Budget).filter(models.Budget.public_token == token).first()
    if budget is None:
        raise NotFoundError("Orçamento não encontrado")
    return budget


def _get_client(db: Session, client_id: int) -> models.Client:
    client = db.get(models.Client, client_id)
    if client is None:
        raise NotFoundError("Cliente não encontrado")
    return client


def _reject_manual_conversion(status: Optional[BudgetStatus]) -> None:
    if status == BudgetStatus.CONVERTED:
        raise error_response(
            "Use a conversão em OS para marcar o orçamento como convertido",
            {"status": "Valor inválido"},
        )


def create_budget(db: Session, budget_in: schemas.BudgetCreate) -> models.Budget:
    _reject_manual_conversion(budget_in.status)
    client = _get_client(db, budget_in.client_id)
    client_name = budget_in.client_name or client.name or "Cliente"

    seq = crud_counter.next_value(db, crud_counter.BUDGET, seed=lambda: _max_seq(db))
    data = budget_in.model_dump(exclude={"client_name", "status"})
    budget = models.Budget(
        **data,
        seq=seq,
        title=budget_title(client_name, seq),
        client_name=client_name,
        status=budget_in.status or BudgetStatus.PENDING,
    )
    db.add(budget)
    db.commit()
    db.refresh(budget)
    logger.info("Budget %s created (seq=%s)", budget.id, seq)
    return budget


def update_budget(
    db: Session, budget_id: int, budget_in: schemas.BudgetUpdate
) -> models.Budget:
    budget = get_budget(db, budget_id)
    data = budget_in.model_dump(exclude_unset=True)

    status = data.get("status")
    if status is not None and status != budget.status:
        if budget.status == BudgetStatus.CONVERTED:
            raise ConflictError("Orçamento já convertido em OS")
        _reject_manual_conversion(status)
    if data.get("client_id") is not None:
        _get_client(db, data["client_id"])

    for field, value in data.items():
        if value is None and field in _REQUIRED_FIELDS:
            continue
        setattr(budget, field, value)
    if budget_in.client_name:
        budget.title = budget_title(budget_in.client_name, budget.seq)

    db.commit()
    db.refresh(budget)
    return budget


def delete_budget(db: Session, budget_id: int) -> None:
    budget = get_budget(db, budget_id)
    if budget.job_id is not None:
        raise ConflictError("Não é possível excluir orçamento convertido em OS")
    db.delete(budget)
    db.commit()


def generate_public_link(
    db: Session, budget_id: int, origin: Optional[str], frontend_origins: list[str]
) -> schemas.PublicLinkRead:
    budget = get_budget(db, budget_id)
    if not budget.public_token:
        budget.public_token = secrets.token_hex(32)
        db.commit()
        db.refresh(budget)
    base = origin or (frontend_origins[0] if frontend_origins else DEFAULT_FRONTEND_ORIGIN)
    return schemas.PublicLinkRead(
        public_token=budget.public_token,
        public_link=f"{base.rstrip('/')}/budget/{budget.public_token}",
    )


def _ensure_unprocessed(budget: models.Budget) -> None:
    if budget.approved or budget.rejected or budget.status == BudgetStatus.CONVERTED:
        raise ConflictError("Este orçamento já foi processado")


def approve_budget(db: Session, token: str, signature: str) -> models.Budget:
    budget = get_budget_by_token(db, token)
    _ensure_unprocessed(budget)
    now = utcnow()
    budget.approved = True
    budget.approved_at = now
    budget.client_signature = signature
    budget.client_signed_at = now
    budget.status = BudgetStatus.APPROVED
    db.commit()
    db.refresh(budget)
    logger.info("Budget %s approved by client", budget.id)
    return budget


def reject_budget(db: Session, token: str, reason: str) -> models.Budget:
    budget = get_budget_by_token(db, token)
    _ensure_unprocessed(budget)
    budget.rejected = True
    budget.rejected_at = utcnow()
    budget.rejection_reason = reason
    budget.status = BudgetStatus.REJECTED
    db.commit()
    db.refresh(budget)
    logger.info("Budget %s rejected by client", budget.id)
    return budget
