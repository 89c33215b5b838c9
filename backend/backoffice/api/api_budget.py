from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
import logging

from ..core.config import settings
from ..database import get_db
from .. import crud, schemas
from ..services import budget_conversion

logger = logging.getLogger(__name__)

router = APIRouter(tags=["budgets"])

ItemResponse = schemas.DataResponse[schemas.BudgetRead]
SummaryList = schemas.DataResponse[list[schemas.BudgetSummary]]


# ─── Public approval link (no staff session) ────────────────────────────────


@router.get("/budgets/public/{token}", response_model=ItemResponse)
def read_public_budget(token: str, db: Session = Depends(get_db)):
    return {"data": crud.crud_budget.get_budget_by_token(db, token)}


@router.post("/budgets/public/{token}/approve", response_model=ItemResponse)
def approve_public_budget(
    token: str, payload: schemas.BudgetApproveRequest, db: Session = Depends(get_db)
):
    return {"data": crud.crud_budget.approve_budget(db, token, payload.signature)}


@router.post("/budgets/public/{token}/reject", response_model=ItemResponse)
def reject_public_budget(
    token: str, payload: schemas.BudgetRejectRequest, db: Session = Depends(get_db)
):
    return {"data": crud.crud_budget.reject_budget(db, token, payload.rejection_reason)}


# ─── Staff endpoints ────────────────────────────────────────────────────────


@router.get("/budgets", response_model=SummaryList)
def list_budgets(db: Session = Depends(get_db)):
    budgets = crud.crud_budget.list_budgets(db)
    return {"data": [schemas.BudgetSummary.from_budget(b) for b in budgets]}


@router.get("/budgets/client/{client_id}", response_model=SummaryList)
def list_client_budgets(client_id: int, db: Session = Depends(get_db)):
    budgets = crud.crud_budget.list_client_budgets(db, client_id)
    return {"data": [schemas.BudgetSummary.from_budget(b) for b in budgets]}


@router.get("/budgets/{budget_id}", response_model=ItemResponse)
def read_budget(budget_id: int, db: Session = Depends(get_db)):
    return {"data": crud.crud_budget.get_budget(db, budget_id)}


@router.post("/budgets", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_budget(budget_in: schemas.BudgetCreate, db: Session = Depends(get_db)):
    return {"data": crud.crud_budget.create_budget(db, budget_in)}


@router.put("/budgets/{budget_id}", response_model=ItemResponse)
def update_budget(
    budget_id: int, budget_in: schemas.BudgetUpdate, db: Session = Depends(get_db)
):
    return {"data": crud.crud_budget.update_budget(db, budget_id, budget_in)}


@router.delete("/budgets/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget(budget_id: int, db: Session = Depends(get_db)):
    crud.crud_budget.delete_budget(db, budget_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/budgets/{budget_id}/generate-link",
    response_model=schemas.DataResponse[schemas.PublicLinkRead],
)
def generate_public_link(budget_id: int, request: Request, db: Session = Depends(get_db)):
    link = crud.crud_budget.generate_public_link(
        db,
        budget_id,
        request.headers.get("origin"),
        settings.frontend_origins,
    )
    return {"data": link}


@router.post("/budgets/{budget_id}/convert", response_model=schemas.BudgetConversionRead)
def convert_budget(
    budget_id: int,
    convert_in: schemas.BudgetConvertRequest,
    db: Session = Depends(get_db),
):
    """Convert the budget into a job (Ordem de Serviço) exactly once."""
    job, budget = budget_conversion.convert_budget(db, budget_id, convert_in)
    return {"data": job, "budget": budget}
