from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from .. import models, schemas
from ..models.travel_pricing import PricingType
from ..utils import error_response
from ..utils.errors import NotFoundError


def list_rules(db: Session) -> list[models.TravelPricingRule]:
    """Rules in evaluation order (ascending ``order``, then creation)."""
    return (
        db.query(models.TravelPricingRule)
        .order_by(models.TravelPricingRule.order.asc(), models.TravelPricingRule.id.asc())
        .all()
    )


def get_rule(db: Session, rule_id: int) -> models.TravelPricingRule:
    rule = db.get(models.TravelPricingRule, rule_id)
    if rule is None:
        raise NotFoundError("Preço não encontrado")
    return rule


def _validate_prices(rule_in: schemas.TravelPricingRuleCreate) -> None:
    if rule_in.type == PricingType.PER_KM and not rule_in.price_per_km:
        raise error_response(
            "Preço por km é obrigatório para tipo 'por km'",
            {"pricePerKm": "Obrigatório"},
        )
    if rule_in.type == PricingType.FIXED and not rule_in.fixed_price:
        raise error_response(
            "Preço fixo é obrigatório para tipo 'fixo'",
            {"fixedPrice": "Obrigatório"},
        )


def _clear_other_defaults(db: Session, keep_id: Optional[int] = None) -> None:
    stmt = update(models.TravelPricingRule).where(models.TravelPricingRule.is_default.is_(True))
    if keep_id is not None:
        stmt = stmt.where(models.TravelPricingRule.id != keep_id)
    db.execute(stmt.values(is_default=False).execution_options(synchronize_session="fetch"))


def create_rule(db: Session, rule_in: schemas.TravelPricingRuleCreate) -> models.TravelPricingRule:
    _validate_prices(rule_in)
    if rule_in.is_default:
        _clear_other_defaults(db)
    rule = models.TravelPricingRule(**rule_in.model_dump())
    db.add(rule)
    db.commit()
    db.refresh(rule)
    return rule


def update_rule(
    db: Session, rule_id: int, rule_in: schemas.TravelPricingRuleCreate
) -> models.TravelPricingRule:
    _validate_prices(rule_in)
    rule = get_rule(db, rule_id)
    if rule_in.is_default:
        _clear_other_defaults(db, keep_id=rule.id)
    for field, value in rule_in.model_dump().items():
        setattr(rule, field, value)
    db.commit()
    db.refresh(rule)
    return rule


def delete_rule(db: Session, rule_id: int) -> None:
    # Budgets keep their own price snapshot, so nothing references a rule.
    rule = get_rule(db, rule_id)
    db.delete(rule)
    db.commit()
