"""Travel (displacement) fee from the configured pricing rules.

Rules are tiers evaluated in ascending ``order``: the first rule whose
``up_to_km`` ceiling covers the distance wins, a non-default rule with no
ceiling wins immediately, and the first rule flagged ``is_default`` is used
only when nothing else matched. The functions here work on any object with
the rule attributes (ORM rows or plain records) and never touch the
database.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional

import logging

from ..models.travel_pricing import PricingType

logger = logging.getLogger(__name__)

NO_RULE_SUFFIX = "(sem regra de preço configurada)"
ROUND_TRIP_SUFFIX = " × 2 (ida e volta)"
DEFAULT_SUFFIX = " (padrão)"


@dataclass(frozen=True)
class TravelPrice:
    travel_price: float
    travel_description: str
    rule: Optional[Any] = None


def select_rule(rules: Iterable[Any], distance_km: float) -> Optional[Any]:
    """Return the rule that applies to ``distance_km`` or ``None``."""
    default_rule = None
    for rule in sorted(rules, key=lambda r: r.order or 0):
        if rule.is_default and default_rule is None:
            default_rule = rule
        if rule.up_to_km is None:
            # A ceiling-less rule is a catch-all, except the default which
            # must not shadow more specific tiers further down.
            if not rule.is_default:
                return rule
        elif distance_km <= rule.up_to_km:
            return rule
    return default_rule


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value or 0))


def _format_money(value: Decimal) -> str:
    return f"{value:.2f}"


def price_for_rule(rule: Optional[Any], distance_km: int) -> TravelPrice:
    """Apply ``rule`` to ``distance_km``.

    Per-km rules multiply the distance by ``price_per_km``; fixed rules charge
    ``fixed_price``. Round-trip rules double the base price.
    """
    if rule is None:
        return TravelPrice(0.0, f"{distance_km}km {NO_RULE_SUFFIX}")

    if rule.type == PricingType.PER_KM:
        price_per_km = _to_decimal(rule.price_per_km)
        base = Decimal(distance_km) * price_per_km
        description = f"{distance_km}km × R$ {_format_money(price_per_km)}/km"
    else:
        base = _to_decimal(rule.fixed_price)
        description = rule.description or ""

    price = base * 2 if rule.round_trip else base
    if rule.round_trip:
        description += ROUND_TRIP_SUFFIX
    if rule.is_default:
        description += DEFAULT_SUFFIX
    return TravelPrice(float(price), description, rule)


def quote_travel(rules: Iterable[Any], distance_km: int) -> TravelPrice:
    rule = select_rule(rules, distance_km)
    quote = price_for_rule(rule, distance_km)
    logger.debug(
        "Travel price computed",
        extra={
            "distance_km": distance_km,
            "rule_id": getattr(rule, "id", None),
            "travel_price": quote.travel_price,
        },
    )
    return quote
