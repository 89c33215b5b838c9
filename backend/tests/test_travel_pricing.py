from types import SimpleNamespace

from backoffice.models.travel_pricing import PricingType
from backoffice.services.travel_pricing import price_for_rule, quote_travel, select_rule


def rule(**kwargs):
    fields = {
        "id": None,
        "type": PricingType.PER_KM,
        "up_to_km": None,
        "price_per_km": None,
        "fixed_price": None,
        "description": "Deslocamento",
        "round_trip": True,
        "is_default": False,
        "order": 0,
    }
    fields.update(kwargs)
    return SimpleNamespace(**fields)


def tiered_rules():
    return [
        rule(id=2, order=2, is_default=True, price_per_km=5),
        rule(id=1, order=1, up_to_km=10, type=PricingType.FIXED, fixed_price=50, description="Até 10km"),
    ]


def test_first_matching_ceiling_wins():
    quote = quote_travel(tiered_rules(), 5)
    assert quote.rule.id == 1
    assert quote.travel_price == 100.0
    assert quote.travel_description == "Até 10km × 2 (ida e volta)"


def test_falls_back_to_default_rule():
    quote = quote_travel(tiered_rules(), 50)
    assert quote.rule.id == 2
    assert quote.travel_price == 500.0
    assert quote.travel_description == "50km × R$ 5.00/km × 2 (ida e volta) (padrão)"


def test_default_one_way():
    rules = [rule(id=1, order=1, up_to_km=10, type=PricingType.FIXED, fixed_price=50),
             rule(id=2, order=2, is_default=True, price_per_km=5, round_trip=False)]
    quote = quote_travel(rules, 50)
    assert quote.travel_price == 250.0
    assert quote.travel_description == "50km × R$ 5.00/km (padrão)"


def test_unlimited_non_default_short_circuits_default():
    rules = [
        rule(id=1, order=1, type=PricingType.FIXED, fixed_price=99, round_trip=False, description="Taxa única"),
        rule(id=2, order=2, is_default=True, price_per_km=1),
    ]
    for distance in (0, 5, 500):
        quote = quote_travel(rules, distance)
        assert quote.rule.id == 1
        assert quote.travel_price == 99.0
        assert quote.travel_description == "Taxa única"


def test_default_is_not_selected_before_later_tiers():
    rules = [
        rule(id=1, order=1, is_default=True, price_per_km=9),
        rule(id=2, order=2, up_to_km=30, price_per_km=2),
    ]
    assert select_rule(rules, 20).id == 2
    assert select_rule(rules, 31).id == 1


def test_first_default_is_the_fallback():
    rules = [
        rule(id=1, order=1, up_to_km=5, price_per_km=1),
        rule(id=2, order=2, is_default=True, price_per_km=2),
        rule(id=3, order=3, is_default=True, price_per_km=3),
    ]
    assert select_rule(rules, 40).id == 2


def test_default_with_ceiling_can_match_directly():
    rules = [
        rule(id=1, order=1, is_default=True, up_to_km=15, price_per_km=2),
        rule(id=2, order=2, up_to_km=30, price_per_km=4),
    ]
    assert select_rule(rules, 10).id == 1
    assert select_rule(rules, 20).id == 2
    # Nothing covers 40km, so the tracked default is used
    assert select_rule(rules, 40).id == 1


def test_no_rule_configured():
    quote = quote_travel([], 13)
    assert quote.rule is None
    assert quote.travel_price == 0
    assert quote.travel_description == "13km (sem regra de preço configurada)"


def test_round_trip_doubles_price():
    quote = price_for_rule(rule(price_per_km=2, round_trip=True), 10)
    assert quote.travel_price == 40.0


def test_decimal_prices_do_not_drift():
    quote = price_for_rule(rule(price_per_km=0.1, round_trip=False), 3)
    assert quote.travel_price == 0.3
    assert quote.travel_description == "3km × R$ 0.10/km"


def test_price_calculation_is_idempotent():
    rules = tiered_rules()
    first = quote_travel(rules, 50)
    second = quote_travel(rules, 50)
    assert first == second
    assert [r.id for r in rules] == [2, 1]
