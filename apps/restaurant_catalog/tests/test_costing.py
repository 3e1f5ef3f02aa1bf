from __future__ import annotations

import pytest

from catalog.costing import (
    MESSAGES,
    ProfitabilityLevel,
    categorized_average_cost,
    classify_profitability,
    classify_ratio,
    format_cost,
    included_extras_cost,
)
from catalog.models import Dish, Menu, RestaurantSettings


def dish(category: str, cost: float | None, title: str = "Plato") -> Dish:
    return Dish(title=title, food_cost=cost, category=category)


def menu_costing(avg_cost: float, price: float) -> Menu:
    return Menu(name="Menú", price=price, associated_dishes=[dish("Segundos", avg_cost)])


def test_empty_input_costs_nothing():
    assert categorized_average_cost([]) == 0


def test_single_category_is_averaged():
    dishes = [dish("Aperitivo", 1.00), dish("Aperitivo", 3.00)]

    assert categorized_average_cost(dishes) == pytest.approx(2.00)


def test_category_averages_are_summed():
    dishes = [dish("Aperitivo", 1.00), dish("Postres", 0.50), dish("Postres", 1.50)]

    assert categorized_average_cost(dishes) == pytest.approx(2.00)


def test_unknown_cost_still_counts_in_divisor():
    dishes = [dish("Aperitivo", 2.00), dish("Aperitivo", None)]

    assert categorized_average_cost(dishes) == pytest.approx(1.00)


def test_one_dish_per_course_not_a_flat_average():
    few = [dish("Entrantes", 2.0), dish("Postres", 1.0)]
    many = [dish("Entrantes", 2.0)] * 5 + [dish("Postres", 1.0)]

    assert categorized_average_cost(few) == pytest.approx(3.0)
    assert categorized_average_cost(many) == pytest.approx(3.0)


def test_non_canonical_categories_are_ignored():
    # Dishes filed under other categories never reach the menu cost.
    dishes = [dish("Aperitivo", 1.0), dish("Bebidas", 50.0), dish("postres", 9.0)]

    assert categorized_average_cost(dishes) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "avg_cost, expected",
    [
        (25.0, ProfitabilityLevel.HIGH),
        (10.0, ProfitabilityLevel.HIGH),
        (25.01, ProfitabilityLevel.ATTENTION),
        (30.0, ProfitabilityLevel.ATTENTION),
        (30.01, ProfitabilityLevel.ALERT),
        (80.0, ProfitabilityLevel.ALERT),
    ],
)
def test_profitability_tiers(avg_cost, expected):
    p = classify_profitability(menu_costing(avg_cost, 100.0))

    assert p.level is expected
    assert p.ratio == pytest.approx(avg_cost / 100.0)
    assert p.message == MESSAGES[expected]


@pytest.mark.parametrize(
    "menu",
    [
        Menu(name="Gratis", price=0.0, associated_dishes=[dish("Segundos", 5.0)]),
        Menu(name="Sin platos", price=20.0),
        Menu(name="Sin costes", price=20.0, associated_dishes=[dish("Segundos", None)]),
        Menu(name="Solo bebidas", price=20.0, associated_dishes=[dish("Bebidas", 5.0)]),
    ],
    ids=["price-zero", "no-dishes", "unknown-costs", "non-canonical-only"],
)
def test_insufficient_data(menu):
    p = classify_profitability(menu)

    assert p.level is ProfitabilityLevel.INSUFFICIENT_DATA
    assert p.ratio is None
    assert p.message == "Selecciona platos para información de rentabilidad"


def test_classify_ratio_matches_menu_classification():
    m = Menu(name="Degustación", price=24.0, associated_dishes=[dish("Aperitivo", 1.3), dish("Segundos", 2.75)])

    by_menu = classify_profitability(m)
    by_ratio = classify_ratio(4.05, 24.0)

    assert by_menu.level is by_ratio.level is ProfitabilityLevel.HIGH
    assert by_menu.average_cost == pytest.approx(4.05)


def test_included_extras_cost_uses_settings_unit_costs():
    settings = RestaurantSettings(
        cost_included_drink=0.75,
        cost_included_water=0.25,
        cost_included_bread=0.15,
        cost_included_coffee=0.30,
        cost_included_wine_pairing=4.00,
    )
    m = Menu(name="Menú", price=20.0, is_water_included=True, is_coffee_included=True)

    assert included_extras_cost(m, settings) == pytest.approx(0.55)
    assert included_extras_cost(Menu(name="Nada"), settings) == 0


def test_extras_do_not_change_classification():
    settings = RestaurantSettings(cost_included_wine_pairing=100.0)
    m = menu_costing(20.0, 100.0)
    m.is_wine_pairing_included = True

    assert included_extras_cost(m, settings) == pytest.approx(100.0)
    assert classify_profitability(m).level is ProfitabilityLevel.HIGH


def test_format_cost():
    assert format_cost(3.5) == "(3.50 €)"
    assert format_cost(None) == "(0.00 €)"
