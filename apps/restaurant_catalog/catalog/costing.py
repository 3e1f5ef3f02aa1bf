"""Menu costing and profitability classification.

The menu cost is "one representative dish per course": the food costs are
averaged inside each canonical category and the category averages are
summed. A menu with five starters and one dessert therefore costs the same
as one with a single starter and a single dessert, as long as the
per-category averages match. The profitability tiers compare that cost to
the menu's sale price.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .models import CATEGORIES, EXTRAS, Dish, Menu, RestaurantSettings

HIGH_PROFITABILITY_MAX_RATIO = 0.25
ATTENTION_MAX_RATIO = 0.30


class ProfitabilityLevel(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    HIGH = "high"
    ATTENTION = "attention"
    ALERT = "alert"


MESSAGES = {
    ProfitabilityLevel.INSUFFICIENT_DATA: "Selecciona platos para información de rentabilidad",
    ProfitabilityLevel.HIGH: (
        "Felicidades por buena rentabilidad: "
        "El coste de ingredientes está por debajo del 25% del PVP."
    ),
    ProfitabilityLevel.ATTENTION: (
        "Atención por baja rentabilidad: "
        "El coste de ingredientes está cerca del 30% del PVP."
    ),
    ProfitabilityLevel.ALERT: (
        "Alerta por nula rentabilidad: "
        "El coste de ingredientes es superior al 30% del PVP."
    ),
}


@dataclass(frozen=True)
class Profitability:
    level: ProfitabilityLevel
    average_cost: float
    price: float
    ratio: Optional[float] = None

    @property
    def message(self) -> str:
        return MESSAGES[self.level]


def categorized_average_cost(dishes: Iterable[Dish]) -> float:
    """Sum of the per-category mean food cost over the canonical categories.

    Unknown costs add 0 but still count in their category's divisor.
    Dishes outside the canonical categories are ignored.
    """
    grouped: dict[str, list[Dish]] = defaultdict(list)
    for dish in dishes:
        grouped[dish.category].append(dish)

    total = 0.0
    for category in CATEGORIES:
        group = grouped.get(category)
        if not group:
            continue
        total += sum(d.food_cost or 0.0 for d in group) / len(group)
    return total


def classify_ratio(average_cost: float, price: float) -> Profitability:
    if price <= 0 or average_cost <= 0:
        return Profitability(ProfitabilityLevel.INSUFFICIENT_DATA, average_cost, price)

    ratio = average_cost / price
    if ratio <= HIGH_PROFITABILITY_MAX_RATIO:
        level = ProfitabilityLevel.HIGH
    elif ratio <= ATTENTION_MAX_RATIO:
        level = ProfitabilityLevel.ATTENTION
    else:
        level = ProfitabilityLevel.ALERT
    return Profitability(level, average_cost, price, ratio)


def classify_profitability(menu: Menu) -> Profitability:
    return classify_ratio(categorized_average_cost(menu.associated_dishes), menu.price)


def included_extras_cost(menu: Menu, settings: RestaurantSettings) -> float:
    """Suggested cost of the extras the menu includes, from the settings' unit costs."""
    return sum(
        getattr(settings, f"cost_included_{extra}")
        for extra in EXTRAS
        if getattr(menu, f"is_{extra}_included")
    )


def format_cost(cost: Optional[float]) -> str:
    if cost is None:
        return "(0.00 €)"
    return f"({cost:.2f} €)"
