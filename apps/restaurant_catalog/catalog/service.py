from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional
from uuid import UUID

from .models import CATEGORIES, Dish, Event, Menu

ALL_CATEGORIES = "Todos"


def snapshot_dish(dish: Dish) -> Dish:
    """Detached copy of a dish, as stored inside a menu.

    Later edits to the catalog dish (or its deletion) do not reach the copy.
    """
    return dish.model_copy(deep=True)


def associate_dishes(menu: Menu, dishes: Iterable[Dish]) -> Menu:
    menu.associated_dishes = [snapshot_dish(d) for d in dishes]
    return menu


def add_dish_to_menu(menu: Menu, dish: Dish) -> Menu:
    menu.associated_dishes.append(snapshot_dish(dish))
    return menu


def remove_dish_from_menu(menu: Menu, dish_id: UUID) -> Menu:
    for idx, d in enumerate(menu.associated_dishes):
        if d.id == dish_id:
            del menu.associated_dishes[idx]
            break
    return menu


def filter_dishes(
    dishes: Iterable[Dish],
    category: Optional[str] = None,
    q: Optional[str] = None,
) -> list[Dish]:
    items = list(dishes)
    if category and category != ALL_CATEGORIES:
        items = [d for d in items if d.category == category]
    if q:
        ql = q.lower()
        items = [d for d in items if ql in d.title.lower() or ql in d.description.lower()]
    return items


def group_dishes_by_category(dishes: Iterable[Dish]) -> dict[str, list[Dish]]:
    """Canonical course order first, then any other category alphabetically."""
    grouped: dict[str, list[Dish]] = defaultdict(list)
    for d in dishes:
        grouped[d.category].append(d)

    order = [c for c in CATEGORIES if c in grouped]
    order += sorted(c for c in grouped if c not in CATEGORIES)
    return {c: grouped[c] for c in order}


def group_events_by_month(events: Iterable[Event]) -> dict[str, list[Event]]:
    grouped: dict[str, list[Event]] = {}
    for ev in sorted(events, key=lambda e: e.date):
        grouped.setdefault(ev.date.strftime("%Y-%m"), []).append(ev)
    return grouped
