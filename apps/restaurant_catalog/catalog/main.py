from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request, Response

from . import config
from .costing import categorized_average_cost, classify_profitability, classify_ratio, included_extras_cost
from .models import Dish, Event, Menu, RestaurantSettings
from .repositories import Catalog, open_catalog
from .schemas import (
    CostingPreviewRequest,
    DishWrite,
    EventWrite,
    HealthResponse,
    MenuCreate,
    MenuDishesUpdate,
    MenuWrite,
    ProfitabilityRead,
    SettingsRead,
    SettingsWrite,
)
from .service import associate_dishes, filter_dishes, group_dishes_by_category, group_events_by_month
from .storage import Persistence, make_store

log = logging.getLogger(__name__)

app = FastAPI(title="Restaurant Catalog", version="0.1.0")


@app.on_event("startup")
def _startup():
    config.configure_logging()
    store = make_store()
    app.state.catalog = open_catalog(Persistence(store), seed_defaults=config.SEED_DEFAULTS)
    log.info("Catalog loaded from %r", store)


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def _dish_or_404(catalog: Catalog, dish_id: UUID) -> Dish:
    dish = catalog.dishes.get(dish_id)
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return dish


def _menu_or_404(catalog: Catalog, menu_id: UUID) -> Menu:
    menu = catalog.menus.get(menu_id)
    if menu is None:
        raise HTTPException(status_code=404, detail="Menu not found")
    return menu


def _event_or_404(catalog: Catalog, event_id: UUID) -> Event:
    ev = catalog.events.get(event_id)
    if ev is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return ev


def _catalog_dishes(catalog: Catalog, dish_ids: list[UUID]) -> list[Dish]:
    return [_dish_or_404(catalog, dish_id) for dish_id in dish_ids]


def _settings_to_read(settings: RestaurantSettings) -> SettingsRead:
    return SettingsRead(
        **settings.model_dump(exclude={"logo_data"}),
        has_logo=settings.logo_data is not None,
    )


@app.get("/health", response_model=HealthResponse)
def health(catalog: Catalog = Depends(get_catalog)):
    return HealthResponse(ok=True, store=repr(catalog.dishes.persistence.store))


# Dishes


@app.get("/dishes", response_model=list[Dish])
def get_dishes(
    category: Optional[str] = None,
    q: Optional[str] = None,
    catalog: Catalog = Depends(get_catalog),
):
    return filter_dishes(catalog.dishes, category=category, q=q)


@app.get("/dishes/by-category", response_model=dict[str, list[Dish]])
def get_dishes_by_category(catalog: Catalog = Depends(get_catalog)):
    return group_dishes_by_category(catalog.dishes)


@app.post("/dishes", response_model=Dish)
def create_dish(payload: DishWrite, catalog: Catalog = Depends(get_catalog)):
    return catalog.dishes.add(Dish(**payload.model_dump()))


@app.put("/dishes/{dish_id}", response_model=Dish)
def update_dish(dish_id: UUID, payload: DishWrite, catalog: Catalog = Depends(get_catalog)):
    _dish_or_404(catalog, dish_id)
    dish = Dish(id=dish_id, **payload.model_dump())
    catalog.dishes.update(dish)
    return dish


@app.delete("/dishes/{dish_id}")
def delete_dish(dish_id: UUID, catalog: Catalog = Depends(get_catalog)):
    # Menus keep their own copies of the dish.
    catalog.dishes.delete(_dish_or_404(catalog, dish_id))
    return {"ok": True}


# Menus


@app.get("/menus", response_model=list[Menu])
def get_menus(catalog: Catalog = Depends(get_catalog)):
    return list(catalog.menus)


@app.post("/menus", response_model=Menu)
def create_menu(payload: MenuCreate, catalog: Catalog = Depends(get_catalog)):
    dishes = _catalog_dishes(catalog, payload.dish_ids)
    menu = Menu(**payload.model_dump(exclude={"dish_ids"}))
    return catalog.menus.add(associate_dishes(menu, dishes))


@app.put("/menus/{menu_id}", response_model=Menu)
def update_menu(menu_id: UUID, payload: MenuWrite, catalog: Catalog = Depends(get_catalog)):
    current = _menu_or_404(catalog, menu_id)
    menu = Menu(id=menu_id, associated_dishes=current.associated_dishes, **payload.model_dump())
    catalog.menus.update(menu)
    return menu


@app.put("/menus/{menu_id}/dishes", response_model=Menu)
def set_menu_dishes(menu_id: UUID, payload: MenuDishesUpdate, catalog: Catalog = Depends(get_catalog)):
    menu = _menu_or_404(catalog, menu_id)
    associate_dishes(menu, _catalog_dishes(catalog, payload.dish_ids))
    catalog.menus.update(menu)
    return menu


@app.delete("/menus/{menu_id}")
def delete_menu(menu_id: UUID, catalog: Catalog = Depends(get_catalog)):
    catalog.menus.delete(_menu_or_404(catalog, menu_id))
    return {"ok": True}


@app.get("/menus/{menu_id}/profitability", response_model=ProfitabilityRead)
def get_menu_profitability(menu_id: UUID, catalog: Catalog = Depends(get_catalog)):
    menu = _menu_or_404(catalog, menu_id)
    p = classify_profitability(menu)
    return ProfitabilityRead(
        menu_id=menu.id,
        price=p.price,
        average_cost=round(p.average_cost, 2),
        ratio=p.ratio,
        level=p.level.value,
        message=p.message,
        extras_cost=round(included_extras_cost(menu, catalog.settings.settings), 2),
    )


@app.post("/costing/preview", response_model=ProfitabilityRead)
def preview_costing(payload: CostingPreviewRequest, catalog: Catalog = Depends(get_catalog)):
    """Classify a price against catalog dishes before the menu is saved."""
    dishes = _catalog_dishes(catalog, payload.dish_ids)
    p = classify_ratio(categorized_average_cost(dishes), payload.price)
    return ProfitabilityRead(
        price=p.price,
        average_cost=round(p.average_cost, 2),
        ratio=p.ratio,
        level=p.level.value,
        message=p.message,
    )


# Events


@app.get("/events", response_model=list[Event])
def get_events(status: Optional[str] = None, catalog: Catalog = Depends(get_catalog)):
    events = sorted(catalog.events, key=lambda e: e.date)
    if status:
        events = [e for e in events if e.status == status]
    return events


@app.get("/events/by-month", response_model=dict[str, list[Event]])
def get_events_by_month(catalog: Catalog = Depends(get_catalog)):
    return group_events_by_month(catalog.events)


@app.post("/events", response_model=Event)
def create_event(payload: EventWrite, catalog: Catalog = Depends(get_catalog)):
    return catalog.events.add(Event(**payload.model_dump()))


@app.put("/events/{event_id}", response_model=Event)
def update_event(event_id: UUID, payload: EventWrite, catalog: Catalog = Depends(get_catalog)):
    _event_or_404(catalog, event_id)
    ev = Event(id=event_id, **payload.model_dump())
    catalog.events.update(ev)
    return ev


@app.delete("/events/{event_id}")
def delete_event(event_id: UUID, catalog: Catalog = Depends(get_catalog)):
    catalog.events.delete(_event_or_404(catalog, event_id))
    return {"ok": True}


# Settings


@app.get("/settings", response_model=SettingsRead)
def get_settings(catalog: Catalog = Depends(get_catalog)):
    return _settings_to_read(catalog.settings.settings)


@app.put("/settings", response_model=SettingsRead)
def update_settings(payload: SettingsWrite, catalog: Catalog = Depends(get_catalog)):
    current = catalog.settings.settings
    settings = RestaurantSettings(logo_data=current.logo_data, **payload.model_dump())
    return _settings_to_read(catalog.settings.update(settings))


@app.get("/settings/logo")
def get_logo(catalog: Catalog = Depends(get_catalog)):
    logo = catalog.settings.settings.logo_data
    if logo is None:
        raise HTTPException(status_code=404, detail="No logo")
    return Response(content=logo, media_type="application/octet-stream")


@app.put("/settings/logo", response_model=SettingsRead)
async def upload_logo(request: Request, catalog: Catalog = Depends(get_catalog)):
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Empty logo")
    return _settings_to_read(catalog.settings.set_logo(data))


@app.delete("/settings/logo", response_model=SettingsRead)
def delete_logo(catalog: Catalog = Depends(get_catalog)):
    return _settings_to_read(catalog.settings.set_logo(None))


@app.delete("/danger/reset")
def reset_all_data(confirm: bool = False, catalog: Catalog = Depends(get_catalog)):
    """Dangerous: replace every collection with the built-in data. Requires confirm=true."""
    if not confirm:
        raise HTTPException(status_code=400, detail="Pass confirm=true")

    catalog.reseed()
    return {"ok": True}
