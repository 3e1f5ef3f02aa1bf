from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .models import DEFAULT_EVENT_STATUS


class DishWrite(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    title: str
    description: str = ""
    food_cost: Optional[float] = Field(default=None, ge=0)
    allergens: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)
    category: str = "Aperitivo"


class MenuWrite(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    description: str = ""
    price: float = Field(default=0.0, ge=0)
    is_drink_included: bool = False
    drink_description: str = ""
    is_water_included: bool = False
    water_description: str = ""
    is_bread_included: bool = False
    bread_description: str = ""
    is_coffee_included: bool = False
    coffee_description: str = ""
    is_wine_pairing_included: bool = False
    wine_pairing_description: str = ""
    meal_type: str = "Almuerzo"


class MenuCreate(MenuWrite):
    # Catalog dishes to copy into the new menu.
    dish_ids: list[UUID] = Field(default_factory=list)


class MenuDishesUpdate(BaseModel):
    dish_ids: list[UUID]


class EventWrite(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    description: str = ""
    date: datetime
    service_type: str = "Cena"
    number_of_guests: int = Field(default=1, ge=1)
    estimated_duration: str = ""
    min_price: float = 0.0
    max_price: float = 0.0
    additional_notes: str = ""
    status: str = DEFAULT_EVENT_STATUS


class SettingsWrite(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    restaurant_name: str = ""
    restaurant_slogan: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address_street: str = ""
    address_city: str = ""
    address_postal_code: str = ""
    address_country: str = ""
    cost_included_drink: float = 0.0
    cost_included_water: float = 0.0
    cost_included_bread: float = 0.0
    cost_included_coffee: float = 0.0
    cost_included_wine_pairing: float = 0.0


class SettingsRead(SettingsWrite):
    has_logo: bool = False


class CostingPreviewRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    price: float = Field(ge=0)
    dish_ids: list[UUID] = Field(default_factory=list)


class ProfitabilityRead(BaseModel):
    menu_id: Optional[UUID] = None
    price: float
    average_cost: float
    ratio: Optional[float] = None
    level: str
    message: str
    extras_cost: float = 0.0


class HealthResponse(BaseModel):
    ok: bool
    store: str
