from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

CATEGORIES = ["Aperitivo", "Entrantes", "Segundos", "Postres"]

MEAL_TYPES = ["Desayuno", "Almuerzo", "Cena"]

EVENT_STATUSES = ["Por enviar", "Por confirmar", "Confirmado"]
DEFAULT_EVENT_STATUS = EVENT_STATUSES[0]

EXTRAS = ["drink", "water", "bread", "coffee", "wine_pairing"]


class Slot(SQLModel, table=True):
    """One named blob of serialized catalog state."""

    name: str = Field(primary_key=True)
    content: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Dish(BaseModel):
    # inf and nan would be written as null and read back as a different value.
    model_config = ConfigDict(allow_inf_nan=False)

    id: UUID = PydanticField(default_factory=uuid4)
    title: str
    description: str = ""

    # None means the ingredient cost is unknown.
    food_cost: Optional[float] = PydanticField(default=None, ge=0)

    # Free-form tags, not validated against any list.
    allergens: list[str] = PydanticField(default_factory=list)
    types: list[str] = PydanticField(default_factory=list)

    category: str = CATEGORIES[0]


class Menu(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: UUID = PydanticField(default_factory=uuid4)
    name: str
    description: str = ""
    price: float = PydanticField(default=0.0, ge=0)

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

    # Detached copies of catalog dishes, see service.snapshot_dish.
    associated_dishes: list[Dish] = PydanticField(default_factory=list)

    def included_extras(self) -> list[tuple[str, str]]:
        """(extra, description) for every extra this menu includes."""
        return [
            (extra, getattr(self, f"{extra}_description"))
            for extra in EXTRAS
            if getattr(self, f"is_{extra}_included")
        ]


class Event(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: UUID = PydanticField(default_factory=uuid4)
    name: str
    description: str = ""
    date: datetime
    service_type: str = "Cena"
    number_of_guests: int = PydanticField(default=1, ge=1)
    estimated_duration: str = ""
    min_price: float = 0.0
    max_price: float = 0.0
    additional_notes: str = ""
    status: str = DEFAULT_EVENT_STATUS

    @field_validator("date")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        # Dates are stored naive; aware input is converted to UTC first.
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class RestaurantSettings(BaseModel):
    # Logo bytes travel as base64 inside the JSON slot.
    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64", allow_inf_nan=False)

    restaurant_name: str = ""
    restaurant_slogan: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address_street: str = ""
    address_city: str = ""
    address_postal_code: str = ""
    address_country: str = ""
    logo_data: Optional[bytes] = None

    # Suggested unit costs of the extras a menu can include.
    cost_included_drink: float = 0.0
    cost_included_water: float = 0.0
    cost_included_bread: float = 0.0
    cost_included_coffee: float = 0.0
    cost_included_wine_pairing: float = 0.0
