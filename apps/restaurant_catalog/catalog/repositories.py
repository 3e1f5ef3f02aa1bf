"""In-memory catalog collections, written through to their storage slot.

Each manager owns one collection and one slot. Every mutation is applied in
memory first and then the whole collection is saved; a failed save is
logged by the persistence layer and does not undo the mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, Optional, TypeVar
from uuid import UUID

from . import seed
from .models import Dish, Event, Menu, RestaurantSettings
from .storage import Absent, Persistence

log = logging.getLogger(__name__)

T = TypeVar("T", Dish, Menu, Event)

DISHES_SLOT = "dishes.json"
MENUS_SLOT = "menus.json"
EVENTS_SLOT = "events.json"
SETTINGS_SLOT = "settings.json"


class CollectionManager(Generic[T]):
    slot: str
    item_type: type

    def __init__(self, persistence: Persistence, slot: Optional[str] = None):
        self.persistence = persistence
        if slot is not None:
            self.slot = slot
        self._items: list[T] = []
        self._listeners: list[Callable[[tuple[T, ...]], None]] = []

    @property
    def collection_type(self):
        return list[self.item_type]

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: UUID) -> Optional[T]:
        """A detached copy of the entity with ``item_id``; edits need ``update`` to stick."""
        found = next((it for it in self._items if it.id == item_id), None)
        return None if found is None else found.model_copy(deep=True)

    def subscribe(self, listener: Callable[[tuple[T, ...]], None]) -> Callable[[], None]:
        """Call ``listener`` with the new collection after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> bool:
        result = self.persistence.load(self.collection_type, self.slot)
        if isinstance(result, Absent):
            self._items = []
            self._notify()
            return False
        self._items = list(result.value)
        self._notify()
        return True

    def load_or_seed(self, defaults: Optional[Callable[[], list[T]]] = None) -> bool:
        """Load the slot, or fill it from ``defaults`` and save right away.

        Returns True when the defaults were used.
        """
        if self.load():
            return False
        log.info("Seeding %s with %s", self.slot, "defaults" if defaults else "an empty collection")
        self.reset(defaults)
        return True

    def reset(self, defaults: Optional[Callable[[], list[T]]] = None) -> None:
        self._items = list(defaults()) if defaults else []
        self._commit()

    def save(self) -> None:
        self.persistence.save(self._items, self.slot, self.collection_type)

    def add(self, item: T) -> T:
        self._items.append(item)
        self._commit()
        return item

    def update(self, item: T) -> bool:
        idx = self._index(item.id)
        if idx is not None:
            self._items[idx] = item
        else:
            log.debug("update: no %s with id %s", self.item_type.__name__, item.id)
        # Saved even when nothing matched.
        self._commit()
        return idx is not None

    def delete(self, item: T) -> bool:
        idx = self._index(item.id)
        if idx is not None:
            del self._items[idx]
        else:
            log.debug("delete: no %s with id %s", self.item_type.__name__, item.id)
        self._commit()
        return idx is not None

    def _index(self, item_id: UUID) -> Optional[int]:
        return next((i for i, it in enumerate(self._items) if it.id == item_id), None)

    def _commit(self) -> None:
        self.save()
        self._notify()

    def _notify(self) -> None:
        snapshot = self.items
        for listener in list(self._listeners):
            listener(snapshot)


class DishManager(CollectionManager[Dish]):
    slot = DISHES_SLOT
    item_type = Dish


class MenuManager(CollectionManager[Menu]):
    slot = MENUS_SLOT
    item_type = Menu


class EventManager(CollectionManager[Event]):
    slot = EVENTS_SLOT
    item_type = Event


class SettingsManager:
    """The single RestaurantSettings record, same write-through rules."""

    slot = SETTINGS_SLOT

    def __init__(self, persistence: Persistence, slot: Optional[str] = None):
        self.persistence = persistence
        if slot is not None:
            self.slot = slot
        self._settings = seed.blank_settings()
        self._listeners: list[Callable[[RestaurantSettings], None]] = []

    @property
    def settings(self) -> RestaurantSettings:
        return self._settings

    def subscribe(self, listener: Callable[[RestaurantSettings], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> bool:
        result = self.persistence.load(RestaurantSettings, self.slot)
        if isinstance(result, Absent):
            self._settings = seed.blank_settings()
            self._notify()
            return False
        self._settings = result.value
        self._notify()
        return True

    def load_or_seed(self, defaults: Optional[Callable[[], RestaurantSettings]] = None) -> bool:
        if self.load():
            return False
        log.info("Seeding %s", self.slot)
        self.reset(defaults)
        return True

    def reset(self, defaults: Optional[Callable[[], RestaurantSettings]] = None) -> None:
        self._settings = defaults() if defaults else seed.blank_settings()
        self._commit()

    def save(self) -> None:
        self.persistence.save(self._settings, self.slot, RestaurantSettings)

    def update(self, settings: RestaurantSettings) -> RestaurantSettings:
        self._settings = settings
        self._commit()
        return settings

    def set_logo(self, data: Optional[bytes]) -> RestaurantSettings:
        return self.update(self._settings.model_copy(update={"logo_data": data or None}))

    def _commit(self) -> None:
        self.save()
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._settings)


@dataclass
class Catalog:
    dishes: DishManager
    menus: MenuManager
    events: EventManager
    settings: SettingsManager
    seed_defaults: bool = True
    seeded_slots: list[str] = field(default_factory=list)

    def reseed(self) -> None:
        """Replace every collection with its built-in data (or empty ones)."""
        if self.seed_defaults:
            self.dishes.reset(seed.default_dishes)
            self.menus.reset(seed.default_menus)
            self.events.reset(seed.default_events)
            self.settings.reset(seed.default_settings)
        else:
            self.dishes.reset()
            self.menus.reset()
            self.events.reset()
            self.settings.reset()


def open_catalog(persistence: Persistence, seed_defaults: bool = True) -> Catalog:
    catalog = Catalog(
        dishes=DishManager(persistence),
        menus=MenuManager(persistence),
        events=EventManager(persistence),
        settings=SettingsManager(persistence),
        seed_defaults=seed_defaults,
    )

    steps = [
        (catalog.dishes, seed.default_dishes),
        (catalog.menus, seed.default_menus),
        (catalog.events, seed.default_events),
        (catalog.settings, seed.default_settings),
    ]
    for manager, defaults in steps:
        if manager.load_or_seed(defaults if seed_defaults else None):
            catalog.seeded_slots.append(manager.slot)

    log.info(
        "Catalog ready: %d dishes, %d menus, %d events",
        len(catalog.dishes),
        len(catalog.menus),
        len(catalog.events),
    )
    return catalog
