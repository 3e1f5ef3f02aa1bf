from __future__ import annotations

from collections import Counter

from catalog import seed
from catalog.models import CATEGORIES, EVENT_STATUSES


def test_default_dishes_cover_every_course():
    dishes = seed.default_dishes()

    assert len(dishes) == 12
    assert Counter(d.category for d in dishes) == {c: 3 for c in CATEGORIES}
    assert all(d.food_cost is not None and d.food_cost > 0 for d in dishes)


def test_default_menus_start_without_dishes_or_extras():
    menus = seed.default_menus()

    assert len(menus) == 7
    assert all(m.associated_dishes == [] for m in menus)
    assert all(m.included_extras() == [] for m in menus)
    assert [m.price for m in menus if m.price == 0] == [0.0, 0.0]


def test_default_events():
    events = seed.default_events()

    assert len(events) == 5
    assert {e.status for e in events} == {EVENT_STATUSES[0]}
    assert all(e.min_price == 45.0 and e.max_price == 65.0 for e in events)


def test_factories_return_fresh_objects():
    a, b = seed.default_dishes(), seed.default_dishes()

    assert a[0] is not b[0]
    assert a[0].id != b[0].id


def test_default_settings_unit_costs():
    s = seed.default_settings()

    assert (
        s.cost_included_drink,
        s.cost_included_water,
        s.cost_included_bread,
        s.cost_included_coffee,
        s.cost_included_wine_pairing,
    ) == (0.75, 0.25, 0.15, 0.30, 4.00)
    assert s.logo_data is None
    assert seed.blank_settings().restaurant_name == ""


def test_seed_main_seeds_once(monkeypatch, store, capsys):
    monkeypatch.setattr("catalog.config.configure_logging", lambda level=None: None)
    monkeypatch.setattr("catalog.config.SEED_DEFAULTS", True)
    monkeypatch.setattr("catalog.storage.make_store", lambda: store)

    seed.main()
    assert "Seeded dishes.json, menus.json, events.json, settings.json" in capsys.readouterr().out

    seed.main()
    assert "already has data" in capsys.readouterr().out
