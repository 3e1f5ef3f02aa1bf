"""Built-in catalog data.

Used to populate any slot that has no saved state yet (first run, or a
slot that no longer decodes).

Run:
  python -m catalog.seed
"""

from __future__ import annotations

from datetime import datetime

from .models import Dish, Event, Menu, RestaurantSettings

DRINK_DESCRIPTION = "Este menú incluye una bebida por persona (vino, cerveza, agua o refresco)."
WATER_DESCRIPTION = "Agua embotellada/filtrada incluida en el menú sin coste adicional."
BREAD_DESCRIPTION = "Servicio de pan incluido en el menú."
COFFEE_DESCRIPTION = "Este menú incluye un café por persona al finalizar la comida."
WINE_PAIRING_DESCRIPTION = "Ofrecemos un maridaje de vinos recomendado para cada plato."


def default_dishes() -> list[Dish]:
    return [
        # Aperitivo
        Dish(
            title="Bruschetta Caprese",
            description="Rebanadas de pan crujiente con tomate fresco, albahaca y queso mozzarella.",
            food_cost=0.85,
            allergens=["Gluten", "Lácteos"],
            types=["Vegetariano"],
            category="Aperitivo",
        ),
        Dish(
            title="Croquetas de jamón ibérico",
            description="Croquetas cremosas con bechamel y trocitos de jamón ibérico.",
            food_cost=1.30,
            allergens=["Gluten", "Lácteos"],
            types=[],
            category="Aperitivo",
        ),
        Dish(
            title="Rollitos de pepino con hummus",
            description="Pepino relleno de hummus clásico, aromatizado con especias.",
            food_cost=0.95,
            allergens=["Sésamo"],
            types=["Vegano", "Sin Gluten"],
            category="Aperitivo",
        ),
        # Entrantes
        Dish(
            title="Ensalada griega",
            description="Lechuga, tomate, pepino, cebolla roja, aceitunas y queso feta.",
            food_cost=1.55,
            allergens=["Lácteos"],
            types=["Vegetariano"],
            category="Entrantes",
        ),
        Dish(
            title="Crema de calabaza",
            description="Puré de calabaza, cebolla y caldo de verduras, con un chorrito de aceite.",
            food_cost=0.85,
            allergens=["Apio", "Sulfitos"],
            types=["Vegano", "Sin Gluten"],
            category="Entrantes",
        ),
        Dish(
            title="Gazpacho andaluz",
            description="Tomate, pepino, pimiento, ajo, aceite de oliva y vinagre.",
            food_cost=0.80,
            allergens=[],
            types=["Vegano", "Sin Gluten"],
            category="Entrantes",
        ),
        # Segundos
        Dish(
            title="Pollo al curry con arroz",
            description="Pollo en leche de coco al curry, acompañado de arroz basmati.",
            food_cost=1.50,
            allergens=["Sulfitos", "Lácteos"],
            types=["Sin Gluten"],
            category="Segundos",
        ),
        Dish(
            title="Lasaña de vegetales",
            description="Capas de pasta, calabacín, berenjena, salsa de tomate y queso.",
            food_cost=1.50,
            allergens=["Gluten", "Lácteos"],
            types=["Vegetariano"],
            category="Segundos",
        ),
        Dish(
            title="Salmón con limón y eneldo",
            description="Lomos de salmón horneados con una salsa ligera de limón y mantequilla.",
            food_cost=2.75,
            allergens=["Pescado", "Lácteos"],
            types=["Sin Gluten"],
            category="Segundos",
        ),
        # Postres
        Dish(
            title="Tarta de queso",
            description="Base de galletas y mezcla horneada de queso crema, huevos y azúcar.",
            food_cost=0.58,
            allergens=["Gluten", "Lácteos", "Huevos"],
            types=[],
            category="Postres",
        ),
        Dish(
            title="Mousse de chocolate",
            description="Crema suave a base de chocolate fundido, huevos y nata.",
            food_cost=0.62,
            allergens=["Lácteos", "Huevos"],
            types=["Sin Gluten"],
            category="Postres",
        ),
        Dish(
            title="Macedonia de frutas frescas",
            description="Frutas de temporada con zumo de naranja natural.",
            food_cost=0.80,
            allergens=[],
            types=["Vegano", "Vegetariano", "Sin Gluten"],
            category="Postres",
        ),
    ]


def _menu(name: str, description: str, price: float, meal_type: str) -> Menu:
    # Seed menus include no extras and no dishes; the descriptions are kept
    # so that switching an extra on shows sensible copy.
    return Menu(
        name=name,
        description=description,
        price=price,
        drink_description=DRINK_DESCRIPTION,
        water_description=WATER_DESCRIPTION,
        bread_description=BREAD_DESCRIPTION,
        coffee_description=COFFEE_DESCRIPTION,
        wine_pairing_description=WINE_PAIRING_DESCRIPTION,
        meal_type=meal_type,
    )


def default_menus() -> list[Menu]:
    return [
        _menu("Menú del día", "Almuerzo diario con platos fijos a precio cerrado.", 12.00, "Almuerzo"),
        _menu(
            "Menú desayuno fin de semana",
            "Propuestas especiales para sábados, domingos y festivos.",
            12.00,
            "Desayuno",
        ),
        _menu("Menú fin de semana", "Propuestas especiales para sábados, domingos y festivos.", 25.00, "Almuerzo"),
        _menu("Menú degustación", "Recorrido de pequeños platos con opción de maridaje.", 24.00, "Cena"),
        _menu("Menú de temporada", "Platos basados en ingredientes frescos de estación.", 22.00, "Almuerzo"),
        _menu("Menú para grupos", "Opciones personalizadas para celebraciones con precio por persona.", 0.00, "Almuerzo"),
        _menu("Menú para empresas", "Opciones personalizadas para celebraciones con precio por persona.", 0.00, "Cena"),
    ]


def default_events() -> list[Event]:
    return [
        Event(
            name="Cena de empresa Tech Solutions",
            description="Encuentro anual de los empleados de Tech Solutions, con un menú especial...",
            date=datetime(2025, 1, 20, 20, 30),
            service_type="Cena",
            number_of_guests=50,
            estimated_duration="3 horas",
            min_price=45.0,
            max_price=65.0,
            additional_notes=(
                "Habrá opciones veganas y sin gluten. "
                "Se habilitará un espacio para proyecciones y discursos."
            ),
        ),
        Event(
            name="50º Cumpleaños de Marta Gómez",
            description="Celebración íntima del 50º cumpleaños de Marta Gómez, con un menú especial...",
            date=datetime(2025, 3, 15, 14, 0),
            service_type="Almuerzo",
            number_of_guests=20,
            estimated_duration="4 horas",
            min_price=45.0,
            max_price=65.0,
            additional_notes="Decoración personalizada incluida. Se ofrecerá cava para el brindis.",
        ),
        Event(
            name="Aniversario de Laura y Javier",
            description="Celebración de las bodas de plata de Laura y Javier, con un menú degustación...",
            date=datetime(2025, 6, 10, 19, 0),
            service_type="Cena",
            number_of_guests=40,
            estimated_duration="3 horas",
            min_price=45.0,
            max_price=65.0,
            additional_notes="Incluye tarta conmemorativa y un brindis especial con cava del Penedès.",
        ),
        Event(
            name="Cena fin de curso de Bachillerato",
            description="Despedida del curso con los estudiantes de último año de bachillerato...",
            date=datetime(2025, 6, 27, 20, 0),
            service_type="Cena",
            number_of_guests=70,
            estimated_duration="4 horas",
            min_price=45.0,
            max_price=65.0,
            additional_notes="Incluye DJ en vivo y opciones vegetarianas.",
        ),
        Event(
            name="80º Cumpleaños de Josep Costa",
            description="Celebración del 80º cumpleaños de Josep con su familia y amigos más cercanos...",
            date=datetime(2025, 9, 5, 13, 30),
            service_type="Almuerzo",
            number_of_guests=30,
            estimated_duration="3 horas",
            min_price=45.0,
            max_price=65.0,
            additional_notes=(
                "Se habilitará un proyector para videos familiares. "
                "Habrá un menú especial para niños."
            ),
        ),
    ]


def default_settings() -> RestaurantSettings:
    return RestaurantSettings(
        restaurant_name="Mi Restaurante",
        restaurant_slogan="Tu eslogan aquí",
        email="info@restaurante.com",
        phone="555-1234",
        website="www.restaurante.com",
        address_street="Calle Principal 123",
        address_city="Barcelona",
        address_postal_code="08000",
        address_country="España",
        cost_included_drink=0.75,
        cost_included_water=0.25,
        cost_included_bread=0.15,
        cost_included_coffee=0.30,
        cost_included_wine_pairing=4.00,
    )


def blank_settings() -> RestaurantSettings:
    return RestaurantSettings()


def main() -> None:
    from . import config
    from .repositories import open_catalog
    from .storage import Persistence, make_store

    config.configure_logging()
    store = make_store()
    seeded = open_catalog(Persistence(store), seed_defaults=config.SEED_DEFAULTS).seeded_slots

    if not seeded:
        print(f"{store!r} already has data; skipping seed.")
        return
    print(f"Seeded {', '.join(seeded)} in {store!r}.")


if __name__ == "__main__":
    main()
