#!/usr/bin/env python3
"""Costing report for every saved menu.

For each menu:
- average ingredient cost (one representative dish per course)
- cost / price ratio and profitability tier
  - <= 25%: high
  - <= 30%: attention
  -  > 30%: alert
- suggested cost of the included extras, from the restaurant settings

Reads the configured store (CATALOG_STORE / CATALOG_DATABASE_URL /
CATALOG_DATA_DIR). Missing slots are seeded unless --no-seed is given.

Run:
  python scripts/menu_report.py
  python scripts/menu_report.py --store files --data-dir ./data --json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pandas as pd

from catalog import config
from catalog.costing import classify_profitability, format_cost, included_extras_cost
from catalog.db import make_engine
from catalog.repositories import Catalog, open_catalog
from catalog.storage import FileSlotStore, Persistence, SqlSlotStore


def build_report(catalog: Catalog) -> pd.DataFrame:
    settings = catalog.settings.settings
    rows = []
    for menu in catalog.menus:
        p = classify_profitability(menu)
        rows.append(
            {
                "menu": menu.name,
                "meal_type": menu.meal_type,
                "dishes": len(menu.associated_dishes),
                "price": round(menu.price, 2),
                "avg_cost": round(p.average_cost, 2),
                "ratio_pct": None if p.ratio is None else round(p.ratio * 100, 1),
                "level": p.level.value,
                "extras_cost": round(included_extras_cost(menu, settings), 2),
            }
        )
    columns = ["menu", "meal_type", "dishes", "price", "avg_cost", "ratio_pct", "level", "extras_cost"]
    return pd.DataFrame(rows, columns=columns)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--store", choices=["sqlite", "files"], default=config.STORE_BACKEND)
    ap.add_argument("--database-url", default=config.DATABASE_URL)
    ap.add_argument("--data-dir", type=Path, default=config.DATA_DIR)
    ap.add_argument("--no-seed", action="store_true", help="do not seed missing slots")
    ap.add_argument("--json", action="store_true", help="print JSON records instead of a table")
    ap.add_argument("--level", help="only menus at this profitability level")
    ap.add_argument("--dishes", action="store_true", help="also list each menu's dish copies")
    args = ap.parse_args()

    config.configure_logging("WARNING")

    if args.store == "files":
        store = FileSlotStore(args.data_dir)
    else:
        store = SqlSlotStore(make_engine(args.database_url))

    catalog = open_catalog(Persistence(store), seed_defaults=not args.no_seed)
    df = build_report(catalog)
    if args.level:
        df = df[df["level"] == args.level]

    if args.json:
        print(json.dumps(json.loads(df.to_json(orient="records", force_ascii=False)), indent=2, ensure_ascii=False))
        return

    if df.empty:
        print("No menus.")
        return
    print(df.to_string(index=False))

    if args.dishes:
        for menu in catalog.menus:
            if args.level and classify_profitability(menu).level.value != args.level:
                continue
            print(f"\n{menu.name}")
            for dish in menu.associated_dishes:
                print(f"  [{dish.category}] {dish.title} {format_cost(dish.food_cost)}")


if __name__ == "__main__":
    main()
