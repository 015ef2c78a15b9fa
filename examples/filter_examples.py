"""
treefilter — Filter grouping & evaluation examples.

Demonstrates path grouping, user/application combination, string
normalization and the unknown-operator diagnostic.

Run:  python examples/filter_examples.py
"""

from __future__ import annotations

import datetime as dt


def divider(title: str) -> None:
    print(f"\n{'=' * 70}")
    print(f"  {title}")
    print(f"{'=' * 70}\n")


# ──────────────────────────────────────────────────────────────────────
# Shared product catalogue
# ──────────────────────────────────────────────────────────────────────

PRODUCTS = [
    {"name": "Apple iPhone 15 Pro Max",   "brand": "Apple",   "category": "phone",  "price": 1199, "released": dt.date(2023, 9, 22), "specs": {"weight_g": 221}},
    {"name": "Samsung Galaxy S24 Ultra",  "brand": "Samsung", "category": "phone",  "price": 1299, "released": dt.date(2024, 1, 31), "specs": {"weight_g": 234}},
    {"name": "Google Pixel 8 Pro",        "brand": "Google",  "category": "phone",  "price":  899, "released": dt.date(2023, 10, 12), "specs": {"weight_g": 213}},
    {"name": "Apple MacBook Pro M3 Max",  "brand": "Apple",   "category": "laptop", "price": 3499, "released": dt.date(2023, 11, 7), "specs": {"weight_g": 1610}},
    {"name": "Sony WH-1000XM5",           "brand": "Sony",    "category": "audio",  "price":  349, "released": dt.date(2022, 5, 20), "specs": {"weight_g": 250}},
    {"name": "Café Crème Espresso Maker", "brand": None,      "category": "home",   "price":  129, "released": dt.date(2021, 3, 1)},
]


def main() -> None:
    from treefilter import (
        Filter,
        FilterConfig,
        FilterProcessor,
        MultiFilter,
        apply_filter,
        combine_filters,
        filter_to_json,
        group_filters,
    )

    def show(rows: list[dict]) -> None:
        for row in rows:
            print(f"  - {row['name']}  (${row['price']})")
        if not rows:
            print("  (no matches)")

    divider("1. Same path → OR, different paths → AND")
    tree = group_filters(
        [
            Filter("brand", "EQ", "apple"),
            Filter("price", "LT", 2000),
            Filter("brand", "EQ", "google"),
        ]
    )
    print(filter_to_json(tree))
    show(apply_filter(PRODUCTS, tree))

    divider("2. User filters AND application filters")
    tree = combine_filters(
        [Filter("category", "EQ", "phone")],
        [Filter("released", "GE", dt.date(2023, 10, 1))],
    )
    show(apply_filter(PRODUCTS, tree))

    divider("3. Ranges, nested attributes, strings")
    show(apply_filter(PRODUCTS, Filter("price", "BT", 300, 1200)))
    show(apply_filter(PRODUCTS, Filter("specs.weight_g", "LE", 221)))
    show(apply_filter(PRODUCTS, Filter("name", "Contains", "CREME")))
    show(apply_filter(PRODUCTS, Filter("name", "Contains", "CRÈME")))

    divider("4. Pre-built multi filters are kept intact")
    cheap_or_light = MultiFilter(
        [Filter("price", "LT", 400), Filter("specs.weight_g", "LT", 215)]
    )
    show(apply_filter(PRODUCTS, group_filters([cheap_or_light, Filter("category", "NE", "home")])))

    divider("5. Unknown operators fail open")
    seen: list[str] = []
    proc = FilterProcessor(FilterConfig(diagnostic_sink=seen.append))
    show(proc.filter(PRODUCTS, [Filter("brand", "LIKE", "A%")]))
    print(f"\n  diagnostics: {seen}")


if __name__ == "__main__":
    main()
