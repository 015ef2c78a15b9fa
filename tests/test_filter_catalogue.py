"""End-to-end filtering of a product catalogue.

Uses Faker to generate realistic records at scale and checks the grouped
trees against plain Python predicates.
"""

from __future__ import annotations

import datetime as dt
import random
from typing import Any

import pytest
from faker import Faker

from treefilter import (
    CustomFilter,
    Filter,
    FilterProcessor,
    FilterTypeMismatchError,
    MultiFilter,
    apply_filter,
    combine_filters,
    group_filters,
)

fake = Faker()
Faker.seed(42)
rng = random.Random(42)

# ── Fixtures: Faker-generated product catalogue ─────────────────

BRANDS = ["Apple", "Samsung", "Google", "Sony", "LG", "Huawei", "Xiaomi", "OnePlus"]
CATEGORIES = ["phone", "tablet", "laptop", "watch", "headphones", "tv", "camera"]
COLORS = ["black", "white", "silver", "gold", "blue", "red", "green"]


def _make_product(idx: int) -> dict[str, Any]:
    """Generate a single fake product."""
    product: dict[str, Any] = {
        "id": idx,
        "name": f"{fake.word().capitalize()} {rng.choice(CATEGORIES).capitalize()}",
        "brand": rng.choice(BRANDS),
        "category": rng.choice(CATEGORIES),
        "price": round(rng.uniform(49.99, 2999.99), 2),
        "rating": round(rng.uniform(1.0, 5.0), 1),
        "color": rng.choice(COLORS),
        "released": fake.date_time_between(
            start_date=dt.datetime(2020, 1, 1), end_date=dt.datetime(2024, 12, 31)
        ),
        "specs": {"weight_g": rng.randint(100, 2000)},
        "description": fake.sentence(nb_words=8),
    }
    if rng.random() < 0.1:
        product["brand"] = None
    if rng.random() < 0.05:
        del product["color"]
    return product


CATALOGUE = [_make_product(i) for i in range(300)]


def _ids(records: list[dict[str, Any]]) -> list[int]:
    return [r["id"] for r in records]


@pytest.fixture()
def catalogue() -> list[dict[str, Any]]:
    return list(CATALOGUE)


# ── Grouped filters vs. plain predicates ────────────────────────


class TestCatalogueGrouping:
    def test_brand_or(self, catalogue: list[dict[str, Any]]) -> None:
        tree = group_filters([Filter("brand", "EQ", "apple"), Filter("brand", "EQ", "SONY")])
        expected = [p for p in catalogue if p["brand"] in ("Apple", "Sony")]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_brand_and_price(self, catalogue: list[dict[str, Any]]) -> None:
        tree = group_filters(
            [
                Filter("brand", "EQ", "Samsung"),
                Filter("price", "LT", 1000),
                Filter("brand", "EQ", "Google"),
            ]
        )
        expected = [
            p
            for p in catalogue
            if p["brand"] in ("Samsung", "Google") and p["price"] < 1000
        ]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_price_range(self, catalogue: list[dict[str, Any]]) -> None:
        tree = Filter("price", "BT", 500, 1500)
        expected = [p for p in catalogue if 500 <= p["price"] <= 1500]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_nested_attribute(self, catalogue: list[dict[str, Any]]) -> None:
        tree = Filter("specs.weight_g", "LE", 500)
        expected = [p for p in catalogue if p["specs"]["weight_g"] <= 500]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_missing_color_excluded(self, catalogue: list[dict[str, Any]]) -> None:
        tree = Filter("color", "NE", "red")
        expected = [p for p in catalogue if "color" in p and p["color"] != "red"]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_null_brand_contains_is_false(self, catalogue: list[dict[str, Any]]) -> None:
        tree = Filter("brand", "Contains", "o")
        expected = [p for p in catalogue if p["brand"] and "O" in p["brand"].upper()]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_released_after(self, catalogue: list[dict[str, Any]]) -> None:
        cutoff = dt.datetime(2023, 1, 1)
        tree = Filter("released", "GE", cutoff)
        expected = [p for p in catalogue if p["released"] >= cutoff]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_description_starts_with(self, catalogue: list[dict[str, Any]]) -> None:
        first = catalogue[0]["description"].split()[0]
        tree = Filter("description", "StartsWith", first.lower())
        expected = [
            p for p in catalogue if p["description"].upper().startswith(first.upper())
        ]
        result = apply_filter(catalogue, tree)
        assert catalogue[0] in result
        assert _ids(result) == _ids(expected)

    def test_numeric_contains_raises(self, catalogue: list[dict[str, Any]]) -> None:
        with pytest.raises(FilterTypeMismatchError):
            apply_filter(catalogue, Filter("price", "Contains", "9"))


class TestCatalogueCombination:
    def test_user_and_application(self, catalogue: list[dict[str, Any]]) -> None:
        user = [Filter("category", "EQ", "phone"), Filter("category", "EQ", "tablet")]
        application = [Filter("rating", "GE", 4.0)]
        tree = combine_filters(user, application)
        assert isinstance(tree, MultiFilter) and tree.and_
        expected = [
            p
            for p in catalogue
            if p["category"] in ("phone", "tablet") and p["rating"] >= 4.0
        ]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_prebuilt_multi_filter(self, catalogue: list[dict[str, Any]]) -> None:
        cheap_or_light = MultiFilter(
            [Filter("price", "LT", 200), Filter("specs.weight_g", "LT", 200)]
        )
        tree = group_filters([cheap_or_light, Filter("color", "EQ", "black")])
        expected = [
            p
            for p in catalogue
            if (p["price"] < 200 or p["specs"]["weight_g"] < 200)
            and p.get("color") == "black"
        ]
        assert _ids(apply_filter(catalogue, tree)) == _ids(expected)

    def test_processor_filter(self, catalogue: list[dict[str, Any]]) -> None:
        proc = FilterProcessor()
        even = CustomFilter("id", lambda v: v % 2 == 0)
        result = proc.filter(catalogue, [even], [Filter("brand", "NE", "LG")])
        expected = [p for p in catalogue if p["id"] % 2 == 0 and p["brand"] != "LG"]
        assert _ids(result) == _ids(expected)

    def test_catalogue_untouched(self, catalogue: list[dict[str, Any]]) -> None:
        before = list(catalogue)
        apply_filter(catalogue, Filter("brand", "EQ", "Apple"))
        assert catalogue == before
