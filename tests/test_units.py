"""Tests for unit table lookup and category multipliers."""

import pytest

from portion_engine.domain.matching import keywords
from portion_engine.domain.units import CanonicalUnitTable
from portion_engine.services.units import UnitResolver


def test_resolve_base_grams_known_units(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.resolve_base_grams("cup") == 120
    assert unit_resolver.resolve_base_grams("Glass") == 250
    assert unit_resolver.resolve_base_grams("  large   bowl ") == 225
    assert unit_resolver.resolve_base_grams("idli") == 30
    assert unit_resolver.resolve_base_grams("palm size") == 90


def test_resolve_base_grams_accepts_plurals(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.resolve_base_grams("pieces") == 15
    assert unit_resolver.resolve_base_grams("glasses") == 250


def test_unknown_unit_falls_back_to_serving(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.resolve_base_grams("unknown-unit-label") == 100


@pytest.mark.parametrize(
    ("food", "unit", "expected_grams"),
    [
        ("almonds", "piece", 1.2),
        ("roasted cashew", "piece", 1.5),
        ("walnuts", "piece", 4.0),
        ("mixed nuts", "piece", 4.5),
        ("mixed nuts", "handful", 18.0),
        ("spinach", "cup", 48.0),
        ("potato chips", "handful", 21.0),
        ("apple", "piece", 180.0),
        ("banana", "medium piece", 120.0),
        ("mango", "piece", 200.0),
    ],
)
def test_category_multiplier_adjusts_unit_weight(
    unit_resolver: UnitResolver, food: str, unit: str, expected_grams: float
) -> None:
    grams = unit_resolver.resolve_base_grams(unit) * unit_resolver.category_multiplier(
        food, unit
    )
    assert grams == pytest.approx(expected_grams)


def test_beverages_use_unit_multiplier(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.category_multiplier("orange juice", "piece") == 1.0
    assert unit_resolver.category_multiplier("almond milk", "handful") == 1.0


def test_word_boundaries_prevent_false_matches(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.category_multiplier("nutmeg", "piece") == 1.0
    assert unit_resolver.category_multiplier("pineapple", "piece") == 1.0


def test_unmatched_food_has_neutral_multiplier(unit_resolver: UnitResolver) -> None:
    assert unit_resolver.category_multiplier("unknown-xyz-food", "cup") == 1.0


def test_unit_table_is_read_only() -> None:
    table = CanonicalUnitTable({"serving": 100, "cup": 120})

    with pytest.raises(TypeError):
        table.entries["cup"] = 1  # type: ignore[index]


def test_unit_table_requires_fallback_entry() -> None:
    with pytest.raises(ValueError, match="Fallback unit"):
        CanonicalUnitTable({"cup": 120}, fallback_label="serving")


def test_resolvers_with_different_tables_are_independent() -> None:
    metric = UnitResolver(
        table=CanonicalUnitTable({"serving": 100, "cup": 250}), rules=()
    )
    custom = UnitResolver(
        table=CanonicalUnitTable({"portion": 80}, fallback_label="portion"), rules=()
    )

    assert metric.resolve_base_grams("cup") == 250
    assert custom.resolve_base_grams("cup") == 80


def test_keyword_pattern_matches_plurals_only_on_word_boundaries() -> None:
    pattern = keywords("mango", "hot dog")

    assert pattern.matches("Ripe Mangoes")
    assert pattern.matches("two hot dogs")
    assert not pattern.matches("mangosteen")
    assert not keywords().matches("anything")
