"""Tests for unit label gram extraction."""

import pytest

from portion_engine.services.extraction import extract_grams_or_ml


def test_extracts_grams_in_parentheses() -> None:
    assert extract_grams_or_ml("medium portion (150g)") == 150


def test_extracts_millilitres_in_parentheses() -> None:
    assert extract_grams_or_ml("glass (250ml)") == 250


def test_extracts_leading_gram_amount() -> None:
    assert extract_grams_or_ml("250g serving") == 250


def test_returns_none_without_amount() -> None:
    assert extract_grams_or_ml("piece") is None
    assert extract_grams_or_ml("") is None


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Bowl (200G)", 200),
        ("cup (240 ML)", 240),
        ("12.5g", 12.5),
        ("bottle/big can (650ml)", 650),
    ],
)
def test_extraction_is_case_insensitive_and_accepts_decimals(
    label: str, expected: float
) -> None:
    assert extract_grams_or_ml(label) == expected


def test_grams_take_priority_over_millilitres() -> None:
    assert extract_grams_or_ml("combo (330ml) with fries (100g)") == 100


def test_does_not_read_counts_as_grams() -> None:
    assert extract_grams_or_ml("2 glasses") is None


@pytest.mark.parametrize("label", ["250 grams", "250 gram serving", "250 Grams"])
def test_extracts_leading_amount_spelled_out_in_grams(label: str) -> None:
    assert extract_grams_or_ml(label) == 250
