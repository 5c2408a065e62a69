"""Tests for calorie plausibility validation."""

from portion_engine.services.validation import PlausibilityValidator


def test_low_calorie_oil_is_flagged(validator: PlausibilityValidator) -> None:
    check = validator.validate("olive oil", 40, 100)

    assert check.is_valid is False
    assert check.category == "oils"
    assert check.calories_per_gram == 0.4
    assert check.warning == (
        "Calories seem too low (40 cal/100g). Expected 800-950 cal/100g."
    )


def test_high_calorie_vegetable_is_flagged(validator: PlausibilityValidator) -> None:
    check = validator.validate("spinach", 300, 100)

    assert check.is_valid is False
    assert check.warning is not None
    assert check.warning.startswith("Calories seem too high (300 cal/100g)")


def test_plausible_values_pass(validator: PlausibilityValidator) -> None:
    assert validator.validate("almonds", 579, 100).is_valid
    assert validator.validate("banana", 107, 120).is_valid
    assert validator.validate("Kingfisher beer", 279.5, 650).is_valid


def test_unmatched_food_uses_grains_range(validator: PlausibilityValidator) -> None:
    check = validator.validate("unknown-xyz-food", 195, 150)

    assert check.category == "grains"
    assert check.is_valid


def test_category_order_resolves_overlaps(validator: PlausibilityValidator) -> None:
    assert validator.expected_range("almond milk").category == "beverages"
    assert validator.expected_range("peanut butter").category == "nuts"
    assert validator.expected_range("vegetable oil").category == "oils"


def test_non_positive_grams_reported_without_error(
    validator: PlausibilityValidator,
) -> None:
    check = validator.validate("rice", 100, 0)

    assert check.is_valid is False
    assert check.calories_per_gram is None
    assert check.warning


def test_butter_dishes_are_not_judged_as_fat(
    validator: PlausibilityValidator,
) -> None:
    assert validator.expected_range("butter").category == "oils"
    assert validator.expected_range("Unsalted  Butter").category == "oils"
    assert validator.expected_range("butter chicken").category == "grains"
    assert validator.expected_range("butter naan").category == "grains"
    assert validator.validate("butter chicken", 150, 100).is_valid


def test_plain_butter_with_low_calories_is_flagged(
    validator: PlausibilityValidator,
) -> None:
    check = validator.validate("butter", 150, 100)

    assert check.is_valid is False
    assert check.category == "oils"
