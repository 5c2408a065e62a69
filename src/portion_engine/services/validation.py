"""Plausibility checks for calculated calorie densities."""

import logging
from dataclasses import dataclass

from portion_engine.domain.portions import PlausibilityCheck, PlausibilityRange

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlausibilityValidator:
    """Flags calories-per-gram values outside a food category's usual band.

    The check is advisory: it reports a warning and never corrects data.
    """

    ranges: tuple[PlausibilityRange, ...]
    default_range: PlausibilityRange
    debug: bool = False

    def validate(
        self, food_name: str, calculated_calories: float, total_grams: float
    ) -> PlausibilityCheck:
        """Compare calories per gram against the expected category range."""
        expected = self.expected_range(food_name)
        if total_grams <= 0:
            return PlausibilityCheck(
                is_valid=False,
                category=expected.category,
                warning="Cannot check calories without a positive portion weight.",
            )

        calories_per_gram = calculated_calories / total_grams
        per_100g = round(calories_per_gram * 100)
        warning = None
        if calories_per_gram < expected.min_calories_per_gram:
            warning = (
                f"Calories seem too low ({per_100g} cal/100g). "
                f"Expected {expected.describe()}."
            )
        elif calories_per_gram > expected.max_calories_per_gram:
            warning = (
                f"Calories seem too high ({per_100g} cal/100g). "
                f"Expected {expected.describe()}."
            )

        if warning and self.debug:
            _logger.info("Implausible calories for %r: %s", food_name, warning)
        return PlausibilityCheck(
            is_valid=warning is None,
            category=expected.category,
            calories_per_gram=calories_per_gram,
            warning=warning,
        )

    def expected_range(self, food_name: str) -> PlausibilityRange:
        """Return the first range whose keywords match, else the default."""
        for candidate in self.ranges:
            if candidate.matches(food_name):
                return candidate
        return self.default_range
