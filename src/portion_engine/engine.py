"""Module-level entry points backed by a single default engine."""

from functools import lru_cache

from portion_engine.containers import build_container
from portion_engine.domain.nutrition import (
    NutritionPer100,
    NutritionResult,
    PortionEstimate,
)
from portion_engine.domain.portions import PlausibilityCheck, PortionRecommendation
from portion_engine.domain.vision import SmartPortion
from portion_engine.services.calculator import format_nutrition_display
from portion_engine.services.engine import PortionEngine

__all__ = [
    "calculate",
    "default_engine",
    "estimate_portion",
    "format_nutrition_display",
    "recommend_portion",
    "validate",
]


@lru_cache(maxsize=1)
def default_engine() -> PortionEngine:
    """Return the process-wide engine built from environment settings."""
    return build_container().engine


def calculate(  # noqa: PLR0913
    food_name: str,
    unit_label: str,
    quantity: float,
    base_per_100: NutritionPer100,
    smart_portion: SmartPortion | None = None,
) -> NutritionResult:
    """Calculate nutrition with the default engine."""
    return default_engine().calculate(
        food_name, unit_label, quantity, base_per_100, smart_portion
    )


def recommend_portion(food_name: str) -> PortionRecommendation:
    """Recommend a canonical unit with the default engine."""
    return default_engine().recommend_portion(food_name)


def validate(
    food_name: str, calculated_calories: float, total_grams: float
) -> PlausibilityCheck:
    """Check calorie plausibility with the default engine."""
    return default_engine().validate(food_name, calculated_calories, total_grams)


def estimate_portion(food_name: str, base_per_100: NutritionPer100) -> PortionEstimate:
    """Recommend a unit and its nutrition with the default engine."""
    return default_engine().estimate_portion(food_name, base_per_100)
