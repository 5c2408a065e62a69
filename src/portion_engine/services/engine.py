"""Facade combining calculation, recommendation and validation."""

from dataclasses import dataclass

from portion_engine.domain.nutrition import (
    NutritionPer100,
    NutritionResult,
    PortionEstimate,
)
from portion_engine.domain.portions import PlausibilityCheck, PortionRecommendation
from portion_engine.domain.vision import SmartPortion
from portion_engine.services.calculator import NutritionCalculator
from portion_engine.services.recommendations import PortionRecommender
from portion_engine.services.validation import PlausibilityValidator


@dataclass(frozen=True)
class PortionEngine:
    """Single object exposing the engine operations."""

    calculator: NutritionCalculator
    recommender: PortionRecommender
    validator: PlausibilityValidator

    def calculate(  # noqa: PLR0913
        self,
        food_name: str,
        unit_label: str,
        quantity: float,
        base_per_100: NutritionPer100,
        smart_portion: SmartPortion | None = None,
    ) -> NutritionResult:
        return self.calculator.calculate(
            food_name, unit_label, quantity, base_per_100, smart_portion
        )

    def recommend_portion(self, food_name: str) -> PortionRecommendation:
        return self.recommender.recommend(food_name)

    def validate(
        self, food_name: str, calculated_calories: float, total_grams: float
    ) -> PlausibilityCheck:
        return self.validator.validate(food_name, calculated_calories, total_grams)

    def estimate_portion(
        self, food_name: str, base_per_100: NutritionPer100
    ) -> PortionEstimate:
        """Recommend a unit and compute nutrition for one such unit."""
        recommendation = self.recommend_portion(food_name)
        nutrition = self.calculate(
            food_name, recommendation.canonical_unit_label, 1, base_per_100
        )
        return PortionEstimate(recommendation=recommendation, nutrition=nutrition)
