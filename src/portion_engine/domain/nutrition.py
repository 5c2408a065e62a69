"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum

from portion_engine.domain.portions import PortionRecommendation


@dataclass(frozen=True)
class NutritionPer100:
    """Nutrition per 100 g (or 100 ml) of a food.

    Values are expected to be non-negative; the caller is responsible for
    rejecting bad rows before they reach the calculator.
    """

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


class PortionSource(Enum):
    """Resolution strategy that produced a nutrition result."""

    SMART_PORTION = "smart_portion"
    EXTRACTED_UNIT = "extracted_unit"
    TABLE_LOOKUP = "table_lookup"


@dataclass(frozen=True)
class NutritionResult:
    """Scaled nutrition for a quantity of a unit of food."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    total_grams: float
    gram_equivalent_label: str
    source_used: PortionSource
    smart_portion_info: str | None = None


@dataclass(frozen=True)
class PortionEstimate:
    """Recommended portion together with the nutrition of one such portion."""

    recommendation: PortionRecommendation
    nutrition: NutritionResult
