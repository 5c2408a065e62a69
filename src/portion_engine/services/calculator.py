"""Nutrition calculation for a quantity of a unit of food."""

import logging
import math
from dataclasses import dataclass

from portion_engine.domain.nutrition import (
    NutritionPer100,
    NutritionResult,
    PortionSource,
)
from portion_engine.domain.vision import SmartPortion
from portion_engine.services.extraction import extract_grams_or_ml
from portion_engine.services.units import UnitResolver

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutritionCalculator:
    """Scales per-100 nutrition to a concrete portion.

    Resolution order is strict: an AI smart portion wins over a gram/ml amount
    embedded in the unit label, which wins over the unit table. Quantity is
    applied linearly in every branch and is not validated here.
    """

    resolver: UnitResolver
    debug: bool = False

    def calculate(  # noqa: PLR0913
        self,
        food_name: str,
        unit_label: str,
        quantity: float,
        base_per_100: NutritionPer100,
        smart_portion: SmartPortion | None = None,
    ) -> NutritionResult:
        """Return rounded nutrition for quantity x unit_label of food_name."""
        if quantity <= 0:
            _logger.warning(
                "Non-positive quantity %s for %r; result is not meaningful",
                quantity,
                food_name,
            )

        if smart_portion is not None and smart_portion.is_complete:
            return self._from_smart_portion(quantity, base_per_100, smart_portion)

        extracted = extract_grams_or_ml(unit_label)
        if extracted is not None:
            source = PortionSource.EXTRACTED_UNIT
            grams_per_unit = extracted
        else:
            source = PortionSource.TABLE_LOOKUP
            grams_per_unit = self.resolver.resolve_base_grams(
                unit_label
            ) * self.resolver.category_multiplier(food_name, unit_label)

        total_grams = grams_per_unit * quantity
        if self.debug:
            _logger.info(
                "Portion %r x %s of %r resolved via %s: %sg",
                unit_label,
                quantity,
                food_name,
                source.value,
                total_grams,
            )
        ratio = total_grams / 100
        return NutritionResult(
            calories=round_half_up(base_per_100.calories * ratio),
            protein_g=round_half_up(base_per_100.protein_g * ratio),
            carbs_g=round_half_up(base_per_100.carbs_g * ratio),
            fat_g=round_half_up(base_per_100.fat_g * ratio),
            total_grams=round_half_up(total_grams),
            gram_equivalent_label=gram_equivalent_label(total_grams),
            source_used=source,
        )

    def _from_smart_portion(
        self,
        quantity: float,
        base_per_100: NutritionPer100,
        smart_portion: SmartPortion,
    ) -> NutritionResult:
        """Scale the AI estimate for one unit by quantity."""
        portion_grams = smart_portion.portion_grams or 0.0
        ratio = portion_grams / 100

        def _macro(smart_value: float | None, base_value: float) -> float:
            if smart_value is not None:
                return round_half_up(smart_value * quantity)
            return round_half_up(base_value * ratio * quantity)

        total_grams = portion_grams * quantity
        if self.debug:
            _logger.info(
                "Smart portion used: %sg x %s (confidence=%s)",
                portion_grams,
                quantity,
                smart_portion.confidence,
            )
        return NutritionResult(
            calories=round_half_up((smart_portion.calories or 0.0) * quantity),
            protein_g=_macro(smart_portion.protein_g, base_per_100.protein_g),
            carbs_g=_macro(smart_portion.carbs_g, base_per_100.carbs_g),
            fat_g=_macro(smart_portion.fat_g, base_per_100.fat_g),
            total_grams=round_half_up(total_grams),
            gram_equivalent_label=gram_equivalent_label(total_grams),
            source_used=PortionSource.SMART_PORTION,
            smart_portion_info=(
                f"AI detected: {portion_grams:g}g = {smart_portion.calories:g} cal"
            ),
        )


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to the given decimals with halves going up."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def gram_equivalent_label(total_grams: float) -> str:
    """Format a gram total for display, e.g. ``~150g`` or ``~0.5g``."""
    if total_grams < 1:
        return f"~{round_half_up(total_grams):.1f}g"
    return f"~{math.floor(total_grams + 0.5)}g"


def format_nutrition_display(
    quantity: float, unit_label: str, result: NutritionResult
) -> str:
    """Return a one-line summary such as ``2 roti (~100g) = 297.0 cal``."""
    return (
        f"{quantity:g} {unit_label} ({result.gram_equivalent_label}) "
        f"= {result.calories} cal"
    )
