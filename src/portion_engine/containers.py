"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from portion_engine.app_logging import configure_logging
from portion_engine.config import Settings
from portion_engine.portion_catalog import (
    FALLBACK_RECOMMENDATION,
    GRAINS_RANGE,
    PLAUSIBILITY_RANGES,
    PORTION_RULES,
)
from portion_engine.services.calculator import NutritionCalculator
from portion_engine.services.engine import PortionEngine
from portion_engine.services.recommendations import PortionRecommender
from portion_engine.services.units import UnitResolver
from portion_engine.services.validation import PlausibilityValidator
from portion_engine.unit_catalog import CATEGORY_MULTIPLIER_RULES, default_unit_table


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    unit_resolver: UnitResolver
    calculator: NutritionCalculator
    recommender: PortionRecommender
    validator: PlausibilityValidator
    engine: PortionEngine


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    debug = resolved_settings.debug
    unit_resolver = UnitResolver(
        table=default_unit_table(resolved_settings.fallback_unit),
        rules=CATEGORY_MULTIPLIER_RULES,
        debug=debug,
    )
    calculator = NutritionCalculator(resolver=unit_resolver, debug=debug)
    recommender = PortionRecommender(
        rules=PORTION_RULES,
        fallback=FALLBACK_RECOMMENDATION,
        debug=debug,
    )
    validator = PlausibilityValidator(
        ranges=PLAUSIBILITY_RANGES,
        default_range=GRAINS_RANGE,
        debug=debug,
    )
    engine = PortionEngine(
        calculator=calculator,
        recommender=recommender,
        validator=validator,
    )
    return AppContainer(
        settings=resolved_settings,
        unit_resolver=unit_resolver,
        calculator=calculator,
        recommender=recommender,
        validator=validator,
        engine=engine,
    )
