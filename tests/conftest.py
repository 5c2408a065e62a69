"""Shared test fixtures."""

import pytest

from portion_engine.config import Settings
from portion_engine.containers import AppContainer, build_container
from portion_engine.domain.nutrition import NutritionPer100
from portion_engine.portion_catalog import (
    FALLBACK_RECOMMENDATION,
    GRAINS_RANGE,
    PLAUSIBILITY_RANGES,
    PORTION_RULES,
)
from portion_engine.services.calculator import NutritionCalculator
from portion_engine.services.recommendations import PortionRecommender
from portion_engine.services.units import UnitResolver
from portion_engine.services.validation import PlausibilityValidator
from portion_engine.unit_catalog import CATEGORY_MULTIPLIER_RULES, default_unit_table

RICE = NutritionPer100(calories=130, protein_g=2.7, carbs_g=28, fat_g=0.3)
BEER = NutritionPer100(calories=43, protein_g=0.5, carbs_g=3.6, fat_g=0)
ALMONDS = NutritionPer100(calories=579, protein_g=21, carbs_g=22, fat_g=50)
ROTI = NutritionPer100(calories=297, protein_g=9.8, carbs_g=46, fat_g=7.5)


@pytest.fixture
def settings() -> Settings:
    return Settings(fallback_unit="serving", debug=False, log_level="INFO")


@pytest.fixture
def unit_resolver() -> UnitResolver:
    return UnitResolver(table=default_unit_table(), rules=CATEGORY_MULTIPLIER_RULES)


@pytest.fixture
def calculator(unit_resolver: UnitResolver) -> NutritionCalculator:
    return NutritionCalculator(resolver=unit_resolver)


@pytest.fixture
def recommender() -> PortionRecommender:
    return PortionRecommender(rules=PORTION_RULES, fallback=FALLBACK_RECOMMENDATION)


@pytest.fixture
def validator() -> PlausibilityValidator:
    return PlausibilityValidator(ranges=PLAUSIBILITY_RANGES, default_range=GRAINS_RANGE)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
