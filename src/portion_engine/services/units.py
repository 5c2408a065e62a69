"""Resolution of generic unit labels to gram weights."""

import logging
from dataclasses import dataclass

from portion_engine.domain.units import CanonicalUnitTable, CategoryMultiplierRule

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitResolver:
    """Looks up base unit weights and applies category corrections."""

    table: CanonicalUnitTable
    rules: tuple[CategoryMultiplierRule, ...]
    debug: bool = False

    def resolve_base_grams(self, unit_label: str) -> float:
        """Return grams for one unit, falling back to the default serving."""
        grams = self.table.lookup(unit_label)
        if grams is not None:
            return grams
        if self.debug:
            _logger.info(
                "Unknown unit %r, using %s (%sg)",
                unit_label,
                self.table.fallback_label,
                self.table.fallback_grams,
            )
        return self.table.fallback_grams

    def category_multiplier(self, food_name: str, unit_label: str) -> float:
        """Return the first matching category multiplier, or 1.0."""
        rule = self.matching_rule(food_name, unit_label)
        if rule is None:
            return 1.0
        return rule.multiplier_for(self.resolve_base_grams(unit_label))

    def matching_rule(
        self, food_name: str, unit_label: str
    ) -> CategoryMultiplierRule | None:
        """Return the first rule that applies to the food and unit."""
        for rule in self.rules:
            if rule.applies_to(food_name, unit_label):
                return rule
        return None
