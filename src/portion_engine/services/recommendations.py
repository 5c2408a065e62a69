"""Canonical portion recommendations for food names."""

import logging
from dataclasses import dataclass

from portion_engine.domain.portions import PortionRecommendation, PortionRule

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortionRecommender:
    """Picks a default unit for a food from an ordered rule table."""

    rules: tuple[PortionRule, ...]
    fallback: PortionRecommendation
    debug: bool = False

    def recommend(self, food_name: str) -> PortionRecommendation:
        """Return the recommendation of the first matching rule."""
        rule = self.matching_rule(food_name)
        if rule is None:
            if self.debug:
                _logger.info("No portion rule for %r, using fallback", food_name)
            return self.fallback
        if self.debug:
            _logger.info("Portion rule %s matched %r", rule.category, food_name)
        return rule.recommendation

    def matching_rule(self, food_name: str) -> PortionRule | None:
        for rule in self.rules:
            if rule.matches(food_name):
                return rule
        return None
