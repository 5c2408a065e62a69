"""Portion recommendation and plausibility models."""

from dataclasses import dataclass

from portion_engine.domain.matching import KeywordPattern, normalize


@dataclass(frozen=True)
class PortionRecommendation:
    """Suggested default unit for a food, used to pre-fill a unit selector."""

    canonical_unit_label: str
    unit_size_grams: float
    explanatory_note: str
    suggested_quantity: int = 1


@dataclass(frozen=True)
class PortionRule:
    """Category rule mapping food-name keywords to a recommendation.

    When ``qualifiers`` is set, at least one qualifier must also match, e.g.
    a brand name on top of the generic beer keywords.
    """

    category: str
    keywords: KeywordPattern
    recommendation: PortionRecommendation
    qualifiers: KeywordPattern | None = None

    def matches(self, food_name: str) -> bool:
        if not self.keywords.matches(food_name):
            return False
        return self.qualifiers is None or self.qualifiers.matches(food_name)


@dataclass(frozen=True)
class PlausibilityRange:
    """Expected calories-per-gram band for a food category.

    ``exact_names`` match only the whole food name, for words such as "butter"
    that would otherwise claim dishes like "butter chicken".
    """

    category: str
    keywords: KeywordPattern
    min_calories_per_gram: float
    max_calories_per_gram: float
    exact_names: frozenset[str] = frozenset()

    def matches(self, food_name: str) -> bool:
        return normalize(food_name) in self.exact_names or self.keywords.matches(
            food_name
        )

    def describe(self) -> str:
        low = round(self.min_calories_per_gram * 100)
        high = round(self.max_calories_per_gram * 100)
        return f"{low}-{high} cal/100g"


@dataclass(frozen=True)
class PlausibilityCheck:
    """Advisory outcome of a calorie-density check."""

    is_valid: bool
    category: str
    calories_per_gram: float | None = None
    warning: str | None = None
