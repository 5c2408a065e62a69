"""Unit table and category multiplier models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from portion_engine.domain.matching import KeywordPattern, normalize


@dataclass(frozen=True)
class CanonicalUnitTable:
    """Immutable mapping from generic unit labels to a base gram weight."""

    grams_by_label: Mapping[str, float]
    fallback_label: str = "serving"
    _entries: Mapping[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = MappingProxyType(
            {
                normalize(label): float(grams)
                for label, grams in self.grams_by_label.items()
            }
        )
        object.__setattr__(self, "_entries", entries)
        object.__setattr__(self, "fallback_label", normalize(self.fallback_label))
        if self.fallback_label not in entries:
            raise ValueError(
                f"Fallback unit {self.fallback_label!r} is missing from the unit table"
            )

    @property
    def entries(self) -> Mapping[str, float]:
        """Read-only view of the table."""
        return self._entries

    @property
    def fallback_grams(self) -> float:
        return self._entries[self.fallback_label]

    def lookup(self, unit_label: str) -> float | None:
        """Return grams for a label or its singular form, if known."""
        for candidate in _label_candidates(normalize(unit_label)):
            grams = self._entries.get(candidate)
            if grams is not None:
                return grams
        return None


@dataclass(frozen=True)
class CategoryMultiplierRule:
    """Adjusts a base unit weight for a food category.

    The rule applies when the food name matches ``food_keywords`` and the unit
    matches ``unit_keywords`` (``None`` matches any unit). ``piece_grams`` pins
    the resulting weight of one unit regardless of the base table entry.
    """

    category: str
    food_keywords: KeywordPattern
    unit_keywords: KeywordPattern | None = None
    multiplier: float = 1.0
    piece_grams: float | None = None

    def applies_to(self, food_name: str, unit_label: str) -> bool:
        if not self.food_keywords.matches(food_name):
            return False
        return self.unit_keywords is None or self.unit_keywords.matches(unit_label)

    def multiplier_for(self, base_grams: float) -> float:
        """Return the multiplier to apply on top of base_grams."""
        if self.piece_grams is not None and base_grams > 0:
            return self.piece_grams / base_grams
        return self.multiplier


def _label_candidates(label: str) -> list[str]:
    candidates = [label]
    if label.endswith("es"):
        candidates.append(label[:-2])
    if label.endswith("s"):
        candidates.append(label[:-1])
    return candidates
