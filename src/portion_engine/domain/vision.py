"""Models for AI vision portion estimates."""

from pydantic import BaseModel, ConfigDict, Field


class VisionItem(BaseModel):
    """Single detected food item from the vision service."""

    label: str
    confidence: float = Field(ge=0.0, le=1.0)
    estimated_grams_low: float | None = Field(default=None, ge=0)
    estimated_grams_high: float | None = Field(default=None, ge=0)
    calories: float | None = Field(default=None, ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    notes: str | None = None


class SmartPortion(BaseModel):
    """AI estimate of one serving's weight and its already-scaled nutrition."""

    model_config = ConfigDict(frozen=True)

    portion_grams: float | None = Field(default=None, ge=0)
    calories: float | None = Field(default=None, ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    confidence: float | None = Field(default=None, ge=0.0, le=100.0)

    @property
    def is_complete(self) -> bool:
        """Whether the estimate carries both a weight and calories."""
        return bool(self.portion_grams) and self.calories is not None

    @classmethod
    def from_vision_item(cls, item: VisionItem) -> "SmartPortion":
        """Build a smart portion from a vision item's gram range and nutrition."""
        return cls(
            portion_grams=_midpoint(
                item.estimated_grams_low, item.estimated_grams_high
            ),
            calories=item.calories,
            protein_g=item.protein_g,
            carbs_g=item.carbs_g,
            fat_g=item.fat_g,
            confidence=round(item.confidence * 100, 1),
        )


def _midpoint(low: float | None, high: float | None) -> float | None:
    """Return the middle of a gram range, or whichever bound is known."""
    if low is not None and high is not None:
        return (low + high) / 2
    return low if low is not None else high
