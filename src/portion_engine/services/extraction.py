"""Extraction of explicit gram/ml amounts from free-text unit labels."""

import re

_NUMBER = r"(\d+(?:\.\d+)?)"

# Tried in order; the first match wins. Millilitres count as grams (1 ml ~ 1 g).
_PATTERNS = (
    re.compile(rf"\(\s*{_NUMBER}\s*g\s*\)", re.IGNORECASE),
    re.compile(rf"\(\s*{_NUMBER}\s*ml\s*\)", re.IGNORECASE),
    re.compile(rf"^\s*{_NUMBER}\s*g(?:rams?)?\b", re.IGNORECASE),
)


def extract_grams_or_ml(unit_label: str) -> float | None:
    """Return the gram or millilitre amount embedded in a unit label.

    ``"medium portion (150g)"`` -> 150, ``"glass (250ml)"`` -> 250,
    ``"250g serving"`` and ``"250 grams"`` -> 250, ``"piece"`` -> None.
    """
    for pattern in _PATTERNS:
        match = pattern.search(unit_label or "")
        if match:
            return float(match.group(1))
    return None
