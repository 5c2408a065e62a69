"""Word-boundary keyword matching for food names and unit labels."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeywordPattern:
    """Set of keywords matched as whole words, allowing a plural suffix."""

    keywords: tuple[str, ...]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", _compile(self.keywords))

    def matches(self, text: str) -> bool:
        """Return True if any keyword occurs in text as a whole word."""
        if not self.keywords:
            return False
        return self._regex.search(normalize(text)) is not None


def keywords(*words: str) -> KeywordPattern:
    """Build a keyword pattern from the given words."""
    return KeywordPattern(tuple(words))


def normalize(text: str) -> str:
    """Lowercase text and collapse runs of whitespace."""
    return " ".join((text or "").lower().split())


def _compile(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(
        re.escape(normalize(word)) for word in sorted(words, key=len, reverse=True)
    )
    # "nut" must not match "nutmeg", but "almonds" and "mangoes" still match.
    return re.compile(rf"\b(?:{alternatives})(?:e?s)?\b")
