"""Keyword lexicon matching shared by every rule-based component.

Matching is case-insensitive substring containment. It is deliberately not
word-boundary aware: the phrase "free" matches inside "carefree".
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence


def normalize(text: Optional[str]) -> str:
    """Lower-case text for matching (None becomes empty)."""
    return (text or '').lower()


def contains_any(text: Optional[str], phrases: Iterable[str]) -> bool:
    """Check whether any phrase occurs in text.

    Args:
        text: Free text, any case
        phrases: Keywords or phrases

    Returns:
        True on the first contained phrase
    """
    lowered = normalize(text)
    return any(phrase.lower() in lowered for phrase in phrases)


def count_matches(text: Optional[str], phrases: Iterable[str]) -> int:
    """Count how many of the phrases occur in text.

    Each phrase counts once, however often it appears.
    """
    lowered = normalize(text)
    return sum(1 for phrase in phrases if phrase.lower() in lowered)


class Lexicon:
    """Ordered mapping of category -> phrase list."""

    def __init__(self, categories: Mapping[str, Sequence[str]]):
        """Initialize lexicon.

        Args:
            categories: Category names to phrases; iteration order is kept
        """
        self.categories: Dict[str, List[str]] = {
            name: list(phrases) for name, phrases in categories.items()
        }

    def __contains__(self, category: str) -> bool:
        return category in self.categories

    def phrases(self, category: str) -> List[str]:
        """Phrases for a category."""
        return self.categories[category]

    def matches(self, text: Optional[str], category: str) -> bool:
        """Whether text contains any phrase of the category."""
        return contains_any(text, self.categories[category])

    def counts(self, text: Optional[str]) -> Dict[str, int]:
        """Match count per category, in category order."""
        lowered = normalize(text)
        return {
            name: count_matches(lowered, phrases)
            for name, phrases in self.categories.items()
        }

    def first_match(self, text: Optional[str]) -> Optional[str]:
        """First category, in table order, with any phrase in text."""
        lowered = normalize(text)
        for name, phrases in self.categories.items():
            if contains_any(lowered, phrases):
                return name
        return None
