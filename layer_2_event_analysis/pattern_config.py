"""
Event pattern configuration for importance scoring
Defines the 6 activity categories, their weights and matching keywords
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

# Each matching pattern adds weight * PATTERN_WEIGHT_FACTOR to an event's score
PATTERN_WEIGHT_FACTOR = 0.2


@dataclass(frozen=True)
class EventPattern:
    """One activity category of the scoring taxonomy"""
    name: str
    weight: float
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        """True if any keyword occurs as a substring of the (lowercased) text"""
        return any(keyword in text for keyword in self.keywords)


# Keywords are lowercase and matched as substrings
EVENT_PATTERNS = MappingProxyType({
    "learning": EventPattern(
        name="learning",
        weight=1.2,
        keywords=("tutorial", "course", "lecture", "lesson", "learn", "explained", "fundamentals"),
    ),
    "coding": EventPattern(
        name="coding",
        weight=1.5,
        keywords=("code", "function", "component", "refactor", "implement", "commit", "merge", "build", "deploy"),
    ),
    "research": EventPattern(
        name="research",
        weight=1.3,
        keywords=("research", "paper", "study", "analysis", "findings", "hypothesis", "article"),
    ),
    "communication": EventPattern(
        name="communication",
        weight=1.0,
        keywords=("slack", "email", "meeting", "zoom", "message", "call", "discuss"),
    ),
    "debugging": EventPattern(
        name="debugging",
        weight=1.4,
        keywords=("bug", "error", "fix", "issue", "debug", "crash", "exception", "stack trace"),
    ),
    "documentation": EventPattern(
        name="documentation",
        weight=1.1,
        keywords=("doc", "notion", "readme", "wiki", "guide", "notes"),
    ),
})


def get_pattern_names() -> list[str]:
    """
    Get list of all pattern names

    Returns:
        List of pattern names in taxonomy order
    """
    return list(EVENT_PATTERNS.keys())


def get_matching_patterns(text: str) -> list[EventPattern]:
    """
    Get every pattern with at least one keyword in the text

    Args:
        text: Text to match (lowercased by the caller)

    Returns:
        Matching patterns in taxonomy order
    """
    return [pattern for pattern in EVENT_PATTERNS.values() if pattern.matches(text)]
