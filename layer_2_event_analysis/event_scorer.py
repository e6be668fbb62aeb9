"""
Importance scoring for activity events

Scores are additive points on a base of 1.0: content richness, event type,
and every activity pattern the event matches.
"""
from typing import List, Sequence

from models.activity import ActivityEvent
from layer_2_event_analysis.pattern_config import PATTERN_WEIGHT_FACTOR, get_matching_patterns

BASE_SCORE = 1.0

HAS_CONTENT_BONUS = 0.5
LONG_CONTENT_BONUS = 0.3
LONG_CONTENT_THRESHOLD = 100  # characters of text + code

TYPE_BONUSES = {
    "action": 0.4,
    "note": 0.6,
    "app": 0.3,
    "tab": 0.0,
    "message": 0.0,
}

HIGH_IMPORTANCE_THRESHOLD = 2.0
MEDIUM_IMPORTANCE_THRESHOLD = 1.5


def calculate_event_importance(event: ActivityEvent) -> float:
    """
    Calculate the importance score of one event

    Args:
        event: Event to score

    Returns:
        Non-negative score, typically between 1.0 and 3.5
    """
    score = BASE_SCORE

    content_length = event.content_length
    if content_length > 0:
        score += HAS_CONTENT_BONUS
        if content_length > LONG_CONTENT_THRESHOLD:
            score += LONG_CONTENT_BONUS

    score += TYPE_BONUSES.get(event.type, 0.0)

    pattern_text = f"{event.title} {event.text_content} {event.source}".lower()
    for pattern in get_matching_patterns(pattern_text):
        score += pattern.weight * PATTERN_WEIGHT_FACTOR

    return score


def classify_importance(score: float) -> str:
    """
    Bucket a score into high / medium / low

    Args:
        score: Importance score

    Returns:
        "high" above 2, "medium" above 1.5, otherwise "low"
    """
    if score > HIGH_IMPORTANCE_THRESHOLD:
        return "high"
    if score > MEDIUM_IMPORTANCE_THRESHOLD:
        return "medium"
    return "low"


def rank_events_by_importance(events: Sequence[ActivityEvent]) -> List[ActivityEvent]:
    """
    Sort a copy of the events by importance, highest first

    The sort is stable: events with equal scores keep their original order.

    Args:
        events: Events to rank

    Returns:
        New list of events
    """
    return sorted(events, key=calculate_event_importance, reverse=True)
