"""
Ranked bullet insights about a session

Checks run in a fixed order and each may add one insight; the first
MAX_INSIGHTS produced are kept.
"""
from typing import List, Optional, Sequence

from models.activity import ActivityEvent
from layer_2_event_analysis.keyword_extractor import get_top_keywords
from layer_2_event_analysis.topic_grouper import group_events_by_topic
from layer_3_content_generation.profile_config import GITHUB_INSIGHT
from utils.math_utils import round_half_up
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_INSIGHTS = 5
FOCUS_KEYWORDS_COUNT = 5
ACTION_COUNT_THRESHOLD = 2
DOMINANT_SOURCE_SHARE = 0.3
STUDENT_TAB_THRESHOLD = 3
RESEARCHER_SOURCE_THRESHOLD = 3


def _count_type(events: Sequence[ActivityEvent], event_type: str) -> int:
    return sum(1 for event in events if event.type == event_type)


def _profile_insight(events: Sequence[ActivityEvent], profile_type: str, source_count: int) -> Optional[str]:
    """Insight specific to the recording profile, if its condition holds"""
    if profile_type == "developer":
        if any("github" in event.source.lower() for event in events):
            return GITHUB_INSIGHT
    elif profile_type == "student":
        tab_count = _count_type(events, "tab")
        if tab_count > STUDENT_TAB_THRESHOLD:
            return f"Browsed {tab_count} learning resources during this session"
    elif profile_type == "researcher":
        if source_count > RESEARCHER_SOURCE_THRESHOLD:
            return f"Consulted {source_count} different sources for a broad research base"
    return None


def generate_insights(events: Sequence[ActivityEvent], profile_type: str) -> List[str]:
    """
    Generate insights for a session

    Args:
        events: Session events
        profile_type: Profile that recorded the session

    Returns:
        Up to MAX_INSIGHTS insight strings in generation order
    """
    insights = []

    top_words = get_top_keywords(events, FOCUS_KEYWORDS_COUNT)
    if top_words:
        insights.append(f"Primary focus areas: {', '.join(top_words)}")

    action_count = _count_type(events, "action")
    if action_count > ACTION_COUNT_THRESHOLD:
        insights.append(f"Significant activity detected with {action_count} action events")

    note_count = _count_type(events, "note")
    if note_count > 0:
        insights.append(f"{note_count} manual notes captured during the session")

    groups = group_events_by_topic(events)
    if groups:
        # max() keeps the first group on ties
        largest_source, largest_events = max(groups.items(), key=lambda x: len(x[1]))
        if len(largest_events) > len(events) * DOMINANT_SOURCE_SHARE:
            share = round_half_up(len(largest_events) / len(events) * 100)
            insights.append(f"Heavy focus on {largest_source} ({share}% of activity)")

    profile_insight = _profile_insight(events, profile_type, len(groups))
    if profile_insight:
        insights.append(profile_insight)

    logger.debug(f"Generated {len(insights)} candidate insights for {profile_type} profile")
    return insights[:MAX_INSIGHTS]
