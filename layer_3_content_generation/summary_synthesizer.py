"""
One-paragraph overview of a session
"""
from typing import List, Sequence

from models.activity import ActivityEvent
from layer_2_event_analysis.event_scorer import rank_events_by_importance
from layer_2_event_analysis.topic_grouper import group_events_by_topic
from layer_3_content_generation.profile_config import SESSION_PHRASES
from utils.math_utils import round_half_up

TOP_EVENTS_COUNT = 5
MAX_LISTED_SOURCES = 4
FALLBACK_FOCUS = "various topics"


def get_top_events(events: Sequence[ActivityEvent], count: int = TOP_EVENTS_COUNT) -> List[ActivityEvent]:
    """Highest-scored events, ties in original order"""
    return rank_events_by_importance(events)[:count]


def get_duration_minutes(events: Sequence[ActivityEvent]) -> int:
    """
    Session length in whole minutes

    Measured between the earliest and latest timestamps, so the result does
    not depend on the events being sorted.
    """
    if len(events) < 2:
        return 0
    timestamps = [event.timestamp for event in events]
    elapsed = max(timestamps) - min(timestamps)
    return round_half_up(elapsed.total_seconds() / 60)


def get_event_types(events: Sequence[ActivityEvent]) -> List[str]:
    """Distinct event types in first-occurrence order"""
    return list(dict.fromkeys(event.type for event in events))


def generate_smart_summary(events: Sequence[ActivityEvent], profile_type: str) -> str:
    """
    Generate the summary sentence for a session

    Args:
        events: Session events
        profile_type: Profile that recorded the session

    Returns:
        One sentence describing volume, sources, duration, activity types
        and the most important event
    """
    top_events = get_top_events(events)
    focus = top_events[0].title if top_events else FALLBACK_FOCUS

    groups = group_events_by_topic(events)
    source_list = ', '.join(list(groups.keys())[:MAX_LISTED_SOURCES])
    event_types = ', '.join(get_event_types(events))
    duration = get_duration_minutes(events)
    phrase = SESSION_PHRASES[profile_type]

    return (
        f"This {phrase} captured {len(events)} events across {len(groups)} sources "
        f"({source_list}) over approximately {duration} minutes, covering "
        f"{event_types} activity with a focus on \"{focus}\"."
    )
