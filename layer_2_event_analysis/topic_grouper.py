"""
Group events into topics by normalized source name
"""
from typing import Dict, Iterable, List

from models.activity import ActivityEvent


def group_events_by_topic(events: Iterable[ActivityEvent]) -> Dict[str, List[ActivityEvent]]:
    """
    Group events by lowercased source

    Groups are ordered by first occurrence and keep the original relative
    order of their events.

    Args:
        events: Events to group

    Returns:
        Dictionary mapping lowercased source to its events
    """
    groups: Dict[str, List[ActivityEvent]] = {}
    for event in events:
        groups.setdefault(event.source.lower(), []).append(event)
    return groups


def get_distinct_sources(events: Iterable[ActivityEvent]) -> List[str]:
    """
    Get distinct sources in first-occurrence order

    Sources are compared case-insensitively; the spelling of the first
    occurrence is returned.
    """
    seen = {}
    for event in events:
        seen.setdefault(event.source.lower(), event.source)
    return list(seen.values())
