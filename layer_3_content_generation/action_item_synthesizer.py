"""
Todo list derived from what the session contained
"""
from typing import List, Sequence

from models.activity import ActivityEvent
from layer_3_content_generation.profile_config import (
    CANNED_ACTIONS,
    CANNED_ACTIONS_USED,
    CONSOLIDATE_FINDINGS_ACTION,
    DOCUMENT_CODE_ACTION
)

MAX_ACTION_ITEMS = 5
LARGE_SESSION_THRESHOLD = 10
DOC_SOURCE_MARKERS = ("doc", "notion")


def has_code(events: Sequence[ActivityEvent]) -> bool:
    """True if any event captured code"""
    return any(event.code_content for event in events)


def has_docs(events: Sequence[ActivityEvent]) -> bool:
    """True if any event came from a documentation tool"""
    return any(
        marker in event.source.lower()
        for event in events
        for marker in DOC_SOURCE_MARKERS
    )


def generate_action_items(events: Sequence[ActivityEvent], profile_type: str) -> List[str]:
    """
    Generate action items for a session

    Args:
        events: Session events
        profile_type: Profile that recorded the session

    Returns:
        Up to MAX_ACTION_ITEMS strings
    """
    actions = []

    if profile_type == "developer" and has_code(events) and not has_docs(events):
        actions.append(DOCUMENT_CODE_ACTION)

    if len(events) > LARGE_SESSION_THRESHOLD:
        actions.append(CONSOLIDATE_FINDINGS_ACTION)

    actions.extend(CANNED_ACTIONS[profile_type][:CANNED_ACTIONS_USED])

    return actions[:MAX_ACTION_ITEMS]
