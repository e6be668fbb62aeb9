"""
Short actionable takeaways: leading sentences of the most important events,
followed by the profile's canned takeaways
"""
import re
from typing import List, Optional, Sequence

from models.activity import ActivityEvent
from layer_2_event_analysis.event_scorer import rank_events_by_importance
from layer_3_content_generation.profile_config import CANNED_TAKEAWAYS

MAX_TAKEAWAYS = 6
CANDIDATE_EVENTS_COUNT = 8
MIN_SENTENCE_LENGTH = 10
MAX_SENTENCE_LENGTH = 150  # exclusive

_SENTENCE_END = re.compile(r'[.!?]')


def extract_first_sentence(text: str) -> Optional[str]:
    """
    Get the trimmed first sentence of a text, if it has a usable length

    Args:
        text: Free text

    Returns:
        The sentence, or None when shorter than 10 or at least 150 characters
    """
    sentence = _SENTENCE_END.split(text, maxsplit=1)[0].strip()
    if MIN_SENTENCE_LENGTH <= len(sentence) < MAX_SENTENCE_LENGTH:
        return sentence
    return None


def generate_key_takeaways(events: Sequence[ActivityEvent], profile_type: str) -> List[str]:
    """
    Generate key takeaways for a session

    Args:
        events: Session events
        profile_type: Profile that recorded the session

    Returns:
        Up to MAX_TAKEAWAYS strings, extracted sentences first
    """
    takeaways = []

    for event in rank_events_by_importance(events)[:CANDIDATE_EVENTS_COUNT]:
        sentence = extract_first_sentence(event.text_content)
        if sentence:
            takeaways.append(sentence)

    takeaways.extend(CANNED_TAKEAWAYS[profile_type])

    return takeaways[:MAX_TAKEAWAYS]
