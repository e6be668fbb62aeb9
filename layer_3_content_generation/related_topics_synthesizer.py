"""
Suggested follow-up subjects based on the session's most frequent keywords
"""
from typing import List, Sequence

from models.activity import ActivityEvent
from layer_2_event_analysis.keyword_extractor import get_top_keywords
from layer_3_content_generation.profile_config import GENERIC_RELATED_TOPICS, RELATED_TOPIC_TRIGGERS

MAX_RELATED_TOPICS = 4
TRIGGER_KEYWORDS_COUNT = 10


def generate_related_topics(events: Sequence[ActivityEvent]) -> List[str]:
    """
    Generate related topics for a session

    Every trigger whose keywords appear among the top 10 keywords adds its
    suggestion; two generic suggestions always follow.

    Args:
        events: Session events

    Returns:
        Up to MAX_RELATED_TOPICS strings
    """
    top_words = set(get_top_keywords(events, TRIGGER_KEYWORDS_COUNT))

    topics = [
        suggestion
        for keywords, suggestion in RELATED_TOPIC_TRIGGERS
        if any(keyword in top_words for keyword in keywords)
    ]
    topics.extend(GENERIC_RELATED_TOPICS)

    return topics[:MAX_RELATED_TOPICS]
