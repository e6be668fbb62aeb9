"""
Smart content generator - assembles the full recap bundle
1. Validate events and profile
2. Score confidence from volume, content richness and source diversity
3. Build timeline, tags and title
4. Run the summary, insight, takeaway, action and related-topic synthesizers
"""
from datetime import datetime
from typing import List, Optional, Sequence

from models.activity import ActivityEvent, RecordingSession
from models.generated_content import GeneratedContent, TimelineEntry
from layer_1_session_import.validator import validate_engine_input
from layer_2_event_analysis.event_scorer import calculate_event_importance, classify_importance
from layer_2_event_analysis.keyword_extractor import get_top_keywords
from layer_2_event_analysis.topic_grouper import get_distinct_sources, group_events_by_topic
from layer_3_content_generation.summary_synthesizer import generate_smart_summary
from layer_3_content_generation.insight_synthesizer import generate_insights
from layer_3_content_generation.takeaway_synthesizer import generate_key_takeaways
from layer_3_content_generation.action_item_synthesizer import generate_action_items
from layer_3_content_generation.related_topics_synthesizer import generate_related_topics
from layer_3_content_generation.profile_config import (
    EMPTY_SESSION_ACTION,
    EMPTY_SESSION_SUMMARY,
    EMPTY_SESSION_TITLE,
    PROFILE_LABELS
)
from config.settings import settings
from utils.math_utils import clamp, round_half_up
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_TIMELINE_ENTRIES = 10
MAX_TAGS = 8
MAX_TITLE_SOURCES = 2

EVENT_COUNT_WEIGHT = 3
CONTENT_LENGTH_WEIGHT = 0.1
SOURCE_COUNT_WEIGHT = 10
MAX_CONFIDENCE = 100


def create_empty_content() -> GeneratedContent:
    """Zero-state bundle returned for sessions without events"""
    return GeneratedContent(
        title=EMPTY_SESSION_TITLE,
        summary=EMPTY_SESSION_SUMMARY,
        action_items=(EMPTY_SESSION_ACTION,),
        confidence=0,
    )


def calculate_confidence(events: Sequence[ActivityEvent]) -> int:
    """
    Estimate how much material the recap is built on

    Args:
        events: Non-empty list of session events

    Returns:
        Integer in [0, 100]
    """
    avg_content_length = sum(event.content_length for event in events) / len(events)
    unique_sources = len(group_events_by_topic(events))
    raw = (
        len(events) * EVENT_COUNT_WEIGHT
        + avg_content_length * CONTENT_LENGTH_WEIGHT
        + unique_sources * SOURCE_COUNT_WEIGHT
    )
    return clamp(round_half_up(raw), 0, MAX_CONFIDENCE)


def to_local_time(value: datetime) -> datetime:
    """Convert an aware datetime to local time; naive values are already local"""
    if value.tzinfo is None:
        return value
    return value.astimezone()


def build_timeline(events: Sequence[ActivityEvent]) -> List[TimelineEntry]:
    """
    Timeline of the last MAX_TIMELINE_ENTRIES events in original order

    Args:
        events: Session events

    Returns:
        List of TimelineEntry
    """
    return [
        TimelineEntry(
            time=to_local_time(event.timestamp).strftime(settings.TIMELINE_TIME_FORMAT),
            event=event.title,
            importance=classify_importance(calculate_event_importance(event)),
        )
        for event in events[-MAX_TIMELINE_ENTRIES:]
    ]


def build_title(events: Sequence[ActivityEvent], profile_type: str, start_time: datetime) -> str:
    """
    Title like "Dev Session: GitHub & VS Code - 10/19/2026"

    Args:
        events: Non-empty list of session events
        profile_type: Profile that recorded the session
        start_time: Session start

    Returns:
        Title string
    """
    sources = get_distinct_sources(events)[:MAX_TITLE_SOURCES]
    session_date = to_local_time(start_time).strftime(settings.TITLE_DATE_FORMAT)
    return f"{PROFILE_LABELS[profile_type]}: {' & '.join(sources)} - {session_date}"


def generate_smart_content(events: Sequence[ActivityEvent], profile_type: str,
                           start_time: Optional[datetime] = None) -> GeneratedContent:
    """
    Generate the recap bundle for a list of events

    Args:
        events: Ordered session events (not modified)
        profile_type: student, developer, support, researcher or custom
        start_time: Session start used in the title; defaults to the earliest
            event timestamp

    Returns:
        GeneratedContent

    Raises:
        InvalidInputError: if the profile or an event is malformed
    """
    event_list = validate_engine_input(events, profile_type)

    if not event_list:
        logger.info("No events captured, returning empty content")
        return create_empty_content()

    if start_time is None:
        start_time = min(event.timestamp for event in event_list)

    logger.info(f"Generating content for {len(event_list)} events ({profile_type} profile)")

    content = GeneratedContent(
        title=build_title(event_list, profile_type, start_time),
        summary=generate_smart_summary(event_list, profile_type),
        insights=tuple(generate_insights(event_list, profile_type)),
        key_takeaways=tuple(generate_key_takeaways(event_list, profile_type)),
        action_items=tuple(generate_action_items(event_list, profile_type)),
        related_topics=tuple(generate_related_topics(event_list)),
        timeline=tuple(build_timeline(event_list)),
        tags=tuple(get_top_keywords(event_list, MAX_TAGS)),
        confidence=calculate_confidence(event_list),
    )

    logger.info(
        f"Generated content '{content.title}': {len(content.insights)} insights, "
        f"{len(content.key_takeaways)} takeaways, {len(content.action_items)} actions, "
        f"confidence {content.confidence}"
    )
    return content


def generate_for_session(session: RecordingSession) -> GeneratedContent:
    """
    Generate the recap bundle for a recorded session

    Args:
        session: Session with events, profile type and start time

    Returns:
        GeneratedContent
    """
    return generate_smart_content(session.events, session.profile_type, session.start_time)
