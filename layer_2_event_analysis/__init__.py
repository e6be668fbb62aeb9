"""
Layer 2: Event Analysis (keyword extraction, importance scoring, topic grouping).
"""
from .pattern_config import (
    EVENT_PATTERNS,
    PATTERN_WEIGHT_FACTOR,
    EventPattern,
    get_pattern_names,
    get_matching_patterns
)
from .keyword_extractor import (
    STOP_WORDS,
    extract_keywords,
    get_keyword_frequencies,
    get_top_keywords
)
from .event_scorer import (
    calculate_event_importance,
    classify_importance,
    rank_events_by_importance
)
from .topic_grouper import group_events_by_topic, get_distinct_sources

__all__ = [
    'EVENT_PATTERNS',
    'PATTERN_WEIGHT_FACTOR',
    'EventPattern',
    'get_pattern_names',
    'get_matching_patterns',
    'STOP_WORDS',
    'extract_keywords',
    'get_keyword_frequencies',
    'get_top_keywords',
    'calculate_event_importance',
    'classify_importance',
    'rank_events_by_importance',
    'group_events_by_topic',
    'get_distinct_sources',
]
