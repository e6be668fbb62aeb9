"""
Layer 3: Content Generation
- Synthesizers (summary, insights, takeaways, action items, related topics)
- Smart Content Generator (assembles the recap bundle)
- Session Content Generator (generates and stores content per session)
"""
from .summary_synthesizer import generate_smart_summary
from .insight_synthesizer import generate_insights, MAX_INSIGHTS
from .takeaway_synthesizer import generate_key_takeaways, MAX_TAKEAWAYS
from .action_item_synthesizer import generate_action_items, MAX_ACTION_ITEMS
from .related_topics_synthesizer import generate_related_topics, MAX_RELATED_TOPICS
from .content_generator import (
    generate_smart_content,
    generate_for_session,
    MAX_TAGS,
    MAX_TIMELINE_ENTRIES
)
from .session_content_generator import SessionContentGenerator
from .generate_content import generate_all_content, generate_content_for_session

__all__ = [
    'generate_smart_summary',
    'generate_insights',
    'MAX_INSIGHTS',
    'generate_key_takeaways',
    'MAX_TAKEAWAYS',
    'generate_action_items',
    'MAX_ACTION_ITEMS',
    'generate_related_topics',
    'MAX_RELATED_TOPICS',
    'generate_smart_content',
    'generate_for_session',
    'MAX_TAGS',
    'MAX_TIMELINE_ENTRIES',
    'SessionContentGenerator',
    'generate_all_content',
    'generate_content_for_session',
]
