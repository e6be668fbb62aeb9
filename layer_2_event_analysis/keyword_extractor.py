"""
Keyword extraction and frequency ranking over event text
"""
import re
from collections import Counter
from typing import Iterable, List

from models.activity import ActivityEvent

# Tokens this short carry no topic signal
MIN_KEYWORD_LENGTH = 3

STOP_WORDS = frozenset({
    # articles, determiners
    'the', 'a', 'an', 'this', 'that', 'these', 'those', 'some', 'any', 'each',
    'every', 'all', 'both', 'few', 'more', 'most', 'other', 'such', 'own', 'same',
    # pronouns
    'i', 'me', 'my', 'mine', 'myself', 'we', 'us', 'our', 'ours', 'ourselves',
    'you', 'your', 'yours', 'yourself', 'he', 'him', 'his', 'himself', 'she',
    'her', 'hers', 'herself', 'it', 'its', 'itself', 'they', 'them', 'their',
    'theirs', 'themselves', 'what', 'which', 'who', 'whom', 'whose',
    # auxiliary and modal verbs
    'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had',
    'having', 'do', 'does', 'did', 'doing', 'will', 'would', 'shall', 'should',
    'can', 'could', 'may', 'might', 'must',
    # prepositions
    'to', 'of', 'in', 'for', 'on', 'with', 'at', 'by', 'from', 'as', 'into',
    'through', 'about', 'against', 'between', 'during', 'before', 'after',
    'above', 'below', 'up', 'down', 'out', 'off', 'over', 'under', 'onto', 'upon',
    'within', 'without', 'via',
    # conjunctions
    'and', 'but', 'or', 'nor', 'so', 'yet', 'if', 'because', 'while', 'until',
    'although', 'though', 'than', 'whether',
    # adverbs and fillers
    'not', 'no', 'only', 'very', 'too', 'just', 'also', 'then', 'there', 'here',
    'when', 'where', 'why', 'how', 'again', 'further', 'once', 'now', 'still',
})

_NON_WORD_PATTERN = re.compile(r'[^\w\s]')


def extract_keywords(text: str) -> List[str]:
    """
    Extract keywords from free text

    Lowercases the text, turns punctuation into spaces, splits on whitespace
    and drops short tokens and stop-words. Duplicates are kept so callers can
    count frequencies.

    Args:
        text: Arbitrary text

    Returns:
        Lowercase keywords in order of appearance
    """
    if not text:
        return []

    cleaned = _NON_WORD_PATTERN.sub(' ', text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]


def get_event_corpus(events: Iterable[ActivityEvent]) -> str:
    """Join the title and main text of every event into one string"""
    return ' '.join(f"{event.title} {event.text_content}" for event in events)


def get_keyword_frequencies(events: Iterable[ActivityEvent]) -> Counter:
    """
    Count keyword occurrences across all events

    Args:
        events: Events whose title and text are tokenized

    Returns:
        Counter of keyword -> occurrences, in first-occurrence order
    """
    return Counter(extract_keywords(get_event_corpus(events)))


def get_top_keywords(events: Iterable[ActivityEvent], limit: int) -> List[str]:
    """
    Get the most frequent keywords, sorted descending

    Ties keep first-occurrence order.

    Args:
        events: Events to analyse
        limit: Maximum number of keywords to return

    Returns:
        Up to `limit` keywords
    """
    frequencies = get_keyword_frequencies(events)
    sorted_keywords = sorted(frequencies.items(), key=lambda x: x[1], reverse=True)
    return [word for word, _ in sorted_keywords[:limit]]
