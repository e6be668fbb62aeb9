"""
Schema validator for recorded sessions and activity events

The content engine never guesses around malformed input: shape violations are
rejected here, before any score or sentence is computed.
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from models.activity import ActivityEvent, EventContent, EVENT_TYPES, PROFILE_TYPES
from utils.logger import get_logger

logger = get_logger(__name__)


class InvalidInputError(ValueError):
    """Raised when events or profile type do not match the expected shape"""


def is_valid_profile(profile_type: str) -> bool:
    """Check if a profile type is one of the known profiles"""
    return profile_type in PROFILE_TYPES


class EventValidator:
    """Validate activity event schema and data"""

    REQUIRED_FIELDS = ['timestamp', 'type', 'source', 'title']

    @classmethod
    def validate_dict(cls, event_data: Dict) -> tuple[bool, Optional[str]]:
        """
        Validate a raw event dictionary before it is turned into an ActivityEvent

        Args:
            event_data: Event dictionary as written by the recorder

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(event_data, dict):
            return False, "event must be an object"

        for field in cls.REQUIRED_FIELDS:
            if field not in event_data:
                return False, f"Missing required field: {field}"

        content = event_data.get('content')
        if content is not None and not isinstance(content, dict):
            return False, "content must be an object"

        return True, None

    @classmethod
    def validate(cls, event: ActivityEvent) -> tuple[bool, Optional[str]]:
        """
        Validate an ActivityEvent instance

        Args:
            event: Event to check

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(event, ActivityEvent):
            return False, f"expected ActivityEvent, got {type(event).__name__}"

        if not isinstance(event.timestamp, datetime):
            return False, "timestamp must be a datetime object"

        if event.type not in EVENT_TYPES:
            return False, f"type must be one of {', '.join(EVENT_TYPES)}"

        if not isinstance(event.source, str):
            return False, "source must be a string"

        if not isinstance(event.title, str):
            return False, "title must be a string"

        if event.content is not None:
            if not isinstance(event.content, EventContent):
                return False, "content must be an EventContent"
            for name in ('text', 'code', 'summary'):
                value = getattr(event.content, name)
                if value is not None and not isinstance(value, str):
                    return False, f"content.{name} must be a string"

        return True, None


def validate_engine_input(events: Sequence[ActivityEvent], profile_type: str) -> List[ActivityEvent]:
    """
    Check the content engine's input and return the events as a list

    Args:
        events: Ordered events of a session
        profile_type: Profile that recorded the session

    Returns:
        List copy of the events

    Raises:
        InvalidInputError: on an unknown profile, a malformed event, or a mix
            of timezone-aware and naive timestamps
    """
    if not is_valid_profile(profile_type):
        logger.warning(f"Rejected unknown profile type: {profile_type!r}")
        raise InvalidInputError(
            f"Invalid profile type {profile_type!r}; expected one of {', '.join(PROFILE_TYPES)}"
        )

    if isinstance(events, (str, bytes)) or not isinstance(events, Iterable):
        raise InvalidInputError("events must be a sequence of ActivityEvent")

    event_list = list(events)
    aware_flags = set()
    for index, event in enumerate(event_list):
        is_valid, error = EventValidator.validate(event)
        if not is_valid:
            logger.warning(f"Rejected event #{index}: {error}")
            raise InvalidInputError(f"Invalid event #{index}: {error}")
        aware_flags.add(event.timestamp.tzinfo is not None and event.timestamp.utcoffset() is not None)

    if len(aware_flags) > 1:
        logger.warning("Rejected events mixing timezone-aware and naive timestamps")
        raise InvalidInputError("Timestamps must be either all timezone-aware or all naive")

    return event_list
