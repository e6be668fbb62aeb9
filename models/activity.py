"""
Activity event and recording session data models
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import json

EVENT_TYPES = ("tab", "action", "note", "app", "message")
PROFILE_TYPES = ("student", "developer", "support", "researcher", "custom")
SESSION_STATUSES = ("recording", "paused", "completed")


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a stored timestamp into a datetime

    Accepts datetime objects, ISO-8601 strings (a trailing 'Z' means UTC)
    and epoch milliseconds as written by the browser recorder. Strings and
    epoch values always come back timezone-aware; an ISO string without an
    offset is read as local time, so a file mixing both formats stays valid.

    Raises:
        ValueError: if the value cannot be interpreted as an instant
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
        return parsed
    raise ValueError(f"Invalid timestamp: {value!r}")


@dataclass(frozen=True)
class EventContent:
    """Structured payload captured alongside an event"""
    text: Optional[str] = None
    code: Optional[str] = None
    summary: Optional[str] = None
    highlights: Tuple[str, ...] = ()
    attachments: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Convert content to dictionary, dropping empty fields"""
        data = {
            "text": self.text,
            "code": self.code,
            "summary": self.summary,
            "highlights": list(self.highlights),
            "attachments": list(self.attachments),
        }
        return {k: v for k, v in data.items() if v}

    @classmethod
    def from_dict(cls, data: dict) -> "EventContent":
        """Create content from dictionary"""
        return cls(
            text=data.get("text"),
            code=data.get("code"),
            summary=data.get("summary"),
            highlights=tuple(data.get("highlights") or ()),
            attachments=tuple(data.get("attachments") or ()),
        )


@dataclass(frozen=True)
class ActivityEvent:
    """One captured user activity (tab open, code paste, note, app switch, message)"""
    timestamp: datetime
    type: str  # tab | action | note | app | message
    source: str  # e.g. "GitHub", "VS Code"
    title: str
    description: str = ""
    content: Optional[EventContent] = None
    id: Optional[str] = None
    url: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def text_content(self) -> str:
        """Main text of the event: content text, else content summary, else empty"""
        if self.content is None:
            return ""
        return self.content.text or self.content.summary or ""

    @property
    def code_content(self) -> str:
        """Code snippet of the event, or empty"""
        if self.content is None:
            return ""
        return self.content.code or ""

    @property
    def content_length(self) -> int:
        """Combined length of text and code content"""
        return len(self.text_content) + len(self.code_content)

    def to_dict(self) -> dict:
        """Convert event to dictionary for storage"""
        data = {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "type": self.type,
            "source": self.source,
            "title": self.title,
            "description": self.description,
        }
        if self.content is not None:
            data["content"] = self.content.to_dict()
        if self.url:
            data["url"] = self.url
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ActivityEvent":
        """Create event from dictionary"""
        content = data.get("content")
        return cls(
            timestamp=parse_timestamp(data["timestamp"]),
            type=data["type"],
            source=data["source"],
            title=data["title"],
            description=data.get("description") or "",
            content=EventContent.from_dict(content) if content else None,
            id=data.get("id"),
            url=data.get("url"),
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass
class RecordingSession:
    """A recorded session: ordered events plus the profile that recorded them"""
    id: str
    start_time: datetime
    profile_type: str = "developer"
    events: List[ActivityEvent] = field(default_factory=list)
    name: str = ""
    end_time: Optional[datetime] = None
    status: str = "completed"
    ticket_id: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert session to dictionary for storage"""
        return {
            "id": self.id,
            "name": self.name,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat() if self.end_time else None,
            "status": self.status,
            "profileType": self.profile_type,
            "ticketId": self.ticket_id,
            "tags": list(self.tags),
            "events": [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict, default_profile: str = "developer") -> "RecordingSession":
        """
        Create session from dictionary

        Both the recorder's camelCase keys (startTime, profileType) and
        snake_case keys are accepted.
        """
        start_time = data.get("startTime", data.get("start_time"))
        end_time = data.get("endTime", data.get("end_time"))
        events = [ActivityEvent.from_dict(e) for e in data.get("events") or []]
        if start_time is None:
            if not events:
                raise KeyError("startTime")
            start_time = events[0].timestamp
        return cls(
            id=str(data["id"]),
            start_time=parse_timestamp(start_time),
            profile_type=data.get("profileType", data.get("profile_type")) or default_profile,
            events=events,
            name=data.get("name") or "",
            end_time=parse_timestamp(end_time) if end_time else None,
            status=data.get("status") or "completed",
            ticket_id=data.get("ticketId", data.get("ticket_id")),
            tags=list(data.get("tags") or []),
        )

    def to_json(self) -> str:
        """Convert session to JSON string"""
        return json.dumps(self.to_dict(), indent=2)
