"""
Generated recap content data model
"""
from dataclasses import dataclass
from typing import Tuple
import json


@dataclass(frozen=True)
class TimelineEntry:
    """One row of the recap timeline"""
    time: str
    event: str
    importance: str  # high | medium | low

    def to_dict(self) -> dict:
        return {"time": self.time, "event": self.event, "importance": self.importance}


@dataclass(frozen=True)
class GeneratedContent:
    """
    Recap bundle produced by the content engine

    Every list is ranked best-first. Instances are immutable; editing happens
    downstream on the serialized dictionary.
    """
    title: str
    summary: str
    insights: Tuple[str, ...] = ()
    key_takeaways: Tuple[str, ...] = ()
    action_items: Tuple[str, ...] = ()
    related_topics: Tuple[str, ...] = ()
    timeline: Tuple[TimelineEntry, ...] = ()
    tags: Tuple[str, ...] = ()
    confidence: int = 0

    def to_dict(self) -> dict:
        """Convert content to the JSON shape consumed by the editor and exporters"""
        return {
            "title": self.title,
            "summary": self.summary,
            "insights": list(self.insights),
            "keyTakeaways": list(self.key_takeaways),
            "actionItems": list(self.action_items),
            "relatedTopics": list(self.related_topics),
            "timeline": [entry.to_dict() for entry in self.timeline],
            "tags": list(self.tags),
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedContent":
        """Create content from dictionary"""
        return cls(
            title=data["title"],
            summary=data["summary"],
            insights=tuple(data.get("insights", [])),
            key_takeaways=tuple(data.get("keyTakeaways", [])),
            action_items=tuple(data.get("actionItems", [])),
            related_topics=tuple(data.get("relatedTopics", [])),
            timeline=tuple(TimelineEntry(**entry) for entry in data.get("timeline", [])),
            tags=tuple(data.get("tags", [])),
            confidence=int(data.get("confidence", 0)),
        )

    def to_json(self) -> str:
        """Convert content to JSON string"""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
