"""Orchestration events - Event, EventMetadata."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class EventMetadata:
    """Metadata for an event."""

    workflow_id: str
    issue_id: str
    timestamp: datetime


@dataclass
class Event:
    """Workflow event published on the event bus."""

    name: str
    payload: dict[str, object]
    metadata: EventMetadata
