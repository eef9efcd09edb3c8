"""Tests for EventBus."""

from datetime import datetime, timezone

import pytest

from orchestration.bus import InMemoryEventBus
from orchestration.events import Event, EventMetadata


def make_event(name: str = "autofix.started") -> Event:
    metadata = EventMetadata(
        workflow_id="wf-test-123",
        issue_id="SCA-001",
        timestamp=datetime.now(timezone.utc),
    )
    return Event(name=name, payload={"category": "SCA"}, metadata=metadata)


@pytest.mark.asyncio
async def test_event_bus_subscribe_and_publish():
    """Test subscribing and publishing events."""
    bus = InMemoryEventBus()

    events_received: list[Event] = []

    async def handler(event: Event) -> None:
        events_received.append(event)

    bus.subscribe("autofix.started", handler)

    await bus.publish(make_event())

    assert len(events_received) == 1
    assert events_received[0].name == "autofix.started"
    assert events_received[0].payload == {"category": "SCA"}
    assert events_received[0].metadata.workflow_id == "wf-test-123"
    assert events_received[0].metadata.issue_id == "SCA-001"


@pytest.mark.asyncio
async def test_event_bus_multiple_handlers():
    """Test multiple handlers for the same event."""
    bus = InMemoryEventBus()

    events_1: list[Event] = []
    events_2: list[Event] = []

    async def handler1(event: Event) -> None:
        events_1.append(event)

    async def handler2(event: Event) -> None:
        events_2.append(event)

    bus.subscribe("autofix.started", handler1)
    bus.subscribe("autofix.started", handler2)

    await bus.publish(make_event())

    assert len(events_1) == 1
    assert len(events_2) == 1


@pytest.mark.asyncio
async def test_event_bus_no_handlers():
    """Test publishing event with no handlers."""
    bus = InMemoryEventBus()

    # Should not raise an error
    await bus.publish(make_event())


@pytest.mark.asyncio
async def test_event_bus_failing_handler_does_not_stop_others():
    bus = InMemoryEventBus()
    received: list[str] = []

    async def broken(event: Event) -> None:
        raise RuntimeError("handler crashed")

    async def healthy(event: Event) -> None:
        received.append(event.name)

    bus.subscribe("autofix.failed", broken)
    bus.subscribe("autofix.failed", healthy)

    await bus.publish(make_event("autofix.failed"))

    assert received == ["autofix.failed"]


@pytest.mark.asyncio
async def test_event_bus_unsubscribe():
    bus = InMemoryEventBus()
    received: list[Event] = []

    async def handler(event: Event) -> None:
        received.append(event)

    bus.subscribe("autofix.started", handler)
    bus.unsubscribe("autofix.started", handler)

    await bus.publish(make_event())

    assert received == []


@pytest.mark.asyncio
async def test_event_bus_prefix_subscription_receives_all_lifecycle_events():
    bus = InMemoryEventBus()
    received: list[str] = []

    async def handler(event: Event) -> None:
        received.append(event.name)

    bus.subscribe("autofix.*", handler)

    await bus.publish(make_event("autofix.started"))
    await bus.publish(make_event("autofix.success"))
    await bus.publish(make_event("audit.recorded"))

    assert received == ["autofix.started", "autofix.success"]


@pytest.mark.asyncio
async def test_event_bus_exact_and_prefix_handlers_both_run():
    bus = InMemoryEventBus()
    received: list[str] = []

    async def exact(event: Event) -> None:
        received.append("exact")

    async def prefix(event: Event) -> None:
        received.append("prefix")

    bus.subscribe("autofix.failed", exact)
    bus.subscribe("autofix.*", prefix)

    await bus.publish(make_event("autofix.failed"))

    assert received == ["exact", "prefix"]
