"""Event bus - EventBusProtocol and InMemoryEventBus."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from core.infrastructure.logging import get_logger

from .events import Event

EventHandler = Callable[[Event], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations."""

    async def publish(self, event: Event) -> None:
        """Publish an event.

        Args:
            event: Event to publish
        """
        ...

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event name.

        Args:
            event_name: Event name to subscribe to
            handler: Async handler function
        """
        ...


class InMemoryEventBus(EventBusProtocol):
    """In-memory event bus implementation."""

    def __init__(self) -> None:
        """Initialize in-memory event bus."""
        self._handlers: dict[str, list[EventHandler]] = {}
        self._logger = get_logger("orchestration.event_bus")

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe a handler to an event name.

        A name ending in ".*" subscribes to every event under that prefix,
        e.g. "autofix.*" receives "autofix.started" and "autofix.failed".

        Args:
            event_name: Event name or prefix pattern to subscribe to
            handler: Async handler function
        """
        if event_name not in self._handlers:
            self._handlers[event_name] = []
        self._handlers[event_name].append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        """Remove a previously subscribed handler, if present.

        Args:
            event_name: Event name the handler was subscribed to
            handler: Handler to remove
        """
        handlers = self._handlers.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)

    async def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        A failing handler is logged and does not stop the remaining handlers.

        Args:
            event: Event to publish
        """
        handlers = self._handlers_for(event.name)
        if not handlers:
            return

        self._logger.info(
            f"publishing_event name={event.name} "
            f"workflow_id={event.metadata.workflow_id} handler_count={len(handlers)}"
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as exc:
                self._logger.error(
                    f"handler_error name={event.name} handler={handler!r} error={exc}",
                    exc_info=True,
                )

    def _handlers_for(self, event_name: str) -> list[EventHandler]:
        handlers = list(self._handlers.get(event_name, []))
        for pattern, subscribed in self._handlers.items():
            if pattern.endswith(".*") and event_name.startswith(pattern[:-1]):
                handlers.extend(subscribed)
        return handlers
