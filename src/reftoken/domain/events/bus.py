"""Event bus for decoupled engine-to-host notifications.

The engine publishes what it did on each input event (rewrote references,
showed or hid suggestions, committed a token, rejected an edit) and hosts
subscribe to the kinds they care about.

Event Handler Contract:
    Handlers MUST be synchronous functions. The pipeline never suspends, so
    an async handler would silently never run; this is enforced at
    subscription time.
"""

import inspect
from typing import Callable, Type, TypeVar

from reftoken.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Example:
        ```python
        bus = EventBus()
        bus.subscribe(SuggestionsShown, lambda e: print(e.items))
        engine = ReferenceEngine(sources, event_bus=bus)
        ```

    Thread safety:
        Not thread-safe. One bus serves one input field on the UI thread.
    """

    def __init__(self) -> None:
        self._handlers: dict[Type[Event], list[EventHandler]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The event class to listen for
            handler: Synchronous callback receiving the event instance

        Raises:
            TypeError: If handler is an async function
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is an async function."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)  # type: ignore[arg-type]
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Remove a handler; unknown handlers are ignored."""
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)  # type: ignore[arg-type]
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Deliver an event to every handler subscribed to its exact type.

        Handlers run in subscription order. A handler that raises is logged
        and does not stop the remaining handlers or the pipeline.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")

        for handler in list(handlers):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event_type.__name__}")

    def clear(self) -> None:
        """Drop all subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        return bool(self._handlers.get(event_type))
