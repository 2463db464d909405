"""Event dispatcher - EventDispatcher protocol and InMemoryEventDispatcher."""

from typing import Any, Callable, Dict, List, Protocol, Type

from notification_channels.core.utils import get_logger

EventHandler = Callable[[Any], None]

logger = get_logger(__name__)


class EventDispatcher(Protocol):
    """Protocol for event dispatcher implementations."""

    def dispatch(self, event: Any) -> None:
        """Dispatch an event to its listeners.

        Args:
            event: Event to dispatch
        """
        ...


class InMemoryEventDispatcher:
    """Synchronous in-process dispatcher keyed by event type."""

    def __init__(self) -> None:
        self._handlers: Dict[Type, List[EventHandler]] = {}

    def subscribe(self, event_type: Type, handler: EventHandler) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: Class of the events to receive
            handler: Callable invoked with each matching event
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def dispatch(self, event: Any) -> None:
        """Call every handler subscribed to the event's type or a base of it.

        A failing handler is logged and does not stop the others.
        """
        handlers = [
            handler
            for event_type, registered in self._handlers.items()
            if isinstance(event, event_type)
            for handler in registered
        ]
        if not handlers:
            return

        logger.info(
            "Dispatching event",
            event_type=type(event).__name__,
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                logger.error(
                    "Event handler failed",
                    event_type=type(event).__name__,
                    handler=getattr(handler, "__name__", repr(handler)),
                    error=str(exc),
                    exc_info=True,
                )
