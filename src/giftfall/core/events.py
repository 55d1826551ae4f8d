"""
Event bus for GIFTFALL.

Input devices, interval timers and the game session talk through
events. Emitted events are dispatched immediately; queued events
wait until the frame drains the queue, so all mutations happen on
the frame's thread in a single place.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    BUTTON_PRESS = auto()  # Start / restart
    ARCADE_LEFT = auto()
    ARCADE_RIGHT = auto()
    ARCADE_LEFT_RELEASE = auto()
    ARCADE_RIGHT_RELEASE = auto()
    POINTER_DRAG = auto()

    # Timer events
    GIFT_TIMER = auto()
    OBSTACLE_TIMER = auto()

    # Session events (core -> UI)
    SESSION_STARTED = auto()
    SCORE_CHANGED = auto()
    GAME_OVER = auto()

    # System events
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Events can be emitted immediately or queued for batch processing.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._queue: deque[Event] = deque()
        self._event_history: deque[Event] = deque(maxlen=history_limit)

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event immediately."""
        self._event_history.append(event)
        self._dispatch(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for the next call to process_queue()."""
        self._queue.append(event)

    @property
    def pending(self) -> int:
        """Number of queued events not yet processed."""
        return len(self._queue)

    def process_queue(self) -> int:
        """Dispatch the events queued so far, in order.

        Events queued by handlers during the drain wait for the next call.

        Returns:
            Number of events dispatched
        """
        count = len(self._queue)
        for _ in range(count):
            self.emit(self._queue.popleft())
        return count

    def _dispatch(self, event: Event) -> None:
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = list(self._event_history)
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]


# Convenience functions for creating common events
def button_press_event(source: str = "button") -> Event:
    """Create a start/restart button event."""
    return Event(EventType.BUTTON_PRESS, source=source)


def arcade_event(direction: str, pressed: bool = True, source: str = "arcade") -> Event:
    """Create an arcade button press or release event."""
    if direction == "left":
        event_type = EventType.ARCADE_LEFT if pressed else EventType.ARCADE_LEFT_RELEASE
    else:
        event_type = EventType.ARCADE_RIGHT if pressed else EventType.ARCADE_RIGHT_RELEASE
    return Event(event_type, source=source)


def drag_event(dx: float, source: str = "pointer") -> Event:
    """Create a horizontal pointer drag event."""
    return Event(EventType.POINTER_DRAG, data={"dx": dx}, source=source)

