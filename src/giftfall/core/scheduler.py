"""Interval tick sources driven by frame time.

Each registered interval queues an event on the bus whenever its period
elapses. Nothing runs on its own thread: the host advances the scheduler
once per frame with the frame's delta, and the queued ticks are handled
when the bus drains its queue.
"""

from dataclasses import dataclass
import itertools
import logging

from giftfall.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)


@dataclass
class IntervalTimer:
    """A repeating timer that fires every `interval_ms`."""

    handle: int
    interval_ms: float
    event_type: EventType | str
    elapsed_ms: float = 0.0
    fired: int = 0


class Scheduler:
    """Owns interval timers and turns elapsed time into queued events.

    Usage:
        scheduler = Scheduler(event_bus)
        handle = scheduler.every(1000, EventType.GIFT_TIMER)

        # Once per frame:
        scheduler.advance(delta_ms)
        event_bus.process_queue()

        scheduler.cancel(handle)
    """

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus
        self._timers: dict[int, IntervalTimer] = {}
        self._ids = itertools.count(1)

    def every(self, interval_ms: float, event_type: EventType | str) -> int:
        """Register an interval. Returns a handle for cancel()."""
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        handle = next(self._ids)
        self._timers[handle] = IntervalTimer(
            handle=handle,
            interval_ms=float(interval_ms),
            event_type=event_type,
        )
        logger.debug(f"Interval {handle} registered: {event_type} every {interval_ms}ms")
        return handle

    def cancel(self, handle: int | None) -> bool:
        """Cancel an interval. Unknown or None handles are ignored."""
        if handle is None:
            return False
        timer = self._timers.pop(handle, None)
        if timer is not None:
            logger.debug(f"Interval {handle} cancelled after {timer.fired} ticks")
        return timer is not None

    def cancel_all(self) -> None:
        self._timers.clear()

    @property
    def active(self) -> int:
        return len(self._timers)

    def is_active(self, handle: int | None) -> bool:
        return handle in self._timers

    def advance(self, delta_ms: float) -> int:
        """Advance every interval by delta_ms and queue the ticks that came due.

        A long frame can make an interval fire more than once.

        Returns:
            Number of events queued
        """
        queued = 0
        for timer in list(self._timers.values()):
            timer.elapsed_ms += delta_ms
            while timer.elapsed_ms >= timer.interval_ms:
                timer.elapsed_ms -= timer.interval_ms
                timer.fired += 1
                self._event_bus.queue_event(Event(
                    timer.event_type,
                    data={"timer": timer.handle, "tick": timer.fired},
                    source="scheduler",
                ))
                queued += 1
        return queued
