"""Core framework components for GIFTFALL."""

from .state import State, StateMachine
from .events import EventBus, Event, EventType
from .scheduler import Scheduler

__all__ = ["State", "StateMachine", "EventBus", "Event", "EventType", "Scheduler"]
