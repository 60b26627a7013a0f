from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Dict


class Event(Enum):
    GRAVITY_DROP = "gravity_drop"
    USER_MOVE = "user_move"
    GAME_OVER = "game_over"


class EventLog:
    """Remembers when each kind of event last happened, for debouncing."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self.event_timestamps: Dict[Event, float] = {}

    def did_happen(self, event: Event) -> bool:
        return event in self.event_timestamps

    def register_event(self, event: Event) -> None:
        self.event_timestamps[event] = self.clock()

    def elapsed_since(self, event: Event, delay: float) -> bool:
        ts = self.event_timestamps.get(event)
        if ts is None:
            return True
        return self.clock() - ts >= delay
