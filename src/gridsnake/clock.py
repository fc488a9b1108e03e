# clock.py
import time
from typing import Callable, Optional


class GameClock:
    """Answers "is the next tick due?" for a given speed. Holds no game state."""

    def __init__(self, time_source: Optional[Callable[[], float]] = None):
        self._time_source = time_source or time.perf_counter

    def now(self) -> float:
        return self._time_source()

    @staticmethod
    def elapsed_since(last_tick_time: float, now: float, speed: float) -> bool:
        return now - last_tick_time >= speed

    def is_due(self, state, now: Optional[float] = None) -> bool:
        if now is None:
            now = self.now()
        return self.elapsed_since(state.last_tick, now, state.speed)
