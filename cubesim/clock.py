"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable

FPS_LIMIT30 = 1.0 / 30.0
FPS_LIMIT60 = 1.0 / 60.0
FPS_LIMIT300 = 1.0 / 300.0


class Clock:
    """Measures frame durations from a monotonic time source in seconds.

    ``delta_time`` is real time since the last frame; ``fixed_delta_time``
    is that scaled by ``time_multiplier`` and accumulates into
    ``fixed_current_time``.
    """

    def __init__(self, source: Callable[[], float] | None = None) -> None:
        self._source = source if source is not None else time.perf_counter
        self.current_time = 0.0
        self.fixed_current_time = 0.0
        self.delta_time = 0.0
        self.fixed_delta_time = 0.0
        self._last_frame = 0.0
        self._time_multiplier = 1

    @property
    def time_multiplier(self) -> int:
        return self._time_multiplier

    @time_multiplier.setter
    def time_multiplier(self, value: int) -> None:
        if value < 0:
            raise ValueError("time multiplier must not be negative")
        self._time_multiplier = int(value)

    def initialize(self) -> None:
        """Start measuring from now."""
        self.current_time = float(self._source())
        self._last_frame = self.current_time
        self.fixed_current_time = self.current_time

    def hold(self) -> None:
        """Refresh ``delta_time`` without ending the frame."""
        self.delta_time = float(self._source()) - self._last_frame

    def update(self) -> None:
        """End the current frame."""
        self.current_time = float(self._source())
        self.delta_time = self.current_time - self._last_frame
        self._last_frame = self.current_time
        self.fixed_delta_time = self.delta_time * self._time_multiplier
        self.fixed_current_time += self.fixed_delta_time