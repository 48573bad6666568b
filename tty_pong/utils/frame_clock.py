"""
Fixed-rate frame pacing for the game loop
"""

import time
from collections.abc import Callable
from collections.abc import Iterator


class FrameClock:
    """
    Infinite iterator limiting the loop to one frame per time slice.

    Each ``next()`` sleeps until the current slice has elapsed when the loop
    body was faster than the frame duration, then yields the frame number and
    the wall-clock time since the previous tick. The first tick reports the
    time since the clock was created.
    """

    def __init__(
        self,
        frame_duration: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if frame_duration <= 0:
            raise ValueError(f"frame_duration must be positive, got {frame_duration}")
        self.frame_duration = frame_duration
        self._clock = clock
        self._sleep = sleep
        self.frame = 0
        self.current_frame_start = clock()

    @classmethod
    def from_fps(cls, fps: int, **kwargs: Callable) -> "FrameClock":
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        return cls(1.0 / fps, **kwargs)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return self

    def __next__(self) -> tuple[int, float]:
        end_time = self.current_frame_start + self.frame_duration
        remaining = end_time - self._clock()
        if remaining > 0:
            self._sleep(remaining)

        now = self._clock()
        dt = now - self.current_frame_start
        self.current_frame_start = now

        frame_number = self.frame
        self.frame += 1
        return frame_number, dt
