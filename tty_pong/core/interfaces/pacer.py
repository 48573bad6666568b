"""
Pacer protocol - defines interface for frame timing
"""

from collections.abc import Iterator
from typing import Protocol


class FramePacer(Protocol):
    """Produces one tick per time slice as ``(frame_number, dt)`` pairs"""

    def __iter__(self) -> Iterator[tuple[int, float]]: ...
