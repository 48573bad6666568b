"""
Input protocol - defines interface for keyboard sources
"""

from typing import Protocol


class InputSource(Protocol):
    """
    Protocol for keyboard input implementations.

    The game only needs to know which keys are currently held; how they are
    read (terminal, test script, replay file) is up to the implementation.
    """

    def poll(self) -> frozenset[str]:
        """
        Collect the keys held since the previous call.

        Returns:
            Key identifiers ("w", "s", "KEY_UP", ...). A key that stays held
            is reported again on every call.
        """
        ...
