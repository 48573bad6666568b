"""
Protocols for the collaborators driving the simulation
"""

from tty_pong.core.interfaces.input import InputSource
from tty_pong.core.interfaces.pacer import FramePacer
from tty_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSource", "FramePacer", "RendererProtocol"]
