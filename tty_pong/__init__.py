"""
TTY Pong: two-player Pong rendered in the terminal
"""

__version__ = "0.1.0"
