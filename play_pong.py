#!/usr/bin/env python3
"""
Main script to launch TTY Pong in the current terminal
"""

import sys

from tty_pong.terminal.app import main
from tty_pong.utils.config import game_config

if __name__ == "__main__":
    layout = game_config.get_keyboard_layout()
    print("=== TTY PONG ===")
    print()
    print("CONTROLS:")
    print(f"  Player 1 (Left): {layout.display_names['up']}/{layout.display_names['down']}")
    print("  Player 2 (Right): Arrow keys up/down")
    print(f"  {game_config.RESET_KEY.upper()}: Reset ball and paddles")
    print(f"  {game_config.QUIT_KEY.upper()} or Ctrl-C: Quit")
    print()

    sys.exit(main(sys.argv[1:]))
