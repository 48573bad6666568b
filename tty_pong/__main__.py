import sys

from tty_pong.terminal.app import main

sys.exit(main())
