"""Readline history and key bindings for the interactive prompt."""

from __future__ import annotations

import atexit
import logging
import os

from evalsh.config import EvalshConfig

logger = logging.getLogger(__name__)

# Skip loading history files bigger than this
MAX_HISTORY_BYTES = 1_000_000

# Guard against registering the atexit handler multiple times
_atexit_registered = False


def setup_readline(config: EvalshConfig) -> bool:
    """Enable line editing and persistent history.

    Returns:
        False if readline is unavailable on this platform.
    """
    try:
        import readline
    except ImportError:
        logger.debug("readline not available, history disabled")
        return False

    # Alt-arrow word movement
    readline.parse_and_bind(r'"\e[1;3D": backward-word')
    readline.parse_and_bind(r'"\e[1;3C": forward-word')
    readline.set_history_length(config.history_length)

    histfile = os.path.expanduser(config.history_file)
    try:
        if os.path.exists(histfile):
            size = os.path.getsize(histfile)
            if size > MAX_HISTORY_BYTES:
                print(f"Warning: History file is too large ({size // 1_000_000}MB), skipping load")
                print(f"Consider removing: {histfile}")
            else:
                readline.read_history_file(histfile)
    except OSError as e:
        logger.warning("Could not read history file %s: %s", histfile, e)

    global _atexit_registered
    if not _atexit_registered:
        atexit.register(_write_history, readline, histfile)
        _atexit_registered = True
    return True


def _write_history(readline, histfile: str) -> None:
    try:
        readline.write_history_file(histfile)
    except OSError as e:
        logger.warning("Could not write history file %s: %s", histfile, e)
