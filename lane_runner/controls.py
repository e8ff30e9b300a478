"""
Controls
=========
Raw terminal mode scope and non-blocking jump polling.
"""

import logging
import sys
from contextlib import contextmanager
from enum import Enum, auto
from typing import Iterator, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke


logger = logging.getLogger(__name__)


class InputEvent(Enum):
    """What a single poll saw."""
    NONE = auto()
    JUMP = auto()


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin is not None and sys.stdin.isatty()
    except (AttributeError, ValueError):
        # Detached or closed stdin
        return False


class InputSampler:
    """
    Samples the keyboard once per tick without ever blocking.

    Only the jump key matters; everything else read from the terminal
    is dropped. When no keyboard is attached, or reading fails, the
    sampler degrades to reporting InputEvent.NONE forever.
    """

    def __init__(self, term: Terminal, jump_key: str = ' ',
                 keyboard_available: Optional[bool] = None):
        self.term = term
        self.jump_key = jump_key
        if keyboard_available is None:
            keyboard_available = _stdin_is_tty()
        self.keyboard_available = keyboard_available
        if not keyboard_available:
            logger.warning('No keyboard attached; jump input disabled')

    @contextmanager
    def raw_mode(self) -> Iterator['InputSampler']:
        """
        Hold cbreak mode (no line buffering, no echo) for the body.

        blessed restores the previous mode on every exit path, and
        skips the mode switch entirely on hosts without a keyboard tty.
        """
        with self.term.cbreak():
            logger.debug('Raw mode acquired')
            try:
                yield self
            finally:
                logger.debug('Raw mode released')

    def poll(self) -> InputEvent:
        """Drain at most one keystroke and report whether it asked for a jump."""
        key = self._read(timeout=0)
        if key and not key.is_sequence and str(key) == self.jump_key:
            return InputEvent.JUMP
        return InputEvent.NONE

    def wait_for_start(self) -> Optional[Keystroke]:
        """Block until any key is pressed. Returns immediately without a keyboard."""
        return self._read(timeout=None)

    def _read(self, timeout: Optional[float]) -> Optional[Keystroke]:
        if not self.keyboard_available:
            return None
        try:
            return self.term.inkey(timeout=timeout)
        except OSError as exc:
            logger.warning('Keyboard read failed (%s); jump input disabled', exc)
            self.keyboard_available = False
            return None
