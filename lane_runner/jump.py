"""
Jump State
===========
Grounded / airborne state machine for the character.
"""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass
class JumpState:
    """
    Airborne while ticks_remaining > 0, grounded otherwise.

    A jump sets ticks_remaining to the full duration; each tick takes
    one away, and the tick that reaches zero lands the character.
    """
    duration: int = 3  # Ticks
    ticks_remaining: int = 0

    @property
    def is_airborne(self) -> bool:
        return self.ticks_remaining > 0

    def request_jump(self) -> bool:
        """
        Start a jump if grounded. Returns True if the jump started.

        Requests while airborne are ignored: no double jump and no
        extension of the current one.
        """
        if self.is_airborne:
            return False
        self.ticks_remaining = self.duration
        logger.debug('Jump started for %d ticks', self.duration)
        return True

    def tick(self) -> None:
        """Count down one tick of air time."""
        if self.ticks_remaining > 0:
            self.ticks_remaining -= 1
