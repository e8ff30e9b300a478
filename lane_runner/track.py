"""
Obstacle Track
===============
Obstacle positions on a bounded lane: spawn at the far end,
scroll one cell toward the character per tick, drop off the near end.
"""

import logging
import random
from typing import Iterable, Iterator, Optional, Set


logger = logging.getLogger(__name__)


class ObstacleTrack:
    """
    Live obstacle positions, each in [0, lane_length].

    Positions form a set: two obstacles that land on the same cell
    collapse into one, which is all collision or rendering can see.
    """

    def __init__(self, lane_length: int, positions: Optional[Iterable[int]] = None):
        self.lane_length = lane_length
        self._positions: Set[int] = set()
        for position in positions or ():
            self.add(position)

    def __contains__(self, position: int) -> bool:
        return position in self._positions

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._positions))

    def __len__(self) -> int:
        return len(self._positions)

    @property
    def positions(self) -> frozenset:
        """Snapshot of the live positions."""
        return frozenset(self._positions)

    def add(self, position: int) -> None:
        """Place an obstacle. Positions off the lane are rejected."""
        if not 0 <= position <= self.lane_length:
            raise ValueError(
                f'obstacle position {position} is outside [0, {self.lane_length}]'
            )
        self._positions.add(position)

    def tick(self) -> None:
        """Advance every obstacle one cell, then prune the ones that left the lane."""
        advanced = {position - 1 for position in self._positions}
        self._positions = {position for position in advanced if position >= 0}

    def maybe_spawn(self, tick_index: int, frequency: int, spawn_probability: float,
                    rng: Optional[random.Random] = None) -> bool:
        """
        Roll for a new obstacle at the far end of the lane.

        Only every frequency-th tick qualifies, and at most one obstacle
        spawns per qualifying tick. Returns True if one was placed.
        """
        if tick_index % frequency != 0:
            return False
        if rng is None:
            rng = random
        if rng.random() >= spawn_probability:
            return False

        self._positions.add(self.lane_length)
        logger.debug('Obstacle spawned at %d on tick %d', self.lane_length, tick_index)
        return True
