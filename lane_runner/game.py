"""
Game Loop
==========
Owns the run state and drives it one tick at a time:
spawn, scroll, input, jump, collision, draw, speed-up, pace.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .collision import detect_collision
from .config import GameConfig
from .controls import InputEvent, InputSampler
from .jump import JumpState
from .renderer import Frame, render, draw_frame, draw_intro, draw_game_over
from .screen import Screen
from .track import ObstacleTrack


logger = logging.getLogger(__name__)


# Game phases
PHASE_STARTING = 'starting'
PHASE_RUNNING = 'running'
PHASE_ENDED = 'ended'


# =============================================================================
# GAME STATE
# =============================================================================

@dataclass
class GameState:
    """Central state for one run. Created at start, discarded at the end."""
    character_position: int
    jump: JumpState
    track: ObstacleTrack
    tick_speed: float  # Seconds between ticks
    score: int = 0
    tick_count: int = 0
    phase: str = PHASE_STARTING

    @classmethod
    def new(cls, config: GameConfig) -> 'GameState':
        return cls(
            character_position=config.character_position,
            jump=JumpState(duration=config.jump_duration),
            track=ObstacleTrack(config.lane_length),
            tick_speed=config.initial_tick_speed,
        )

    @property
    def is_airborne(self) -> bool:
        return self.jump.is_airborne

    @property
    def airborne_ticks_remaining(self) -> int:
        return self.jump.ticks_remaining

    @property
    def obstacles(self) -> frozenset:
        return self.track.positions


def _print_output(output: str):
    print(output, end='', flush=True)


# =============================================================================
# LOOP
# =============================================================================

class GameLoop:
    """
    Sequential tick driver.

    Nothing here runs concurrently: every mutation of a tick is applied
    before its frame is drawn, and the only pause is the sleep between
    ticks in run().
    """

    def __init__(self, config: GameConfig, sampler: InputSampler, screen: Screen,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 write: Callable[[str], None] = _print_output):
        self.config = config
        self.sampler = sampler
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.sleep = sleep
        self.write = write

        self.state = GameState.new(config)
        self.last_frame: Optional[Frame] = None

    @property
    def phase(self) -> str:
        return self.state.phase

    def start(self):
        """Show the intro, wait for the confirmation key, then start running."""
        if self.state.phase != PHASE_STARTING:
            raise RuntimeError(f'cannot start a game in phase {self.state.phase!r}')

        draw_intro(self.screen)
        self._flush()
        self.sampler.wait_for_start()

        # Only time the playfield clears the whole screen
        self.screen.invalidate()
        self.state.phase = PHASE_RUNNING
        logger.info('Run started: %s', self.config)

    def step(self) -> bool:
        """
        Run exactly one tick. Returns False once the run has ended.

        Order matters and is fixed: count, spawn, scroll, input, jump,
        collision, draw, speed-up.
        """
        state = self.state
        config = self.config
        if state.phase != PHASE_RUNNING:
            raise RuntimeError(f'cannot step a game in phase {state.phase!r}')

        state.tick_count += 1
        state.score += 1

        state.track.maybe_spawn(
            state.tick_count,
            config.obstacle_frequency,
            config.spawn_probability,
            self.rng,
        )
        state.track.tick()

        if self.sampler.poll() is InputEvent.JUMP:
            state.jump.request_jump()
        # A jump started this tick already spends one tick of air time
        state.jump.tick()

        if detect_collision(state.character_position, state.is_airborne, state.track):
            self._end()
            return False

        self.last_frame = render(state, config)
        draw_frame(self.screen, self.last_frame, config)
        self._flush()

        if state.tick_speed > config.min_tick_speed:
            state.tick_speed = max(
                config.min_tick_speed,
                state.tick_speed - config.tick_speed_step,
            )
        return True

    def run(self) -> int:
        """Play until a collision. Returns the final score."""
        if self.state.phase == PHASE_STARTING:
            self.start()

        while self.step():
            self.sleep(self.state.tick_speed)

        return self.state.score

    def _end(self):
        """Collision: stop the run and report the final score."""
        self.state.phase = PHASE_ENDED
        logger.info(
            'Collision at %d on tick %d, final score %d',
            self.state.character_position, self.state.tick_count, self.state.score,
        )
        self.screen.invalidate()
        draw_game_over(self.screen, self.state.score)
        self._flush()

    def _flush(self):
        output = self.screen.present()
        if output:
            self.write(output)
