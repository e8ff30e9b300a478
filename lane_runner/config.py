"""
Game Configuration
===================
Tunable constants for a run, with environment overrides.
"""

import math
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional


# =============================================================================
# DEFAULTS
# =============================================================================

LANE_LENGTH = 50
CHARACTER_POSITION = 5
JUMP_DURATION = 3  # Ticks the jump lasts
OBSTACLE_FREQUENCY = 5  # Every 5 ticks, an obstacle may appear
SPAWN_PROBABILITY = 0.5

INITIAL_TICK_SPEED = 0.2  # Seconds
MIN_TICK_SPEED = 0.05
TICK_SPEED_STEP = 0.0005

ENV_PREFIX = 'LANE_RUNNER_'


@dataclass(frozen=True)
class GameConfig:
    """Everything a single run needs to know up front."""

    lane_length: int = LANE_LENGTH
    character_position: int = CHARACTER_POSITION
    jump_duration: int = JUMP_DURATION
    obstacle_frequency: int = OBSTACLE_FREQUENCY
    spawn_probability: float = SPAWN_PROBABILITY

    initial_tick_speed: float = INITIAL_TICK_SPEED
    min_tick_speed: float = MIN_TICK_SPEED
    tick_speed_step: float = TICK_SPEED_STEP

    # Glyphs must be single-width so every lane is exactly lane_length cells
    character_glyph: str = '@'
    obstacle_glyph: str = '#'
    ground_glyph: str = '_'
    air_glyph: str = ' '
    jump_key: str = ' '

    def __post_init__(self):
        for name in ('spawn_probability', 'initial_tick_speed',
                     'min_tick_speed', 'tick_speed_step'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f'{name} must be a finite number, got {value}')

        if self.lane_length < 1:
            raise ValueError(f'lane_length must be positive, got {self.lane_length}')
        if not 0 <= self.character_position < self.lane_length:
            raise ValueError(
                f'character_position {self.character_position} is outside '
                f'the lane [0, {self.lane_length})'
            )
        if self.jump_duration < 1:
            raise ValueError(f'jump_duration must be at least 1, got {self.jump_duration}')
        if self.obstacle_frequency < 1:
            raise ValueError(
                f'obstacle_frequency must be at least 1, got {self.obstacle_frequency}'
            )
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError(
                f'spawn_probability must be within [0, 1], got {self.spawn_probability}'
            )
        if not 0.0 < self.min_tick_speed <= self.initial_tick_speed:
            raise ValueError(
                'tick speeds must satisfy 0 < min_tick_speed <= initial_tick_speed, '
                f'got {self.min_tick_speed} and {self.initial_tick_speed}'
            )
        if self.tick_speed_step < 0:
            raise ValueError(f'tick_speed_step must not be negative, got {self.tick_speed_step}')

        for name in ('character_glyph', 'obstacle_glyph', 'ground_glyph',
                     'air_glyph', 'jump_key'):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f'{name} must be a single character, got {value!r}')

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameConfig':
        """
        Build a config from defaults overridden by LANE_RUNNER_* variables.

        LANE_RUNNER_LANE_LENGTH=60 sets lane_length, and so on for every
        field. Values are parsed with the field's default type.
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = environ.get(key)
            if raw is None:
                continue
            parse = type(f.default)
            if parse is str:
                overrides[f.name] = raw
                continue
            try:
                overrides[f.name] = parse(raw)
            except ValueError:
                raise ValueError(f'{key}: expected {parse.__name__}, got {raw!r}') from None

        return cls(**overrides)

    @property
    def frame_height(self) -> int:
        """Rows in one frame: score, air lane, ground lane, blank, hint."""
        return 5
