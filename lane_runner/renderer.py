"""
Frame Rendering
================
Turns game state into text lanes, and paints lanes and screens
(intro, playfield, game over) into the Screen buffer.
"""

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from .config import GameConfig
from .screen import Screen, NEON_CYAN, NEON_YELLOW, NEON_RED, GRAY_MED, GRAY_DARK

if TYPE_CHECKING:
    from .game import GameState


# Widest fixed text line, so short lanes still fit the messages
TEXT_WIDTH = 32

INTRO_LINES = [
    'Welcome to Lane Runner!',
    'Avoid the obstacles!',
    'Press any key to start...',
]

# Playfield rows
ROW_SCORE = 0
ROW_AIR = 1
ROW_GROUND = 2
ROW_HINT = 4


@dataclass(frozen=True)
class Frame:
    """One rendered tick: both lanes plus the score line."""
    air_lane: str
    ground_lane: str
    score_text: str


def render(state: 'GameState', config: GameConfig) -> Frame:
    """
    Build the lane texts for the current state.

    Both lanes are exactly config.lane_length cells wide. Obstacles at
    position lane_length (just spawned) are past the right edge and
    not drawn yet.
    """
    width = config.lane_length
    position = state.character_position
    airborne = state.is_airborne

    air = [config.air_glyph] * width
    ground = [config.ground_glyph] * width

    for obstacle in state.obstacles:
        if 0 <= obstacle < width:
            ground[obstacle] = config.obstacle_glyph

    if airborne:
        air[position] = config.character_glyph
        ground[position] = config.ground_glyph
    else:
        ground[position] = config.character_glyph

    return Frame(
        air_lane=''.join(air),
        ground_lane=''.join(ground),
        score_text=f'Score: {state.score}',
    )


def jump_hint(config: GameConfig) -> str:
    key = 'SPACE' if config.jump_key == ' ' else config.jump_key.upper()
    return f'Press {key} to jump.'


def frame_lines(frame: Frame, config: GameConfig) -> List[str]:
    """The full text block for a frame, top to bottom."""
    return [frame.score_text, frame.air_lane, frame.ground_lane, '', jump_hint(config)]


def screen_width(config: GameConfig) -> int:
    return max(config.lane_length, TEXT_WIDTH)


# =============================================================================
# SCREEN PAINTING
# =============================================================================

def draw_frame(screen: Screen, frame: Frame, config: GameConfig):
    """Paint a playfield frame into the screen's back buffer."""
    screen.clear_back()

    screen.put_string(0, ROW_SCORE, frame.score_text, NEON_YELLOW)

    for x, char in enumerate(frame.air_lane):
        color = NEON_CYAN if char == config.character_glyph else GRAY_DARK
        screen.put(x, ROW_AIR, char, color)

    for x, char in enumerate(frame.ground_lane):
        if char == config.character_glyph:
            color = NEON_CYAN
        elif char == config.obstacle_glyph:
            color = NEON_RED
        else:
            color = GRAY_DARK
        screen.put(x, ROW_GROUND, char, color)

    screen.put_string(0, ROW_HINT, jump_hint(config), GRAY_MED)


def draw_intro(screen: Screen):
    """Paint the welcome text shown while waiting for the start key."""
    screen.clear_back()
    screen.put_string(0, 0, INTRO_LINES[0], NEON_CYAN)
    screen.put_string(0, 1, INTRO_LINES[1], NEON_YELLOW)
    screen.put_string(0, 3, INTRO_LINES[2], GRAY_MED)


def draw_game_over(screen: Screen, score: int):
    """Paint the final screen after a collision."""
    screen.clear_back()
    screen.put_string(0, 0, 'Game Over!', NEON_RED)
    screen.put_string(0, 1, f'Your final score is: {score}', NEON_YELLOW)
