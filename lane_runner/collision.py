"""
Collision
==========
"""

from typing import Container


def detect_collision(character_position: int, is_airborne: bool,
                     obstacles: Container[int]) -> bool:
    """
    Check whether the character is hit this tick.

    Obstacles only live on the ground lane, so an airborne character
    never collides regardless of what is under it.
    """
    return not is_airborne and character_position in obstacles
