"""
Cube Game
A Rubik's-style cube engine and a turn-based console game built on it.
"""

__version__ = "0.1.0"

from .cube import Cube, Color, Side, Direction
from .operations import (
    rotate_face,
    rotate_row,
    rotate_column,
    rotate_cube,
    rotate_front_face,
    is_solved,
    move_cursor,
    reset,
    shuffle,
)
from .utils import validate_size, create_solved_cube

__all__ = [
    "Cube",
    "Color",
    "Side",
    "Direction",
    "rotate_face",
    "rotate_row",
    "rotate_column",
    "rotate_cube",
    "rotate_front_face",
    "is_solved",
    "move_cursor",
    "reset",
    "shuffle",
    "validate_size",
    "create_solved_cube",
]
