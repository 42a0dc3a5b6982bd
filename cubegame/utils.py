"""
Utility functions for inspecting and displaying cubes.
"""

from typing import Dict

import numpy as np

from .cube import Cube, Color, Side, MIN_SIZE, MAX_SIZE


COLOR_LETTERS = {
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.RED: "R",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
    Color.WHITE: "W",
}

# Face positions in the cross net as (band, slot), in face-size units
NET_LAYOUT = {
    Side.TOP: (0, 1),
    Side.LEFT: (1, 0),
    Side.FRONT: (1, 1),
    Side.RIGHT: (1, 2),
    Side.BOTTOM: (2, 1),
    Side.BACK: (3, 1),
}


def validate_size(size: int) -> bool:
    """
    Validate that a cube size is acceptable.

    Args:
        size (int): The size to validate

    Returns:
        bool: True if size is an integer between 2 and 255, False otherwise
    """
    return isinstance(size, int) and not isinstance(size, bool) and MIN_SIZE <= size <= MAX_SIZE


def create_solved_cube(size: int = 3) -> Cube:
    """
    Create a cube in its reset state.

    Args:
        size (int): Side length of the cube

    Returns:
        Cube: A new solved cube
    """
    return Cube(size)


def get_face(cube: Cube, side: Side) -> np.ndarray:
    """
    Get a copy of one face of the cube.

    Args:
        cube (Cube): The cube to read
        side (Side): The side to copy

    Returns:
        np.ndarray: An N x N array of color values
    """
    return cube.faces[side].copy()


def color_counts(cube: Cube) -> Dict[Color, int]:
    """Count the facelets of each color over the whole cube."""
    counts = np.bincount(cube.faces.ravel(), minlength=len(Color))
    return {color: int(counts[color]) for color in Color}


def is_face_uniform(face: np.ndarray) -> bool:
    """A face is uniform when every facelet matches its origin facelet."""
    return bool(np.all(face == face[0, 0]))


def format_net(cube: Cube) -> str:
    """
    Lay the cube out as a plain-text cross net, one letter per facelet.

    Top sits above Front, Left and Right beside it, Bottom and then Back
    below it.

    Args:
        cube (Cube): The cube to format

    Returns:
        str: The net, one line per facelet row
    """
    n = cube.size
    grid = [[" "] * (3 * n) for _ in range(4 * n)]

    for side, (band, slot) in NET_LAYOUT.items():
        for r in range(n):
            for c in range(n):
                grid[band * n + r][slot * n + c] = COLOR_LETTERS[Color(int(cube.faces[side, r, c]))]

    return "\n".join("".join(line).rstrip() for line in grid)
