"""
Core Cube class holding the facelet state of a Rubik's-style cube.
"""

from enum import IntEnum
from typing import Optional

import numpy as np

from .exceptions import CubeSizeError


MIN_SIZE = 2
MAX_SIZE = 255


class Color(IntEnum):
    """Facelet colors."""
    BLUE = 0
    GREEN = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    WHITE = 5


class Side(IntEnum):
    """Sides of the positioned cube. Front always faces the player."""
    FRONT = 0
    BACK = 1
    TOP = 2
    BOTTOM = 3
    LEFT = 4
    RIGHT = 5


class Direction(IntEnum):
    """Directions for layer turns, whole-cube rotations and face twists."""
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    CW = 4
    CCW = 5


# Face colors on reset, side by side
RESET_COLORS = {
    Side.FRONT: Color.WHITE,
    Side.BACK: Color.YELLOW,
    Side.TOP: Color.RED,
    Side.BOTTOM: Color.ORANGE,
    Side.LEFT: Color.BLUE,
    Side.RIGHT: Color.GREEN,
}


class Cube:
    """
    Represents a cube of six N x N faces of colored facelets.

    The Back face is stored as seen when the cube is tipped forward over its
    top edge, so vertical moves copy it directly while horizontal moves
    address it through a half turn.

    Attributes:
        size (int): Side length N
        faces (np.ndarray): Facelet colors, shape (6, N, N), indexed [side, row, col]
        row (int): Cursor row used by row turns
        col (int): Cursor column used by column turns
    """

    def __init__(self, size: int = 3, faces: Optional[np.ndarray] = None):
        """
        Initialize a Cube.

        Args:
            size (int): Side length of the cube (default: 3)
            faces (np.ndarray, optional): Initial facelet colors

        Raises:
            CubeSizeError: If size is outside 2..255 or faces has the wrong shape
        """
        if isinstance(size, bool) or not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
            raise CubeSizeError(
                f"Cube size must be an integer between {MIN_SIZE} and {MAX_SIZE}, got {size!r}",
                size=size,
            )

        self.size = size
        self.row = 0
        self.col = 0

        if faces is not None:
            faces = np.asarray(faces)
            if faces.shape != (len(Side), size, size):
                raise CubeSizeError(
                    f"Faces shape {faces.shape} doesn't match cube size ({len(Side)}, {size}, {size})",
                    size=size,
                    details={"shape": faces.shape},
                )
            self.faces = faces.astype(np.uint8)
        else:
            self.faces = np.zeros((len(Side), size, size), dtype=np.uint8)
            self.reset()

    def reset(self):
        """Paint every face with its reset color and zero the cursor."""
        for side, color in RESET_COLORS.items():
            self.faces[side] = color
        self.row = 0
        self.col = 0

    def get(self, side: Side, row: int, col: int) -> Color:
        """
        Get the color of one facelet.

        Args:
            side, row, col: Facelet coordinates

        Returns:
            Color of the facelet
        """
        return Color(int(self.faces[side, row, col]))

    def set(self, side: Side, row: int, col: int, color: Color):
        """
        Set the color of one facelet.

        Args:
            side, row, col: Facelet coordinates
            color: Color to set
        """
        self.faces[side, row, col] = color

    def face(self, side: Side) -> np.ndarray:
        """Return a writable view of one face."""
        return self.faces[side]

    def copy(self) -> 'Cube':
        """
        Create a deep copy of the cube, cursor included.

        Returns:
            A new Cube instance with copied facelets
        """
        result = Cube(self.size, self.faces)
        result.row = self.row
        result.col = self.col
        return result

    def __repr__(self) -> str:
        return f"Cube(size={self.size}, row={self.row}, col={self.col})"

    def __str__(self) -> str:
        """Detailed string representation."""
        return f"{self!r}\n{self.faces}"

    def __eq__(self, other: 'Cube') -> bool:
        """Check equality of size, cursor and every facelet."""
        if not isinstance(other, Cube):
            return False
        return (
            self.size == other.size
            and self.row == other.row
            and self.col == other.col
            and np.array_equal(self.faces, other.faces)
        )
