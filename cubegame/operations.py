"""
Operations that can be performed on cubes.

Every operation mutates the cube in place and is a permutation of its
facelets. A direction outside an operation's recognized set is a no-op.
"""

from typing import Optional, Union

import numpy as np

from .cube import Cube, Direction, Side
from .logging import get_logger
from .utils import is_face_uniform

logger = get_logger(__name__)

F, B, T, D, L, R = Side.FRONT, Side.BACK, Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT

SHUFFLE_ITERATIONS = 1000


def rotate_face(face: np.ndarray, direction: Direction):
    """
    Rotate a single N x N face a quarter turn in place.

    The rotated grid is built in full before being written back, so
    destination (r, c) takes source (N-1-c, r) for CW and (c, N-1-r) for CCW.

    Args:
        face (np.ndarray): The face to rotate, modified in place
        direction (Direction): CW or CCW
    """
    if direction == Direction.CW:
        face[:] = np.rot90(face, k=-1).copy()
    elif direction == Direction.CCW:
        face[:] = np.rot90(face, k=1).copy()


def _half_turn(face: np.ndarray):
    rotate_face(face, Direction.CW)
    rotate_face(face, Direction.CW)


def rotate_row(cube: Cube, direction: Direction, row: Optional[int] = None):
    """
    Turn one horizontal layer through Left, Front, Right and Back.

    A turn of row 0 also twists Top, and a turn of row N-1 also twists
    Bottom. The row index must lie in [0, N-1].

    Args:
        cube (Cube): The cube to turn
        direction (Direction): LEFT or RIGHT
        row (int, optional): Row to turn, defaults to the cursor row
    """
    if direction not in (Direction.LEFT, Direction.RIGHT):
        return

    if row is None:
        row = cube.row
    last = cube.size - 1
    faces = cube.faces
    back_row = (B, last - row, slice(None, None, -1))

    if direction == Direction.LEFT:
        if row == 0:
            rotate_face(faces[T], Direction.CW)
        if row == last:
            rotate_face(faces[D], Direction.CCW)
        tmp = faces[L, row].copy()
        faces[L, row] = faces[F, row]
        faces[F, row] = faces[R, row]
        faces[R, row] = faces[back_row]
        faces[back_row] = tmp
    else:
        if row == 0:
            rotate_face(faces[T], Direction.CCW)
        if row == last:
            rotate_face(faces[D], Direction.CW)
        tmp = faces[R, row].copy()
        faces[R, row] = faces[F, row]
        faces[F, row] = faces[L, row]
        faces[L, row] = faces[back_row]
        faces[back_row] = tmp


def rotate_column(cube: Cube, direction: Direction, col: Optional[int] = None):
    """
    Turn one vertical layer through Top, Front, Bottom and Back.

    A turn of column 0 also twists Left, and a turn of column N-1 also
    twists Right. The column index must lie in [0, N-1].

    Args:
        cube (Cube): The cube to turn
        direction (Direction): UP or DOWN
        col (int, optional): Column to turn, defaults to the cursor column
    """
    if direction not in (Direction.UP, Direction.DOWN):
        return

    if col is None:
        col = cube.col
    last = cube.size - 1
    faces = cube.faces

    if direction == Direction.UP:
        if col == 0:
            rotate_face(faces[L], Direction.CCW)
        if col == last:
            rotate_face(faces[R], Direction.CW)
        tmp = faces[T, :, col].copy()
        faces[T, :, col] = faces[F, :, col]
        faces[F, :, col] = faces[D, :, col]
        faces[D, :, col] = faces[B, :, col]
        faces[B, :, col] = tmp
    else:
        if col == 0:
            rotate_face(faces[L], Direction.CW)
        if col == last:
            rotate_face(faces[R], Direction.CCW)
        tmp = faces[D, :, col].copy()
        faces[D, :, col] = faces[F, :, col]
        faces[F, :, col] = faces[T, :, col]
        faces[T, :, col] = faces[B, :, col]
        faces[B, :, col] = tmp


def _cycle(faces: np.ndarray, *sides: Side):
    """Each side takes the contents of the next one, the last takes the first."""
    tmp = faces[sides[0]].copy()
    for dest, src in zip(sides, sides[1:]):
        faces[dest] = faces[src]
    faces[sides[-1]] = tmp


def rotate_cube(cube: Cube, direction: Direction):
    """
    Reorient the whole cube so another side faces the player.

    Args:
        cube (Cube): The cube to rotate
        direction (Direction): UP, DOWN, LEFT or RIGHT
    """
    faces = cube.faces

    if direction == Direction.UP:
        _cycle(faces, T, F, D, B)
        rotate_face(faces[R], Direction.CW)
        rotate_face(faces[L], Direction.CCW)
    elif direction == Direction.DOWN:
        _cycle(faces, D, F, T, B)
        rotate_face(faces[R], Direction.CCW)
        rotate_face(faces[L], Direction.CW)
    elif direction in (Direction.LEFT, Direction.RIGHT):
        # Back changes frame on its way in and out of the horizontal ring
        _half_turn(faces[B])
        if direction == Direction.LEFT:
            _cycle(faces, L, F, R, B)
        else:
            _cycle(faces, R, F, L, B)
        _half_turn(faces[B])
        top, bottom = (Direction.CW, Direction.CCW) if direction == Direction.LEFT else (Direction.CCW, Direction.CW)
        rotate_face(faces[T], top)
        rotate_face(faces[D], bottom)


def rotate_front_face(cube: Cube, direction: Direction):
    """
    Twist the Front face and the ring of facelets around it.

    The ring is Top's bottom row, Right's left column, Bottom's top row and
    Left's right column.

    Args:
        cube (Cube): The cube to twist
        direction (Direction): CW or CCW
    """
    last = cube.size - 1
    faces = cube.faces

    if direction == Direction.CW:
        tmp = faces[T, last, :].copy()
        faces[T, last, :] = faces[L, ::-1, last]
        faces[L, :, last] = faces[D, 0, :]
        faces[D, 0, ::-1] = faces[R, :, 0]
        faces[R, :, 0] = tmp
    elif direction == Direction.CCW:
        tmp = faces[T, last, :].copy()
        faces[T, last, :] = faces[R, :, 0]
        faces[R, :, 0] = faces[D, 0, ::-1]
        faces[D, 0, :] = faces[L, :, last]
        faces[L, ::-1, last] = tmp
    else:
        return

    rotate_face(faces[F], direction)


def is_solved(cube: Cube) -> bool:
    """
    Check whether every face is a single color.

    Face colors are not compared with each other.
    """
    return all(is_face_uniform(face) for face in cube.faces)


def move_cursor(cube: Cube, direction: Direction):
    """
    Move the row/column cursor one step, stopping at the cube's edges.

    Args:
        cube (Cube): The cube whose cursor moves
        direction (Direction): UP/DOWN move the row, LEFT/RIGHT the column
    """
    last = cube.size - 1
    if direction == Direction.UP:
        cube.row = max(cube.row - 1, 0)
    elif direction == Direction.DOWN:
        cube.row = min(cube.row + 1, last)
    elif direction == Direction.LEFT:
        cube.col = max(cube.col - 1, 0)
    elif direction == Direction.RIGHT:
        cube.col = min(cube.col + 1, last)


def reset(cube: Cube):
    """Return the cube to its solved reset colors with the cursor at the origin."""
    cube.reset()
    logger.debug("cube_reset", size=cube.size)


def shuffle(
    cube: Cube,
    rng: Union[np.random.Generator, int, None] = None,
    iterations: int = SHUFFLE_ITERATIONS,
):
    """
    Scramble the cube with a bounded sequence of legal layer and face turns.

    Each iteration draws a row, a column, a direction and a repeat count,
    then turns that row, that column and the front face that many times.
    Only the calls matching the drawn direction have an effect.

    Args:
        cube (Cube): The cube to scramble
        rng (np.random.Generator or int, optional): Generator or seed; the
            same seed gives the same arrangement
        iterations (int): Number of draws (default: 1000)
    """
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)

    directions = list(Direction)
    max_repeats = max(cube.size - 2, 1)

    for _ in range(iterations):
        row = int(rng.integers(cube.size))
        col = int(rng.integers(cube.size))
        direction = directions[int(rng.integers(len(directions)))]
        for _ in range(int(rng.integers(max_repeats + 1))):
            rotate_row(cube, direction, row)
            rotate_column(cube, direction, col)
            rotate_front_face(cube, direction)

    logger.debug("cube_shuffled", size=cube.size, iterations=iterations)
