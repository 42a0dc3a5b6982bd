"""
Basic usage examples for the cube engine.
"""

from cubegame import Cube, Direction, Side, rotate_front_face, rotate_row, rotate_cube, is_solved
from cubegame.operations import move_cursor
from cubegame.utils import format_net, color_counts


def example_basic_cube():
    """Create a cube and read its facelets."""
    print("=== Basic Cube Example ===")

    # Create a 3x3x3 cube in its reset state
    cube = Cube(3)
    print(f"Created cube: {cube!r}")
    print(f"Front center: {cube.get(Side.FRONT, 1, 1).name}")
    print(f"Solved: {is_solved(cube)}")
    print(format_net(cube))
    print()


def example_front_twist():
    """Twist the front face and undo it."""
    print("=== Front Face Example ===")

    cube = Cube(3)
    rotate_front_face(cube, Direction.CW)
    print(f"After a clockwise twist:\n{format_net(cube)}")
    print(f"Solved: {is_solved(cube)}")

    rotate_front_face(cube, Direction.CCW)
    print(f"\nAfter twisting back, solved: {is_solved(cube)}")
    print()


def example_cursor_and_rows():
    """Select a row with the cursor and turn it."""
    print("=== Cursor Example ===")

    cube = Cube(3)
    move_cursor(cube, Direction.DOWN)
    move_cursor(cube, Direction.DOWN)
    move_cursor(cube, Direction.DOWN)  # stops at the last row
    print(f"Cursor row: {cube.row}")

    rotate_row(cube, Direction.LEFT)
    print(f"After turning the bottom row left:\n{format_net(cube)}")
    print(f"Color counts: { {c.name: n for c, n in color_counts(cube).items()} }")
    print()


def example_whole_cube():
    """Turn the whole cube around."""
    print("=== Whole Cube Example ===")

    cube = Cube(3)
    rotate_cube(cube, Direction.LEFT)
    print(f"Front is now {cube.get(Side.FRONT, 0, 0).name}")

    for _ in range(3):
        rotate_cube(cube, Direction.LEFT)
    print(f"Back where we started: {cube == Cube(3)}")
    print()


if __name__ == "__main__":
    example_basic_cube()
    example_front_twist()
    example_cursor_and_rows()
    example_whole_cube()
