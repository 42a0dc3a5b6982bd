"""
Unit tests for the Cube class.
"""

import unittest
import numpy as np
from cubegame.cube import Cube, Color, Side, RESET_COLORS
from cubegame.exceptions import CubeError, CubeSizeError


class TestCube(unittest.TestCase):
    """Test cases for the Cube class."""

    def test_cube_initialization(self):
        """Test basic cube initialization."""
        cube = Cube(3)
        self.assertEqual(cube.size, 3)
        self.assertEqual(cube.faces.shape, (6, 3, 3))
        self.assertEqual((cube.row, cube.col), (0, 0))

    def test_default_size(self):
        self.assertEqual(Cube().size, 3)

    def test_initial_colors(self):
        """A new cube shows the reset palette."""
        cube = Cube(4)
        for side, color in RESET_COLORS.items():
            self.assertTrue(np.all(cube.face(side) == color))
        self.assertEqual(cube.get(Side.FRONT, 0, 0), Color.WHITE)
        self.assertEqual(cube.get(Side.BACK, 3, 3), Color.YELLOW)
        self.assertEqual(cube.get(Side.TOP, 1, 2), Color.RED)
        self.assertEqual(cube.get(Side.BOTTOM, 2, 1), Color.ORANGE)
        self.assertEqual(cube.get(Side.LEFT, 0, 3), Color.BLUE)
        self.assertEqual(cube.get(Side.RIGHT, 3, 0), Color.GREEN)

    def test_cube_initialization_with_faces(self):
        """Test cube initialization with custom facelets."""
        faces = np.full((6, 2, 2), Color.RED)
        cube = Cube(2, faces)
        self.assertTrue(np.array_equal(cube.faces, faces))

        # The cube keeps its own copy
        faces[0, 0, 0] = Color.BLUE
        self.assertEqual(cube.get(Side.FRONT, 0, 0), Color.RED)

    def test_invalid_size(self):
        """Test that invalid sizes raise CubeSizeError."""
        for size in (0, 1, -1, 256, 3.0, "3", True):
            with self.assertRaises(CubeSizeError):
                Cube(size)

    def test_size_bounds(self):
        self.assertEqual(Cube(2).size, 2)
        self.assertEqual(Cube(255).faces.shape, (6, 255, 255))

    def test_size_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Cube(1)
        try:
            Cube(1)
        except CubeError as e:
            self.assertEqual(e.error_type, "CubeSizeError")
            self.assertEqual(e.size, 1)

    def test_invalid_faces_shape(self):
        """Test that mismatched faces shape raises CubeSizeError."""
        with self.assertRaises(CubeSizeError):
            Cube(3, np.zeros((6, 2, 2)))
        with self.assertRaises(CubeSizeError):
            Cube(3, np.zeros((5, 3, 3)))

    def test_get_set(self):
        """Test getting and setting facelets."""
        cube = Cube(3)
        cube.set(Side.LEFT, 1, 2, Color.ORANGE)
        self.assertEqual(cube.get(Side.LEFT, 1, 2), Color.ORANGE)
        self.assertIsInstance(cube.get(Side.LEFT, 1, 2), Color)

    def test_face_is_view(self):
        cube = Cube(3)
        cube.face(Side.TOP)[0, 0] = Color.WHITE
        self.assertEqual(cube.get(Side.TOP, 0, 0), Color.WHITE)

    def test_reset(self):
        cube = Cube(3)
        cube.set(Side.FRONT, 2, 2, Color.BLUE)
        cube.row, cube.col = 2, 1
        cube.reset()
        self.assertEqual(cube, Cube(3))

    def test_copy(self):
        """Test cube copying."""
        cube1 = Cube(3)
        cube1.row = 2
        cube2 = cube1.copy()

        self.assertEqual(cube1, cube2)
        self.assertEqual(cube2.row, 2)

        # Modifying copy shouldn't affect original
        cube2.set(Side.FRONT, 0, 0, Color.BLUE)
        self.assertNotEqual(cube1.get(Side.FRONT, 0, 0), cube2.get(Side.FRONT, 0, 0))

    def test_equality(self):
        """Test cube equality."""
        cube1 = Cube(3)
        cube2 = Cube(3)
        self.assertEqual(cube1, cube2)

        cube2.set(Side.BACK, 0, 0, Color.WHITE)
        self.assertNotEqual(cube1, cube2)

    def test_equality_includes_cursor_and_size(self):
        cube = Cube(3)
        moved = Cube(3)
        moved.col = 1
        self.assertNotEqual(cube, moved)
        self.assertNotEqual(Cube(2), Cube(3))
        self.assertNotEqual(Cube(3), "cube")

    def test_repr(self):
        """Test string representation."""
        cube = Cube(3)
        self.assertIn("Cube(size=3", repr(cube))

    def test_str(self):
        """Test detailed string representation."""
        cube = Cube(2)
        string = str(cube)
        self.assertIn("Cube(size=2", string)


if __name__ == '__main__':
    unittest.main()
