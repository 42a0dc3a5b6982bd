"""
Advanced usage examples for the cube engine and game driver.
Demonstrates seeded shuffles and a scripted game session.
"""

import io

import numpy as np

from cubegame import Cube, shuffle, is_solved, reset
from cubegame.config import get_settings
from cubegame.console import ConsoleGraphics, ConsoleInput
from cubegame.game import Game
from cubegame.utils import format_net


def example_seeded_shuffle():
    """The same seed always gives the same scramble."""
    print("=== Seeded Shuffle Example ===")

    cube1 = Cube(3)
    cube2 = Cube(3)
    shuffle(cube1, 2024)
    shuffle(cube2, np.random.default_rng(2024))

    print(format_net(cube1))
    print(f"\nSame arrangement: {cube1 == cube2}")
    print(f"Solved: {is_solved(cube1)}")

    reset(cube1)
    print(f"Solved after reset: {is_solved(cube1)}")
    print()


def example_larger_cube():
    """Shuffle a 5x5x5 cube."""
    print("=== Larger Cube Example ===")

    cube = Cube(5)
    shuffle(cube, 7, iterations=200)
    print(format_net(cube))
    print()


def example_scripted_game():
    """Play a short game from a script of key presses."""
    print("=== Scripted Game Example ===")

    # No shuffle, so undoing the first turn solves the cube
    settings = get_settings(cube_size=3, shuffle_iterations=0, player_name="demo")
    out = io.StringIO()
    game = Game(ConsoleGraphics(out, clear=False), ConsoleInput(io.StringIO("sjlq\n")), settings)
    game.loop()

    print(out.getvalue().splitlines()[-1])
    print(f"Turns: {game.turns}, solved: {game.is_solved}")
    print()


if __name__ == "__main__":
    example_seeded_shuffle()
    example_larger_cube()
    example_scripted_game()
