"""
Turn-based game driver on top of the cube engine.

Drawing and input are delegated to driver objects injected at construction,
so the same game runs against the console drivers or test doubles.
"""

import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

import numpy as np

from . import operations
from .config import Settings, settings as default_settings
from .cube import Cube, Direction
from .logging import get_logger

logger = get_logger(__name__)


class GameControl(Enum):
    """Commands a player can give."""
    NEW = "new"
    EXIT = "exit"
    MOVE_CURSOR_UP = "move_cursor_up"
    MOVE_CURSOR_DOWN = "move_cursor_down"
    MOVE_CURSOR_LEFT = "move_cursor_left"
    MOVE_CURSOR_RIGHT = "move_cursor_right"
    ROTATE_ROW_LEFT = "rotate_row_left"
    ROTATE_ROW_RIGHT = "rotate_row_right"
    ROTATE_COL_UP = "rotate_col_up"
    ROTATE_COL_DOWN = "rotate_col_down"
    ROTATE_CUBE_UP = "rotate_cube_up"
    ROTATE_CUBE_DOWN = "rotate_cube_down"
    ROTATE_CUBE_LEFT = "rotate_cube_left"
    ROTATE_CUBE_RIGHT = "rotate_cube_right"
    ROTATE_FRONT_FACE_CW = "rotate_front_face_cw"
    ROTATE_FRONT_FACE_CCW = "rotate_front_face_ccw"
    UNKNOWN = "unknown"


# control -> (engine call, direction, counts as a turn)
CONTROL_ACTIONS = {
    GameControl.MOVE_CURSOR_UP: (operations.move_cursor, Direction.UP, False),
    GameControl.MOVE_CURSOR_DOWN: (operations.move_cursor, Direction.DOWN, False),
    GameControl.MOVE_CURSOR_LEFT: (operations.move_cursor, Direction.LEFT, False),
    GameControl.MOVE_CURSOR_RIGHT: (operations.move_cursor, Direction.RIGHT, False),
    GameControl.ROTATE_CUBE_UP: (operations.rotate_cube, Direction.UP, False),
    GameControl.ROTATE_CUBE_DOWN: (operations.rotate_cube, Direction.DOWN, False),
    GameControl.ROTATE_CUBE_LEFT: (operations.rotate_cube, Direction.LEFT, False),
    GameControl.ROTATE_CUBE_RIGHT: (operations.rotate_cube, Direction.RIGHT, False),
    GameControl.ROTATE_COL_UP: (operations.rotate_column, Direction.UP, True),
    GameControl.ROTATE_COL_DOWN: (operations.rotate_column, Direction.DOWN, True),
    GameControl.ROTATE_ROW_LEFT: (operations.rotate_row, Direction.LEFT, True),
    GameControl.ROTATE_ROW_RIGHT: (operations.rotate_row, Direction.RIGHT, True),
    GameControl.ROTATE_FRONT_FACE_CW: (operations.rotate_front_face, Direction.CW, True),
    GameControl.ROTATE_FRONT_FACE_CCW: (operations.rotate_front_face, Direction.CCW, True),
}


class Graphics(ABC):
    """Graphics driver interface."""

    @abstractmethod
    def init(self):
        """Prepare the output device."""

    @abstractmethod
    def draw_cube(self, cube: Cube):
        """Draw the cube and its cursor."""

    @abstractmethod
    def print_statistics(self, turns: int, elapsed: float, player: str):
        """Show the turn count, elapsed seconds and player name."""

    @abstractmethod
    def notify_solved(self):
        """Tell the player the cube is solved."""


class Input(ABC):
    """Input driver interface."""

    @abstractmethod
    def init(self):
        """Prepare the input device."""

    @abstractmethod
    def get_control(self) -> GameControl:
        """Block until the player gives the next control."""


class Game:
    """
    One game session: a cube, a turn counter, a timer and a solved flag.

    Attributes:
        cube (Cube): The cube being played
        turns (int): Layer and face turns made in the current game
        is_solved (bool): Whether the current game has been solved
    """

    def __init__(
        self,
        graphics: Graphics,
        input_driver: Input,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.graphics = graphics
        self.input = input_driver
        self.settings = settings or default_settings
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.shuffle_seed)
        self.clock = clock

        self.cube = Cube(self.settings.cube_size)
        self.turns = 0
        self.is_solved = False
        self._started_at = self.clock()
        self._finished_at = None

    @property
    def elapsed(self) -> float:
        """Seconds since the current game started, frozen once it is solved."""
        end = self._finished_at if self._finished_at is not None else self.clock()
        return end - self._started_at

    def init(self):
        """Initialize both drivers and start the first game."""
        self.graphics.init()
        self.input.init()
        self.new_game()

    def new_game(self):
        """Reset and shuffle the cube, zero the turn counter and restart the timer."""
        operations.reset(self.cube)
        operations.shuffle(self.cube, self.rng, self.settings.shuffle_iterations)
        self.turns = 0
        self.is_solved = False
        self._started_at = self.clock()
        self._finished_at = None
        logger.info("new_game", size=self.cube.size, iterations=self.settings.shuffle_iterations)

    def run(self) -> bool:
        """
        Play one step: draw, read one control and apply it.

        Returns:
            bool: False when the player exits, True to keep going
        """
        self.graphics.draw_cube(self.cube)
        self.graphics.print_statistics(self.turns, self.elapsed, self.settings.player_name)

        control = self.input.get_control()
        if control == GameControl.NEW:
            self.new_game()
        elif control == GameControl.EXIT:
            logger.info("game_exit", turns=self.turns)
            return False

        if self.is_solved:
            return True

        action = CONTROL_ACTIONS.get(control)
        if action is not None:
            func, direction, counts = action
            func(self.cube, direction)
            if counts:
                self.turns += 1
                logger.debug("turn", control=control.value, turns=self.turns)
        elif control != GameControl.NEW:
            logger.debug("unknown_control", control=getattr(control, "value", control))

        self.is_solved = operations.is_solved(self.cube)
        if self.is_solved:
            self._finished_at = self.clock()
            logger.info("cube_solved", turns=self.turns, elapsed=round(self.elapsed, 3))
            self.graphics.notify_solved()
        return True

    def loop(self):
        """Initialize and run until the player exits."""
        self.init()
        while self.run():
            pass
