"""
Console graphics and keyboard drivers for the cube game.
"""

import sys
from collections import deque
from typing import TextIO

import colorama
from colorama import Back, Cursor, Fore, Style
from colorama.ansi import clear_screen

from .cube import Color, Cube, Side
from .game import GameControl, Graphics, Input

BLOCK = "  "
ROW_CURSOR = ">"
COL_CURSOR = "v"

# Standard terminals lack orange, so it is drawn magenta
BLOCK_COLORS = {
    Color.BLUE: Back.BLUE,
    Color.GREEN: Back.GREEN,
    Color.RED: Back.RED,
    Color.ORANGE: Back.MAGENTA,
    Color.YELLOW: Back.YELLOW,
    Color.WHITE: Back.WHITE,
}

KEY_MAP = {
    "w": GameControl.MOVE_CURSOR_UP,
    "s": GameControl.MOVE_CURSOR_DOWN,
    "a": GameControl.MOVE_CURSOR_LEFT,
    "d": GameControl.MOVE_CURSOR_RIGHT,
    "W": GameControl.ROTATE_CUBE_UP,
    "S": GameControl.ROTATE_CUBE_DOWN,
    "A": GameControl.ROTATE_CUBE_LEFT,
    "D": GameControl.ROTATE_CUBE_RIGHT,
    "i": GameControl.ROTATE_COL_UP,
    "I": GameControl.ROTATE_COL_UP,
    "k": GameControl.ROTATE_COL_DOWN,
    "K": GameControl.ROTATE_COL_DOWN,
    "j": GameControl.ROTATE_ROW_LEFT,
    "J": GameControl.ROTATE_ROW_LEFT,
    "l": GameControl.ROTATE_ROW_RIGHT,
    "L": GameControl.ROTATE_ROW_RIGHT,
    "u": GameControl.ROTATE_FRONT_FACE_CCW,
    "U": GameControl.ROTATE_FRONT_FACE_CCW,
    "o": GameControl.ROTATE_FRONT_FACE_CW,
    "O": GameControl.ROTATE_FRONT_FACE_CW,
    "n": GameControl.NEW,
    "q": GameControl.EXIT,
    "\x1b": GameControl.EXIT,
}

HELP = (
    "w/a/s/d cursor  W/A/S/D turn cube  j/l row  i/k column  "
    "u/o front face  n new game  q quit"
)


def map_key(key: str) -> GameControl:
    """Map one key to its control, UNKNOWN if it has none."""
    return KEY_MAP.get(key, GameControl.UNKNOWN)


def render_cube(cube: Cube) -> str:
    """
    Render the cube as a colored cross net.

    Top sits above Front, Left and Right beside it, Bottom and Back below.
    The row cursor is drawn left of Front and the column cursor above it.
    """
    n = cube.size
    width = len(BLOCK) * n
    indent = " " * (width + 1)

    def face_row(side: Side, r: int) -> str:
        return "".join(
            f"{BLOCK_COLORS[Color(int(cube.faces[side, r, c]))]}{BLOCK}{Style.RESET_ALL}"
            for c in range(n)
        )

    lines = []
    for r in range(n):
        lines.append(indent + face_row(Side.TOP, r))
    lines.append(indent + "".join(COL_CURSOR * len(BLOCK) if c == cube.col else BLOCK for c in range(n)))
    for r in range(n):
        marker = ROW_CURSOR if r == cube.row else " "
        lines.append(face_row(Side.LEFT, r) + marker + face_row(Side.FRONT, r) + " " + face_row(Side.RIGHT, r))
    for side in (Side.BOTTOM, Side.BACK):
        lines.append("")
        for r in range(n):
            lines.append(indent + face_row(side, r))
    return "\n".join(lines)


def format_time(elapsed: float) -> str:
    minutes, seconds = divmod(int(elapsed), 60)
    return f"{minutes}:{seconds:02d}"


class ConsoleGraphics(Graphics):
    """Draws the cube with ANSI colors on a text stream."""

    def __init__(self, stream: TextIO = None, clear: bool = True):
        self.stream = stream or sys.stdout
        self.clear = clear

    def init(self):
        colorama.just_fix_windows_console()

    def draw_cube(self, cube: Cube):
        if self.clear:
            self.stream.write(clear_screen() + Cursor.POS(1, 1))
        self.stream.write(render_cube(cube) + "\n\n" + HELP + "\n")

    def print_statistics(self, turns: int, elapsed: float, player: str):
        line = f"Turns: {turns}  Time: {format_time(elapsed)}"
        if player:
            line = f"{player}  {line}"
        self.stream.write(line + "\n")
        self.stream.flush()

    def notify_solved(self):
        self.stream.write(f"{Fore.GREEN}Congratulations! You solved the cube!{Style.RESET_ALL}\n")
        self.stream.flush()


class ConsoleInput(Input):
    """
    Reads controls from a line-buffered text stream.

    Each character of a line is one control; end of input exits.
    """

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdin
        self._pending = deque()

    def init(self):
        self._pending.clear()

    def get_control(self) -> GameControl:
        if not self._pending:
            line = self.stream.readline()
            if not line:
                return GameControl.EXIT
            self._pending.extend(line.rstrip("\r\n"))
            if not self._pending:
                return GameControl.UNKNOWN
        return map_key(self._pending.popleft())
