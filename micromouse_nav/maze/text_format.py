"""
Maze Text Format Module
=======================

Reading and writing mazes as plain text.

Example (4x4, goal at (2, 2)):

    +-+-+-+-+
    |       |
    + +-+-+ +
    | |  G| |
    + + +-+ +
    | |     |
    + +-+-+ +
    | |     |
    +-+-+-+-+

"-" and "|" mean the wall is present, " " means it is absent and any
other character means it is unexplored. "+" is a pillar and "G" marks
the goal. The first line of the file is the north edge of the maze.
Cell lines carry two characters per cell: the west wall, then either
the goal mark or padding.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .types import Wall, Position
from .grid import Maze

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Absent, present and unexplored glyph of each wall orientation
_HORIZONTAL = slice(0, 3)
_VERTICAL = slice(3, 6)


class MazeFileError(OSError):
    """A maze file could not be read or written"""


def _default_glyphs():
    from ..config import TextFormatConfig
    return TextFormatConfig().file_glyphs


def render_maze(maze: Maze, glyphs: Sequence[str]) -> str:
    """
    Render a maze as text.

    Args:
        maze: Maze to render
        glyphs: (h_absent, h_present, h_unexplored,
                 v_absent, v_present, v_unexplored, pillar, goal)

    Returns:
        Text without a trailing newline
    """
    if len(glyphs) != 8:
        raise ValueError(f"Expected 8 glyphs, got {len(glyphs)}")
    horizontal = glyphs[_HORIZONTAL]
    vertical = glyphs[_VERTICAL]
    pillar, goal = glyphs[6], glyphs[7]
    padding = ' ' * len(goal)
    goal_pos = maze.get_goal()

    lines = []
    for y in range(maze.height):
        line = ''.join(pillar + horizontal[maze.horizontal_walls[y, x]]
                       for x in range(maze.width))
        lines.append(line + '+')

        line = ''
        for x in range(maze.width + 1):
            line += vertical[maze.vertical_walls[y, x]]
            line += goal if (x == goal_pos.x and y == goal_pos.y) else padding
        lines.append(line)

    line = ''.join(pillar + horizontal[maze.horizontal_walls[maze.height, x]]
                   for x in range(maze.width))
    lines.append(line + pillar)

    return '\n'.join(reversed(lines))


def _glyph_to_wall(c: str, present: str) -> Wall:
    if c == ' ':
        return Wall.ABSENT
    if c == present:
        return Wall.PRESENT
    return Wall.UNEXPLORED


def _check_line_lengths(lines, width: int, source: str):
    """
    Reject lines that do not fit a maze `width` cells wide.

    `lines` are bottom first with pillars removed. Wall lines hold exactly
    one glyph per column. Cell lines hold two characters per vertical
    edge, and the padding after the east wall may be missing.
    """
    for i, line in enumerate(lines):
        number = len(lines) - i  # 1-based line number in the file
        if i % 2 == 0:
            kind, low, high = 'wall', width, width
        else:
            kind, low, high = 'cell', 2 * width + 1, 2 * width + 2
        if len(line) < low:
            raise MazeFileError(
                f"{source}: {kind} line {number} is too short "
                f"({len(line)} < {low} characters)"
            )
        if len(line) > high:
            raise MazeFileError(
                f"{source}: {kind} line {number} is too long "
                f"({len(line)} > {high} characters)"
            )


def parse_into(maze: Maze, text: str, source: str = '<text>'):
    """
    Fill an existing maze from maze text.

    Raises:
        MazeFileError: if the text does not hold a maze of the maze's size
    """
    width, height = maze.width, maze.height
    raw_lines = text.splitlines()
    while raw_lines and not raw_lines[-1]:
        raw_lines.pop()
    lines = [line.replace('+', '') for line in reversed(raw_lines)]

    expected = 2 * height + 1
    if len(lines) != expected:
        raise MazeFileError(
            f"{source}: expected {expected} lines for a {width}x{height} maze, got {len(lines)}"
        )
    _check_line_lengths(lines, width, source)

    goal = None
    for y in range(height + 1):
        line = lines[y * 2]
        for x in range(width):
            maze.horizontal_walls[y, x] = _glyph_to_wall(line[x], '-')

        if y == height:
            break

        line = lines[y * 2 + 1]
        for x in range(width + 1):
            maze.vertical_walls[y, x] = _glyph_to_wall(line[x * 2], '|')
            if x < width and line[x * 2 + 1] == 'G':
                goal = Position(x, y)

    maze.enforce_boundary()
    if goal is not None:
        maze.set_goal(goal)
    else:
        logger.info("%s: no goal mark, keeping goal at (%d, %d)",
                    source, maze.get_goal().x, maze.get_goal().y)


def parse_maze_text(text: str, width: int, height: int) -> Maze:
    """Build a maze from maze text"""
    maze = Maze(width, height)
    parse_into(maze, text)
    return maze


def read_into(maze: Maze, filename: PathLike):
    """Fill an existing maze from a maze file"""
    try:
        text = Path(filename).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise MazeFileError(f"Cannot read maze file {filename}: {e}") from e
    parse_into(maze, text, source=str(filename))


def load_maze(filename: PathLike, width: int, height: int) -> Maze:
    """
    Load a maze file.

    Args:
        filename: Path of the maze file
        width: Expected number of columns
        height: Expected number of rows

    Returns:
        Maze with the walls and goal from the file
    """
    maze = Maze(width, height)
    read_into(maze, filename)
    return maze


def save_maze(maze: Maze, filename: PathLike, glyphs: Optional[Sequence[str]] = None):
    """Write a maze file (file glyphs by default)"""
    if glyphs is None:
        glyphs = _default_glyphs()
    contents = render_maze(maze, glyphs)
    try:
        Path(filename).write_text(contents)
    except OSError as e:
        raise MazeFileError(f"Cannot write maze file {filename}: {e}") from e
