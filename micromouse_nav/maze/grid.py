"""
Maze Grid Module
================

Wall grid of a rectangular maze.

Walls are stored as two edge matrices instead of per-cell flags so that
every wall exists exactly once:

    horizontal_walls[y][x]  edge between (x, y-1) and (x, y)   shape (height+1, width)
    vertical_walls[y][x]    edge between (x-1, y) and (x, y)   shape (height, width+1)

       |     North
     4 +---+---+---+---+
       |               |
     3 +   +   +   +   +
       |               |
West 2 +   +   +   +   + East
       |               |
     1 +   +   +   +   +
       |               |
     0 +---+---+---+---+
       0   1   2   3   4
             South
"""

import logging
import numpy as np
from typing import Optional, Tuple

from .types import Wall, Compass, Direction, Position

logger = logging.getLogger(__name__)


class Maze:
    """
    Rectangular maze with tri-state walls.

    Invariants:
    - Outer walls are always present; clearing one is logged and ignored
    - The wall to the right of the start cell is present from the start
    - The goal is a single cell, by default the centre cell
    """

    def __init__(self, width: int, height: int,
                 start_heading: Compass = Compass.NORTH):
        """
        Initialize maze.

        Args:
            width: Number of cells along x
            height: Number of cells along y
            start_heading: Initial heading of the robot on (0, 0)
        """
        if width < 1 or height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self.start_heading = start_heading
        self.horizontal_walls = np.full((height + 1, width), Wall.UNEXPLORED, dtype=np.int8)
        self.vertical_walls = np.full((height, width + 1), Wall.UNEXPLORED, dtype=np.int8)
        self._goal = Position(0, 0)
        self.init()

    @classmethod
    def from_config(cls, config) -> 'Maze':
        """Create a blank maze from a Config object"""
        maze = cls(config.maze.width, config.maze.height,
                   Compass.from_letter(config.maze.start_heading))
        if config.maze.goal is not None:
            maze.set_goal(Position(*config.maze.goal))
        return maze

    def init(self):
        """Forget everything except the outer walls and the start cell's right wall"""
        self.horizontal_walls[:, :] = Wall.UNEXPLORED
        self.vertical_walls[:, :] = Wall.UNEXPLORED

        self.horizontal_walls[0, :] = Wall.PRESENT
        self.horizontal_walls[self._height, :] = Wall.PRESENT
        self.vertical_walls[:, 0] = Wall.PRESENT
        self.vertical_walls[:, self._width] = Wall.PRESENT

        # Competition rule: the start cell is walled on the right
        self.set(Position(0, 0), self.start_heading.turn(Direction.RIGHT), Wall.PRESENT)

        self._goal = Position(self._width // 2, self._height // 2)

    # ==================== Property Access ====================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), the shape of a per-cell array"""
        return (self._height, self._width)

    @property
    def goal(self) -> Position:
        return self._goal

    @goal.setter
    def goal(self, pos: Position):
        self.set_goal(pos)

    def get_goal(self) -> Position:
        return self._goal

    def set_goal(self, pos: Position):
        if not self.in_bounds(pos.x, pos.y):
            raise ValueError(f"Goal {pos} is outside a {self._width}x{self._height} maze")
        self._goal = pos

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    # ==================== Cell Queries ====================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if cell is within the maze"""
        return 0 <= x < self._width and 0 <= y < self._height

    def is_boundary(self, pos: Position, compass: Compass) -> bool:
        """Check if the wall on that side of the cell is an outer wall"""
        if compass == Compass.NORTH:
            return pos.y == self._height - 1
        if compass == Compass.EAST:
            return pos.x == self._width - 1
        if compass == Compass.SOUTH:
            return pos.y == 0
        return pos.x == 0

    def get(self, pos: Position, compass: Compass) -> Wall:
        """Wall on the given side of a cell"""
        x, y = pos.x, pos.y
        if compass == Compass.NORTH:
            return Wall(int(self.horizontal_walls[y + 1, x]))
        if compass == Compass.EAST:
            return Wall(int(self.vertical_walls[y, x + 1]))
        if compass == Compass.SOUTH:
            return Wall(int(self.horizontal_walls[y, x]))
        return Wall(int(self.vertical_walls[y, x]))

    def set(self, pos: Position, compass: Compass, wall: Wall):
        """
        Write the wall on the given side of a cell.

        Outer walls cannot be removed; such writes are ignored.
        """
        if wall != Wall.PRESENT and self.is_boundary(pos, compass):
            logger.warning(
                "Cannot remove the outer wall. Operation is ignored. Y: %d, X: %d, compass: %s",
                pos.y, pos.x, compass.name
            )
            return

        x, y = pos.x, pos.y
        if compass == Compass.NORTH:
            self.horizontal_walls[y + 1, x] = wall
        elif compass == Compass.EAST:
            self.vertical_walls[y, x + 1] = wall
        elif compass == Compass.SOUTH:
            self.horizontal_walls[y, x] = wall
        else:
            self.vertical_walls[y, x] = wall

    def neighbor(self, pos: Position, compass: Compass) -> Optional[Position]:
        """
        Adjacent cell in that direction.

        Returns None at the edge of the maze. Walls are not consulted.
        """
        x, y = pos.x, pos.y
        if compass == Compass.NORTH:
            y += 1
        elif compass == Compass.EAST:
            x += 1
        elif compass == Compass.SOUTH:
            y -= 1
        else:
            x -= 1
        if not self.in_bounds(x, y):
            return None
        return Position(x, y)

    def enforce_boundary(self) -> int:
        """
        Put back any outer wall that is not present.

        Returns:
            Number of walls restored
        """
        restored = 0
        for row in (0, self._height):
            missing = self.horizontal_walls[row, :] != Wall.PRESENT
            restored += int(missing.sum())
            self.horizontal_walls[row, missing] = Wall.PRESENT
        for col in (0, self._width):
            missing = self.vertical_walls[:, col] != Wall.PRESENT
            restored += int(missing.sum())
            self.vertical_walls[missing, col] = Wall.PRESENT
        if restored:
            logger.warning("Restored %d outer wall(s) that were not present", restored)
        return restored

    def count(self, wall: Wall) -> int:
        """Number of edges in the given state"""
        return int((self.horizontal_walls == wall).sum() + (self.vertical_walls == wall).sum())

    # ==================== Serialization ====================

    def to_text_data(self, horizontal_wall_absent: str, horizontal_wall_present: str,
                     horizontal_wall_unexplored: str, vertical_wall_absent: str,
                     vertical_wall_present: str, vertical_wall_unexplored: str,
                     pillar: str, goal: str) -> str:
        """Render the maze with the given glyphs (see text_format)"""
        from .text_format import render_maze
        return render_maze(self, (horizontal_wall_absent, horizontal_wall_present,
                                  horizontal_wall_unexplored, vertical_wall_absent,
                                  vertical_wall_present, vertical_wall_unexplored,
                                  pillar, goal))

    def read_maze_file(self, filename, width: int, height: int):
        """Load walls and goal from a maze file into this maze"""
        from .text_format import read_into
        if (width, height) != (self._width, self._height):
            raise ValueError(
                f"Cannot read a {width}x{height} file into a {self._width}x{self._height} maze"
            )
        read_into(self, filename)

    def write_maze_file(self, filename, glyphs: Optional[Tuple[str, ...]] = None):
        """Save walls and goal to a maze file"""
        from .text_format import save_maze
        save_maze(self, filename, glyphs)

    # ==================== Misc ====================

    def copy(self) -> 'Maze':
        other = Maze.__new__(Maze)
        other._width = self._width
        other._height = self._height
        other.start_heading = self.start_heading
        other.horizontal_walls = self.horizontal_walls.copy()
        other.vertical_walls = self.vertical_walls.copy()
        other._goal = self._goal
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (self.shape == other.shape
                and self._goal == other._goal
                and np.array_equal(self.horizontal_walls, other.horizontal_walls)
                and np.array_equal(self.vertical_walls, other.vertical_walls))

    __hash__ = None

    def __str__(self) -> str:
        return self.to_text_data('  ', '--', '  ', ' ', '|', ' ', '+', 'GL') + '\n'

    def __repr__(self) -> str:
        return f"Maze(width={self._width}, height={self._height}, goal=({self._goal.x}, {self._goal.y}))"
