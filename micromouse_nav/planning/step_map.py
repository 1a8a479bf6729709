"""
Step Map Module
===============

Distance field ("step map") over the maze cells: the number of moves
from every cell to a target cell through passable walls.

The map is filled by relaxing every cell against its four neighbours
until a whole pass changes nothing. That is slower than a queue-based
BFS on large grids but maze grids are a few dozen cells per side, and
the pass count is bounded by the longest shortest path plus one.
"""

import numpy as np
from enum import Enum
from typing import Optional

from ..maze import Maze, Wall, Compass, Position

# Marks a cell with no known path to the target. Never do arithmetic on
# a step value before checking it against UNREACHED.
UNREACHED = -1


class StepMapMode(Enum):
    """How unexplored walls are treated"""
    UNEXPLORED_AS_ABSENT = 'unexplored_as_absent'    # search run
    UNEXPLORED_AS_PRESENT = 'unexplored_as_present'  # shortest path run

    @classmethod
    def from_name(cls, name: str) -> 'StepMapMode':
        """Get mode from its value or member name"""
        try:
            return cls(name.lower())
        except ValueError:
            pass
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown step map mode: {name!r}") from None

    def is_passable(self, wall: Wall) -> bool:
        if wall == Wall.ABSENT:
            return True
        return self == StepMapMode.UNEXPLORED_AS_ABSENT and wall == Wall.UNEXPLORED


class StepMap:
    """
    Per-cell step counts to a target cell.

    Stored as a (height, width) integer array indexed [y, x].
    """

    def __init__(self):
        self._steps: Optional[np.ndarray] = None
        self.target: Optional[Position] = None
        self.mode: Optional[StepMapMode] = None

        # Relaxation passes used by the last compute()
        self.passes = 0

    def _ensure_shape(self, maze: Maze):
        if self._steps is None or self._steps.shape != maze.shape:
            self._steps = np.full(maze.shape, UNREACHED, dtype=np.int32)

    def compute(self, maze: Maze, target: Position, mode: StepMapMode) -> int:
        """
        Recompute the whole map.

        Args:
            maze: Current wall knowledge
            target: Cell whose step count is 0
            mode: Unexplored wall policy

        Returns:
            Number of relaxation passes, including the final quiet one
        """
        if not maze.in_bounds(target.x, target.y):
            raise ValueError(f"Target {target} is outside the maze")

        self._ensure_shape(maze)
        steps = self._steps
        steps.fill(UNREACHED)
        steps[target.y, target.x] = 0
        self.target = target
        self.mode = mode

        passes = 0
        updated = True
        while updated:
            updated = False
            passes += 1
            for y in range(maze.height):
                for x in range(maze.width):
                    pos = Position(x, y)
                    for compass in Compass:
                        neighbor = maze.neighbor(pos, compass)
                        if neighbor is None:
                            continue
                        if not mode.is_passable(maze.get(pos, compass)):
                            continue
                        nb_step = int(steps[neighbor.y, neighbor.x])
                        if nb_step == UNREACHED:
                            continue
                        current = int(steps[y, x])
                        if current == UNREACHED or nb_step + 1 < current:
                            steps[y, x] = nb_step + 1
                            updated = True

        self.passes = passes
        return passes

    # ==================== Queries ====================

    def _require(self) -> np.ndarray:
        if self._steps is None:
            raise RuntimeError("Step map has not been computed yet")
        return self._steps

    def get(self, x: int, y: int) -> Optional[int]:
        """Step count of a cell, or None when it cannot reach the target"""
        value = int(self._require()[y, x])
        return None if value == UNREACHED else value

    def is_reached(self, x: int, y: int) -> bool:
        return int(self._require()[y, x]) != UNREACHED

    def as_array(self) -> np.ndarray:
        """Copy of the raw [y, x] array (UNREACHED where unreachable)"""
        return self._require().copy()

    def as_masked(self) -> np.ma.MaskedArray:
        """Copy with unreachable cells masked out"""
        steps = self.as_array()
        return np.ma.masked_equal(steps, UNREACHED)

    # ==================== Display ====================

    def render(self, maze: Maze, glyphs=None) -> str:
        """
        Text view of the maze with the step count written in each cell.

        Each cell row is rebuilt from the maze's own cell line: the west
        wall glyph of every cell followed by the step count in three
        columns, then the east wall and the row index. An x axis is
        appended under the bottom wall line.
        """
        steps = self._require()
        if glyphs is None:
            from ..config import TextFormatConfig
            glyphs = TextFormatConfig().step_map_glyphs
        lines = maze.to_text_data(*glyphs).splitlines()
        cell_width = len(glyphs[3]) + len(glyphs[7])

        result = []
        index = 0
        for y in reversed(range(maze.height)):
            result.append(lines[index])  # horizontal walls
            index += 1
            chars = lines[index]  # vertical walls
            index += 1
            vline = ''
            for x in range(maze.width):
                step = int(steps[y, x])
                step_str = '   ' if step == UNREACHED else f"{step:3}"
                vline += chars[x * cell_width] + step_str
            vline += '| ' + str(y)
            result.append(vline)
        result.append(lines[index])  # bottom line

        result.append(''.join(f" {x:3}" for x in range(maze.width)))
        return '\n'.join(result)
