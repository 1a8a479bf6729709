"""
Adachi Method Navigator
=======================

Step-map navigator: record the walls seen from the current cell,
recompute the step map to the goal and move to the open neighbour with
the smallest step count.
"""

import logging
from typing import Optional

from ..maze import Maze, Wall, Direction, Compass, Position, Location
from .path_finder import PathFinder, GoalReached, NoPath
from .step_map import StepMap, StepMapMode

logger = logging.getLogger(__name__)


class AdachiNavigator(PathFinder):
    """
    Greedy step-map descent.

    Modes:
    - UNEXPLORED_AS_ABSENT: search run, unexplored walls are assumed open
      so the robot is drawn into unknown parts of the maze
    - UNEXPLORED_AS_PRESENT: shortest path run over confirmed walls only

    The navigator owns its maze and step map and never moves the robot
    itself; the caller applies the returned move and calls set_location().
    """

    def __init__(self, maze: Maze, mode: StepMapMode = StepMapMode.UNEXPLORED_AS_ABSENT,
                 location: Optional[Location] = None):
        """
        Initialize navigator.

        Args:
            maze: Wall knowledge to start from (owned from now on)
            mode: Unexplored wall policy
            location: Start location (default: (0, 0) facing north)
        """
        self._maze = maze
        self._mode = mode
        self._location = location.copy() if location is not None else Location()
        self._step_map = StepMap()

    @classmethod
    def from_config(cls, config) -> 'AdachiNavigator':
        """Create a navigator over a blank maze described by a Config"""
        maze = Maze.from_config(config)
        location = Location(Position(0, 0), maze.start_heading)
        return cls(maze, StepMapMode.from_name(config.step_map.search_mode), location)

    # ==================== Property Access ====================

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def mode(self) -> StepMapMode:
        return self._mode

    def set_mode(self, mode: StepMapMode):
        self._mode = mode

    @property
    def step_map(self) -> StepMap:
        return self._step_map

    def get_goal(self) -> Position:
        return self._maze.get_goal()

    # ==================== Step Map ====================

    def calc_step_map(self, goal: Position) -> int:
        """Recompute the step map to `goal` under the current mode"""
        return self._step_map.compute(self._maze, goal, self._mode)

    def get_step(self, x: int, y: int) -> Optional[int]:
        """Step count of a cell, None when unreachable"""
        return self._step_map.get(x, y)

    def display_step_map(self) -> str:
        return self._step_map.render(self._maze)

    # ==================== PathFinder ====================

    def navigate(self, front: Wall, left: Wall, right: Wall, goal: Position) -> Direction:
        """
        Record the sensed walls and pick the next move toward `goal`.

        Arrival is judged against `goal` only; the maze's stored goal is
        not consulted.
        """
        pos = self._location.pos
        heading = self._location.dir

        # Checked before the walls are recorded, so the goal cell's walls
        # are never written.
        if pos == goal:
            logger.info("Goal reached")
            raise GoalReached(f"Goal reached at ({pos.x}, {pos.y})")

        # Nothing is sensed behind the robot
        self._maze.set(pos, heading.turn(Direction.FORWARD), front)
        self._maze.set(pos, heading.turn(Direction.LEFT), left)
        self._maze.set(pos, heading.turn(Direction.RIGHT), right)

        self.calc_step_map(goal)

        # First strictly smaller wins, so the N, E, S, W order breaks ties
        best_step = None
        best_compass = None
        for compass in Compass:
            if self._maze.get(pos, compass) != Wall.ABSENT:
                continue
            neighbor = self._maze.neighbor(pos, compass)
            if neighbor is None:
                continue
            step = self._step_map.get(neighbor.x, neighbor.y)
            if step is None:
                continue
            if best_step is None or step < best_step:
                best_step = step
                best_compass = compass

        if best_compass is None:
            logger.error("No path to go")
            raise NoPath(f"No path to go from {self._location}")

        result = heading.direction_to(best_compass)
        logger.info("%s, Wall:%s, Go:%s",
                    self._location, Wall.detection_log(left, front, right), result.to_log())
        return result

    def get_location(self) -> Location:
        return self._location.copy()

    def set_location(self, location: Location):
        self._location = location.copy()
