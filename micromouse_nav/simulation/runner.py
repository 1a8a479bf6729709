"""
Maze Simulator Module
=====================

Driving loop: feeds wall readings from a fully known maze to a
navigator, applies the moves it returns and stops on its terminal
signals or when the step budget runs out.
"""

import time
import logging
from typing import Dict, Optional, Tuple

from ..config import Config
from ..maze import Maze, Wall, Direction, Position, Location
from ..planning import PathFinder, GoalReached, NoPath, StepMapMode
from .results import RunStatus, RunResult

logger = logging.getLogger(__name__)


class MazeSimulator:
    """
    Simulated robot in a known maze.

    Main loop:
    1. Read front, left and right walls at the robot's cell
    2. Ask the navigator for a move
    3. Turn, step forward and report the new location
    4. Repeat until GoalReached, NoPath or the step budget
    """

    def __init__(self, true_maze: Maze, navigator: PathFinder,
                 config: Optional[Config] = None):
        """
        Initialize simulator.

        Args:
            true_maze: Maze the robot is actually in
            navigator: Decision strategy under test
            config: Configuration object
        """
        self.true_maze = true_maze
        self.navigator = navigator
        self.config = config or Config()

    def sense(self, location: Location) -> Tuple[Wall, Wall, Wall]:
        """Front, left and right walls as the robot would see them"""
        pos, heading = location.pos, location.dir
        return (
            self.true_maze.get(pos, heading.turn(Direction.FORWARD)),
            self.true_maze.get(pos, heading.turn(Direction.LEFT)),
            self.true_maze.get(pos, heading.turn(Direction.RIGHT)),
        )

    def run(self, goal: Optional[Position] = None,
            mode: Optional[StepMapMode] = None,
            max_steps: Optional[int] = None) -> RunResult:
        """
        Drive the robot from its current location to `goal`.

        Args:
            goal: Target cell (default: the true maze's goal)
            mode: Step map mode to switch the navigator to, if it has modes
            max_steps: Step budget (default from config)

        Returns:
            RunResult
        """
        if goal is None:
            goal = self.true_maze.get_goal()
        if max_steps is None:
            max_steps = self.config.simulation.max_steps
        if mode is not None and hasattr(self.navigator, 'set_mode'):
            self.navigator.set_mode(mode)

        result = RunResult()
        start_time = time.perf_counter()
        location = self.navigator.get_location()
        result.path.append(location.pos.as_tuple())

        while True:
            front, left, right = self.sense(location)
            try:
                move = self.navigator.navigate(front, left, right, goal)
            except GoalReached:
                result.status = RunStatus.SUCCESS
                break
            except NoPath as e:
                result.status = RunStatus.DEAD_END
                result.failure_type = str(e)
                break

            if result.steps >= max_steps:
                result.status = RunStatus.TIMEOUT
                result.failure_type = f"step budget of {max_steps} exhausted"
                break

            heading = location.dir.turn(move)
            if self.true_maze.get(location.pos, heading) != Wall.ABSENT:
                result.status = RunStatus.COLLISION
                result.failure_type = f"moved {move.to_log()} into a wall at {location}"
                break

            location.turn(move)
            location.forward()
            self.navigator.set_location(location)

            result.steps += 1
            if move != Direction.FORWARD:
                result.turns += 1
            result.moves.append(move.to_log())
            result.path.append(location.pos.as_tuple())

        result.total_time_s = time.perf_counter() - start_time
        result.info['goal'] = goal.as_tuple()
        if mode is not None:
            result.info['mode'] = mode.value

        if self.config.verbose:
            print(f"Run to {goal.as_tuple()}: {result.status} "
                  f"({result.steps} steps, {result.turns} turns)")
        if not result.is_success:
            logger.warning("Run to %s ended with %s: %s", goal.as_tuple(),
                           result.status, result.failure_type)
        return result

    def run_search_and_shortest(self, start: Optional[Location] = None) -> Dict[str, RunResult]:
        """
        Competition sequence: search run, optional return run, shortest run.

        The shortest run starts again from `start` using only walls
        confirmed during the earlier runs.
        """
        sim_config = self.config.simulation
        step_config = self.config.step_map
        search_mode = StepMapMode.from_name(step_config.search_mode)
        shortest_mode = StepMapMode.from_name(step_config.shortest_mode)
        if start is None:
            start = self.navigator.get_location()
        start = start.copy()

        results = {}
        self.navigator.set_location(start)
        results['search'] = self.run(mode=search_mode)
        if not results['search'].is_success:
            return results

        if sim_config.return_to_start:
            results['return'] = self.run(goal=start.pos, mode=search_mode)
            if not results['return'].is_success:
                return results

        if sim_config.shortest_run:
            self.navigator.set_location(start)
            results['shortest'] = self.run(mode=shortest_mode)

        return results
