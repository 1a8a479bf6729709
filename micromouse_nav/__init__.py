"""
Micromouse Navigator
====================

Maze navigation core for a grid-walled micromouse robot.

Given wall readings made while moving through an unknown or partially
known maze, decides the next move toward a goal cell using a step map
(flood-filled distance field) and greedy descent (Adachi method).

Key Features:
- Tri-state wall grid with permanent outer walls
- Step map under optimistic (search) or conservative (shortest) policy
- Navigator behind a small PathFinder interface
- Text maze format compatible with existing maze files
- Simulated driving loop and matplotlib debug figures
"""

__version__ = "1.0.0"

from .config import Config
from .maze import (
    Wall, Direction, Compass, Position, Location, Maze,
    MazeFileError, load_maze, save_maze, parse_maze_text,
)
from .planning import (
    PathFinder, NavigationError, GoalReached, NoPath,
    StepMap, StepMapMode, AdachiNavigator,
)
from .simulation import MazeSimulator, RunResult, RunStatus

__all__ = [
    'Config',
    'Wall', 'Direction', 'Compass', 'Position', 'Location', 'Maze',
    'MazeFileError', 'load_maze', 'save_maze', 'parse_maze_text',
    'PathFinder', 'NavigationError', 'GoalReached', 'NoPath',
    'StepMap', 'StepMapMode', 'AdachiNavigator',
    'MazeSimulator', 'RunResult', 'RunStatus',
]
