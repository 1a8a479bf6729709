"""
Path Finder Interface
=====================

Contract between a decision strategy and the loop that drives the
robot, so the loop can be written once for any strategy.
"""

from abc import ABC, abstractmethod

from ..maze import Wall, Direction, Position, Location


class NavigationError(Exception):
    """Base class for the terminal outcomes of navigate()"""


class GoalReached(NavigationError):
    """The robot is already on the goal cell; stop instead of moving"""


class NoPath(NavigationError):
    """No open neighbour leads towards the goal under current knowledge"""


class PathFinder(ABC):
    """Decision strategy driven one cell at a time"""

    @abstractmethod
    def navigate(self, front: Wall, left: Wall, right: Wall, goal: Position) -> Direction:
        """
        Record the walls seen from the current cell and choose the next move.

        Args:
            front: Wall ahead of the robot
            left: Wall on the robot's left
            right: Wall on the robot's right
            goal: Target cell

        Returns:
            Move relative to the current heading

        Raises:
            GoalReached: the current cell is the goal
            NoPath: there is nowhere to go
        """

    @abstractmethod
    def get_location(self) -> Location:
        """Current cell and heading"""

    @abstractmethod
    def set_location(self, location: Location):
        """Tell the strategy where the robot is after moving"""
