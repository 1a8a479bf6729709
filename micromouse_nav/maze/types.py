"""
Maze Types Module
=================

Wall states, headings, relative turns and robot locations.

Coordinate system:
    (0, 0) is the bottom left (south west) cell
    x increases to the right (east)
    y increases upwards (north)
    The robot starts at (0, 0) facing north
"""

from enum import IntEnum
from dataclasses import dataclass, field


class Wall(IntEnum):
    """
    Tri-state wall enumeration.

    Values are integers for efficient numpy array storage.
    """
    ABSENT = 0
    PRESENT = 1
    UNEXPLORED = 2

    @classmethod
    def from_bool(cls, present: bool) -> 'Wall':
        """Convert a plain sensor reading"""
        return cls.PRESENT if present else cls.ABSENT

    @staticmethod
    def detection_log(left: 'Wall', front: 'Wall', right: 'Wall') -> str:
        """Three-character picture of what the sensors saw"""
        side = {Wall.ABSENT: ' ', Wall.PRESENT: '|', Wall.UNEXPLORED: '?'}
        ahead = {Wall.ABSENT: ' ', Wall.PRESENT: '-', Wall.UNEXPLORED: '?'}
        return side[left] + ahead[front] + side[right]


class Direction(IntEnum):
    """Move relative to the current heading"""
    FORWARD = 0
    LEFT = 1
    RIGHT = 2
    BACKWARD = 3

    def to_log(self) -> str:
        return _DIRECTION_LOG[self]


class Compass(IntEnum):
    """
    Absolute heading.

    Iteration order (N, E, S, W) is the tie-break order used by the
    navigator, so do not reorder the members.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn(self, direction: Direction) -> 'Compass':
        """Heading after applying a relative turn"""
        return _TURN[self][direction]

    def direction_to(self, target: 'Compass') -> Direction:
        """Relative turn that faces `target` from this heading"""
        return _DIRECTION_TO[self][target]

    def to_log(self) -> str:
        return self.name[0]

    @classmethod
    def from_letter(cls, letter: str) -> 'Compass':
        """Parse 'N', 'E', 'S' or 'W' (case-insensitive)"""
        for compass in cls:
            if compass.name[0] == letter.upper():
                return compass
        raise ValueError(f"Unknown heading: {letter!r}")


_DIRECTION_LOG = {
    Direction.FORWARD: 'F^',
    Direction.LEFT: 'L<',
    Direction.RIGHT: 'R>',
    Direction.BACKWARD: 'Bv',
}

_TURN = {
    Compass.NORTH: {
        Direction.FORWARD: Compass.NORTH,
        Direction.LEFT: Compass.WEST,
        Direction.RIGHT: Compass.EAST,
        Direction.BACKWARD: Compass.SOUTH,
    },
    Compass.EAST: {
        Direction.FORWARD: Compass.EAST,
        Direction.LEFT: Compass.NORTH,
        Direction.RIGHT: Compass.SOUTH,
        Direction.BACKWARD: Compass.WEST,
    },
    Compass.SOUTH: {
        Direction.FORWARD: Compass.SOUTH,
        Direction.LEFT: Compass.EAST,
        Direction.RIGHT: Compass.WEST,
        Direction.BACKWARD: Compass.NORTH,
    },
    Compass.WEST: {
        Direction.FORWARD: Compass.WEST,
        Direction.LEFT: Compass.SOUTH,
        Direction.RIGHT: Compass.NORTH,
        Direction.BACKWARD: Compass.EAST,
    },
}

_DIRECTION_TO = {
    Compass.NORTH: {
        Compass.NORTH: Direction.FORWARD,
        Compass.EAST: Direction.RIGHT,
        Compass.SOUTH: Direction.BACKWARD,
        Compass.WEST: Direction.LEFT,
    },
    Compass.EAST: {
        Compass.NORTH: Direction.LEFT,
        Compass.EAST: Direction.FORWARD,
        Compass.SOUTH: Direction.RIGHT,
        Compass.WEST: Direction.BACKWARD,
    },
    Compass.SOUTH: {
        Compass.NORTH: Direction.BACKWARD,
        Compass.EAST: Direction.LEFT,
        Compass.SOUTH: Direction.FORWARD,
        Compass.WEST: Direction.RIGHT,
    },
    Compass.WEST: {
        Compass.NORTH: Direction.RIGHT,
        Compass.EAST: Direction.BACKWARD,
        Compass.SOUTH: Direction.LEFT,
        Compass.WEST: Direction.FORWARD,
    },
}


@dataclass(frozen=True)
class Position:
    """Cell coordinate"""
    x: int
    y: int

    def as_tuple(self):
        return (self.x, self.y)


@dataclass
class Location:
    """Cell plus heading"""
    pos: Position = field(default_factory=lambda: Position(0, 0))
    dir: Compass = Compass.NORTH

    def turn(self, direction: Direction):
        self.dir = self.dir.turn(direction)

    def forward(self):
        """Step one cell along the current heading"""
        x, y = self.pos.x, self.pos.y
        if self.dir == Compass.NORTH:
            y += 1
        elif self.dir == Compass.EAST:
            x += 1
        elif self.dir == Compass.SOUTH:
            y -= 1
        else:
            x -= 1
        self.pos = Position(x, y)

    def copy(self) -> 'Location':
        return Location(self.pos, self.dir)

    def __str__(self) -> str:
        return f"Y:{self.pos.y:2}, X:{self.pos.x:2}, Dir:{self.dir.to_log()}"
