"""
Maze Module
===========

Wall grid, heading geometry and the text maze format.
"""

from .types import Wall, Direction, Compass, Position, Location
from .grid import Maze
from .text_format import (
    MazeFileError,
    render_maze,
    parse_maze_text,
    load_maze,
    save_maze,
)

__all__ = [
    'Wall',
    'Direction',
    'Compass',
    'Position',
    'Location',
    'Maze',
    'MazeFileError',
    'render_maze',
    'parse_maze_text',
    'load_maze',
    'save_maze',
]
