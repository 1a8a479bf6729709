"""
Visualization Module
====================

Maze, step map and path figures for debugging.
"""

from .monitor import MazeVisualizer

__all__ = [
    'MazeVisualizer',
]
