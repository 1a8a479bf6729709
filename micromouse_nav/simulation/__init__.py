"""
Simulation Module
=================

Driving loop over a known maze for exercising navigators end to end.
"""

from .results import RunStatus, RunResult
from .runner import MazeSimulator

__all__ = [
    'RunStatus',
    'RunResult',
    'MazeSimulator',
]
