"""
Planning Module
===============

Step map computation and the navigators built on it.
"""

from .path_finder import PathFinder, NavigationError, GoalReached, NoPath
from .step_map import StepMap, StepMapMode, UNREACHED
from .adachi import AdachiNavigator

__all__ = [
    'PathFinder',
    'NavigationError',
    'GoalReached',
    'NoPath',
    'StepMap',
    'StepMapMode',
    'UNREACHED',
    'AdachiNavigator',
]
