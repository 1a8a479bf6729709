"""
Configuration Module
====================

Centralized configuration management for the maze navigator.
"""

from .settings import (
    Config,
    MazeConfig,
    StepMapConfig,
    TextFormatConfig,
    SimulationConfig,
    VisualizationConfig,
)

__all__ = [
    'Config',
    'MazeConfig',
    'StepMapConfig',
    'TextFormatConfig',
    'SimulationConfig',
    'VisualizationConfig',
]
