"""
Configuration Settings Module
==============================

Dataclass-based configuration with validation and defaults.
Only handles configuration; nothing here touches the maze itself.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Tuple


@dataclass
class MazeConfig:
    """Maze geometry"""
    width: int = 16
    height: int = 16

    # None means the centre cell (width // 2, height // 2)
    goal: Optional[Tuple[int, int]] = None

    # Heading of the robot on the start cell (0, 0)
    start_heading: str = 'N'

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {self.width}x{self.height}")


@dataclass
class StepMapConfig:
    """Unexplored-wall policy for each kind of run"""
    search_mode: str = 'unexplored_as_absent'
    shortest_mode: str = 'unexplored_as_present'


@dataclass
class TextFormatConfig:
    """
    Glyph sets for the text maze format.

    Order of every preset: horizontal absent, horizontal present,
    horizontal unexplored, vertical absent, vertical present,
    vertical unexplored, pillar, goal.
    """
    # Used when writing maze files
    file_glyphs: Tuple[str, ...] = (' ', '-', ' ', ' ', '|', ' ', '+', 'G')

    # Used by str(maze)
    display_glyphs: Tuple[str, ...] = ('  ', '--', '  ', ' ', '|', ' ', '+', 'GL')

    # Used as the background of the step map view
    step_map_glyphs: Tuple[str, ...] = ('   ', '---', '???', ' ', '|', '?', '+', '   ')


@dataclass
class SimulationConfig:
    """Driving loop settings"""
    max_steps: int = 1024  # safety guard against wandering forever
    return_to_start: bool = False
    shortest_run: bool = True


@dataclass
class VisualizationConfig:
    """Visualization and debugging configuration"""
    figure_size: Tuple[int, int] = (8, 8)
    dpi: int = 100
    cmap: str = 'viridis'
    colors: Dict[str, str] = field(default_factory=lambda: {
        'present': 'black',
        'unexplored': 'lightgray',
        'path': 'red',
        'start': 'green',
        'goal': 'gold',
    })


@dataclass
class Config:
    """
    Master configuration class combining all sub-configurations.

    Usage:
        config = Config()
        config = Config(maze=MazeConfig(width=32, height=32))
    """
    maze: MazeConfig = field(default_factory=MazeConfig)
    step_map: StepMapConfig = field(default_factory=StepMapConfig)
    text_format: TextFormatConfig = field(default_factory=TextFormatConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # Global settings
    verbose: bool = False
    log_level: str = 'WARNING'

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary"""
        sections = {
            'maze': MazeConfig,
            'step_map': StepMapConfig,
            'text_format': TextFormatConfig,
            'simulation': SimulationConfig,
            'visualization': VisualizationConfig,
        }
        config = cls()
        for key, value in d.items():
            if key in sections and isinstance(value, dict):
                setattr(config, key, sections[key](**value))
            elif hasattr(config, key):
                setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Export config to dictionary"""
        from dataclasses import asdict
        return asdict(self)
