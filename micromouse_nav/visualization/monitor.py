"""
Visualization Module
====================

Matplotlib views of the maze, its step map and driven paths.
Helps see why the robot went where it went.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Tuple

from ..config import VisualizationConfig
from ..maze import Maze, Wall
from ..planning import StepMap


class MazeVisualizer:
    """
    Static maze visualization.

    Cells are unit squares with their south west corner at (x, y), so
    cell centres sit at (x + 0.5, y + 0.5).
    """

    def __init__(self, maze: Maze, config: Optional[VisualizationConfig] = None):
        """
        Initialize visualizer.

        Args:
            maze: Maze to draw
            config: Visualization configuration
        """
        self.maze = maze
        self.config = config or VisualizationConfig()

    def _new_axes(self):
        fig, ax = plt.subplots(figsize=self.config.figure_size)
        return ax

    def plot_walls(self, ax=None, show_unexplored: bool = True) -> plt.Axes:
        """
        Plot walls: present walls solid, unexplored walls dashed.

        Returns:
            Matplotlib axes
        """
        if ax is None:
            ax = self._new_axes()
        colors = self.config.colors

        for y in range(self.maze.height + 1):
            for x in range(self.maze.width):
                wall = self.maze.horizontal_walls[y, x]
                if wall == Wall.PRESENT:
                    ax.plot([x, x + 1], [y, y], color=colors['present'], linewidth=2)
                elif wall == Wall.UNEXPLORED and show_unexplored:
                    ax.plot([x, x + 1], [y, y], color=colors['unexplored'],
                            linewidth=1, linestyle='--')

        for y in range(self.maze.height):
            for x in range(self.maze.width + 1):
                wall = self.maze.vertical_walls[y, x]
                if wall == Wall.PRESENT:
                    ax.plot([x, x], [y, y + 1], color=colors['present'], linewidth=2)
                elif wall == Wall.UNEXPLORED and show_unexplored:
                    ax.plot([x, x], [y, y + 1], color=colors['unexplored'],
                            linewidth=1, linestyle='--')

        goal = self.maze.get_goal()
        ax.plot(goal.x + 0.5, goal.y + 0.5, '*', color=colors['goal'],
                markersize=16, markeredgecolor='black', label='Goal')
        ax.plot(0.5, 0.5, 'o', color=colors['start'], markersize=10, label='Start')

        ax.set_xlim(-0.1, self.maze.width + 0.1)
        ax.set_ylim(-0.1, self.maze.height + 0.1)
        ax.set_aspect('equal')
        ax.set_xlabel('X (cells)')
        ax.set_ylabel('Y (cells)')
        return ax

    def plot_step_map(self, ax, step_map: StepMap, annotate: bool = True):
        """Heat map of step counts; unreachable cells are left blank"""
        steps = step_map.as_masked()
        im = ax.imshow(steps, cmap=self.config.cmap, origin='lower',
                       extent=(0, self.maze.width, 0, self.maze.height), alpha=0.6)
        plt.colorbar(im, ax=ax, label='Steps to target')

        if annotate:
            for y in range(self.maze.height):
                for x in range(self.maze.width):
                    if step_map.is_reached(x, y):
                        ax.text(x + 0.5, y + 0.5, str(step_map.get(x, y)), ha='center',
                                va='center', fontsize=8)
        return im

    def plot_path(self, ax, path: List[Tuple[int, int]],
                  color: Optional[str] = None, label: Optional[str] = None,
                  linewidth: float = 2.0, alpha: float = 0.8):
        """Plot a path of cells on existing axes"""
        if not path or len(path) < 2:
            return

        path_arr = np.array(path, dtype=float) + 0.5
        ax.plot(path_arr[:, 0], path_arr[:, 1],
                color=color or self.config.colors['path'],
                linewidth=linewidth, alpha=alpha, label=label)

    def create_figure(self, step_map: Optional[StepMap] = None,
                      paths: Optional[Dict[str, List[Tuple[int, int]]]] = None,
                      title: str = 'Maze') -> plt.Figure:
        """
        Maze with optional step map and paths.

        Args:
            step_map: Step map to shade the cells with
            paths: Dict of run name -> path
            title: Figure title

        Returns:
            Matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.config.figure_size)
        if step_map is not None:
            self.plot_step_map(ax, step_map)
        self.plot_walls(ax)

        colors = ['red', 'blue', 'green', 'purple', 'orange', 'cyan']
        for i, (name, path) in enumerate((paths or {}).items()):
            self.plot_path(ax, path, color=colors[i % len(colors)], label=name)

        ax.legend(loc='upper right')
        ax.set_title(title)
        return fig

    def save_figure(self, fig: plt.Figure, filename: str, dpi: int = None):
        """Save figure to file"""
        fig.savefig(filename, dpi=dpi or self.config.dpi,
                    bbox_inches='tight', facecolor='white')
        plt.close(fig)
