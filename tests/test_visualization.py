"""Matplotlib figures render without a display."""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt

from micromouse_nav.maze import Maze, Position
from micromouse_nav.planning import StepMap, StepMapMode
from micromouse_nav.visualization import MazeVisualizer


def test_plot_walls(fixture_maze):
    ax = MazeVisualizer(fixture_maze).plot_walls()
    assert len(ax.lines) > 0
    plt.close('all')


def test_create_and_save_figure(fixture_maze, tmp_path):
    step_map = StepMap()
    step_map.compute(fixture_maze, fixture_maze.get_goal(), StepMapMode.UNEXPLORED_AS_PRESENT)
    visualizer = MazeVisualizer(fixture_maze)
    fig = visualizer.create_figure(step_map=step_map,
                                   paths={'run': [(0, 0), (0, 1), (0, 2)]},
                                   title='Fixture')
    path = tmp_path / 'maze.png'
    visualizer.save_figure(fig, str(path))
    assert path.stat().st_size > 0


def test_step_map_with_unreached_cells(tmp_path):
    maze = Maze(3, 3)
    step_map = StepMap()
    step_map.compute(maze, Position(1, 1), StepMapMode.UNEXPLORED_AS_PRESENT)
    visualizer = MazeVisualizer(maze)
    fig = visualizer.create_figure(step_map=step_map)
    visualizer.save_figure(fig, str(tmp_path / 'sparse.png'))
