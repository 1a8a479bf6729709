"""Shared maze builders and a brute-force distance oracle."""

from collections import deque
from pathlib import Path

import numpy as np
import pytest

from micromouse_nav.maze import Maze, Wall, Compass, Position, load_maze
from micromouse_nav.planning import StepMapMode

DATA_DIR = Path(__file__).parent / 'data'
FIXTURE_4X4 = DATA_DIR / 'maze_4x4.txt'


def open_maze(width, height):
    """Maze whose inner walls are all absent"""
    maze = Maze(width, height)
    maze.horizontal_walls[1:height, :] = Wall.ABSENT
    maze.vertical_walls[:, 1:width] = Wall.ABSENT
    return maze


def random_maze(width, height, seed, p=(0.6, 0.3, 0.1)):
    """Maze with random inner walls drawn from (absent, present, unexplored)"""
    rng = np.random.default_rng(seed)
    maze = Maze(width, height)
    states = [Wall.ABSENT, Wall.PRESENT, Wall.UNEXPLORED]
    maze.horizontal_walls[1:height, :] = rng.choice(states, size=(height - 1, width), p=p)
    maze.vertical_walls[:, 1:width] = rng.choice(states, size=(height, width - 1), p=p)
    return maze


def bfs_distances(maze, target, mode):
    """Reference distances by plain BFS: {(x, y): steps} for reachable cells"""
    dist = {target.as_tuple(): 0}
    queue = deque([target])
    while queue:
        pos = queue.popleft()
        for compass in Compass:
            neighbor = maze.neighbor(pos, compass)
            if neighbor is None or neighbor.as_tuple() in dist:
                continue
            if not mode.is_passable(maze.get(pos, compass)):
                continue
            dist[neighbor.as_tuple()] = dist[pos.as_tuple()] + 1
            queue.append(neighbor)
    return dist


@pytest.fixture
def fixture_maze():
    return load_maze(FIXTURE_4X4, 4, 4)


@pytest.fixture
def both_modes():
    return [StepMapMode.UNEXPLORED_AS_ABSENT, StepMapMode.UNEXPLORED_AS_PRESENT]
