"""Step map relaxation against a BFS oracle."""

import numpy as np
import pytest

from micromouse_nav.maze import Maze, Wall, Compass, Position
from micromouse_nav.planning import StepMap, StepMapMode, UNREACHED

from conftest import open_maze, random_maze, bfs_distances

SEARCH = StepMapMode.UNEXPLORED_AS_ABSENT
SHORTEST = StepMapMode.UNEXPLORED_AS_PRESENT


def assert_matches_oracle(maze, target, mode):
    step_map = StepMap()
    step_map.compute(maze, target, mode)
    expected = bfs_distances(maze, target, mode)
    for y in range(maze.height):
        for x in range(maze.width):
            assert step_map.get(x, y) == expected.get((x, y)), (x, y, mode)


def test_two_by_two_open_grid():
    maze = open_maze(2, 2)
    step_map = StepMap()
    step_map.compute(maze, Position(1, 1), SHORTEST)
    assert step_map.get(1, 1) == 0
    assert step_map.get(1, 0) == 1
    assert step_map.get(0, 1) == 1
    assert step_map.get(0, 0) == 2


def test_fixture_distances(fixture_maze, both_modes):
    expected = {
        (2, 2): 0, (1, 2): 1, (1, 1): 2, (2, 1): 3, (3, 1): 4,
        (3, 2): 5, (3, 0): 5, (2, 0): 6, (1, 0): 7, (3, 3): 6,
        (2, 3): 7, (1, 3): 8, (0, 3): 9, (0, 2): 10, (0, 1): 11, (0, 0): 12,
    }
    for mode in both_modes:
        step_map = StepMap()
        step_map.compute(fixture_maze, fixture_maze.get_goal(), mode)
        for (x, y), steps in expected.items():
            assert step_map.get(x, y) == steps


def test_matches_bfs_on_random_mazes(both_modes):
    for seed in range(20):
        maze = random_maze(6, 5, seed)
        target = Position(seed % 6, seed % 5)
        for mode in both_modes:
            assert_matches_oracle(maze, target, mode)


def test_matches_bfs_on_fixture_for_every_target(fixture_maze):
    for y in range(4):
        for x in range(4):
            assert_matches_oracle(fixture_maze, Position(x, y), SEARCH)


def test_target_is_zero(both_modes):
    maze = random_maze(5, 5, seed=7)
    for mode in both_modes:
        step_map = StepMap()
        step_map.compute(maze, Position(4, 2), mode)
        assert step_map.get(4, 2) == 0


def test_conservative_never_shorter_than_optimistic():
    for seed in range(10):
        maze = random_maze(6, 6, seed, p=(0.5, 0.2, 0.3))
        optimistic = StepMap()
        conservative = StepMap()
        optimistic.compute(maze, Position(3, 3), SEARCH)
        conservative.compute(maze, Position(3, 3), SHORTEST)
        for y in range(6):
            for x in range(6):
                cons = conservative.get(x, y)
                if cons is None:
                    continue
                opt = optimistic.get(x, y)
                assert opt is not None and cons >= opt


def test_fresh_maze_search_map_is_manhattan_except_start_wall():
    maze = Maze(4, 4)
    step_map = StepMap()
    step_map.compute(maze, Position(2, 2), SEARCH)
    assert step_map.get(3, 3) == 2
    assert step_map.get(0, 1) == 3
    # East of (0, 0) is walled, so it must go north first
    assert step_map.get(0, 0) == 4
    assert step_map.get(1, 0) == 3


def test_fresh_maze_shortest_map_only_reaches_target():
    maze = Maze(4, 4)
    step_map = StepMap()
    step_map.compute(maze, Position(2, 2), SHORTEST)
    reached = [(x, y) for y in range(4) for x in range(4) if step_map.is_reached(x, y)]
    assert reached == [(2, 2)]
    assert step_map.get(0, 0) is None


def test_disconnected_cell_stays_unreached():
    maze = open_maze(3, 3)
    for compass in Compass:
        maze.set(Position(0, 2), compass, Wall.PRESENT)
    step_map = StepMap()
    step_map.compute(maze, Position(2, 0), SEARCH)
    assert step_map.get(0, 2) is None
    assert step_map.as_array()[2, 0] == UNREACHED
    assert step_map.get(0, 1) == 3


def test_recompute_is_idempotent():
    maze = random_maze(6, 6, seed=11)
    step_map = StepMap()
    step_map.compute(maze, Position(2, 3), SEARCH)
    first = step_map.as_array()
    step_map.compute(maze, Position(2, 3), SEARCH)
    assert np.array_equal(first, step_map.as_array())


def test_pass_count_is_bounded():
    maze = random_maze(8, 8, seed=5)
    step_map = StepMap()
    passes = step_map.compute(maze, Position(0, 0), SEARCH)
    longest = int(step_map.as_array().max())
    assert passes == step_map.passes
    assert 1 <= passes <= longest + 2


def test_reallocates_when_maze_size_changes():
    step_map = StepMap()
    step_map.compute(open_maze(3, 3), Position(0, 0), SEARCH)
    step_map.compute(open_maze(5, 2), Position(4, 1), SEARCH)
    assert step_map.as_array().shape == (2, 5)
    assert step_map.get(0, 0) == 5


def test_rejects_target_outside_maze():
    with pytest.raises(ValueError):
        StepMap().compute(Maze(3, 3), Position(3, 0), SEARCH)


def test_query_before_compute():
    with pytest.raises(RuntimeError):
        StepMap().get(0, 0)


def test_masked_view():
    maze = Maze(3, 3)
    step_map = StepMap()
    step_map.compute(maze, Position(1, 1), SHORTEST)
    masked = step_map.as_masked()
    assert masked.count() == 1
    assert masked[1, 1] == 0


def test_render_two_by_two():
    maze = open_maze(2, 2)
    step_map = StepMap()
    step_map.compute(maze, Position(1, 1), SEARCH)
    assert step_map.render(maze) == '\n'.join([
        '+---+---+',
        '|  1   0| 1',
        '+   +   +',
        '|  2   1| 0',
        '+---+---+',
        '   0   1',
    ])


def test_render_marks_unexplored_and_unreached():
    maze = Maze(2, 1)
    maze.set(Position(0, 0), Compass.EAST, Wall.UNEXPLORED)
    step_map = StepMap()
    step_map.compute(maze, Position(1, 0), SHORTEST)
    assert step_map.render(maze).splitlines()[1] == '|   ?  0| 0'


def test_mode_from_name():
    assert StepMapMode.from_name('unexplored_as_absent') == SEARCH
    assert StepMapMode.from_name('UNEXPLORED_AS_PRESENT') == SHORTEST
    with pytest.raises(ValueError):
        StepMapMode.from_name('optimistic')


def test_passability():
    assert SEARCH.is_passable(Wall.UNEXPLORED)
    assert not SHORTEST.is_passable(Wall.UNEXPLORED)
    for mode in (SEARCH, SHORTEST):
        assert mode.is_passable(Wall.ABSENT)
        assert not mode.is_passable(Wall.PRESENT)
