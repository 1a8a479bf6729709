"""Configuration defaults and dict conversion."""

import pytest

from micromouse_nav.config import Config, MazeConfig, SimulationConfig


def test_defaults():
    config = Config()
    assert (config.maze.width, config.maze.height) == (16, 16)
    assert config.maze.goal is None
    assert config.step_map.search_mode == 'unexplored_as_absent'
    assert config.step_map.shortest_mode == 'unexplored_as_present'
    assert config.text_format.file_glyphs == (' ', '-', ' ', ' ', '|', ' ', '+', 'G')
    assert config.simulation.max_steps == 1024
    assert not config.verbose


def test_round_trip_through_dict():
    config = Config(maze=MazeConfig(width=8, height=4, goal=(7, 3)),
                    simulation=SimulationConfig(max_steps=50))
    restored = Config.from_dict(config.to_dict())
    assert restored.maze.width == 8
    assert restored.maze.goal == (7, 3)
    assert restored.simulation.max_steps == 50


def test_from_dict_partial():
    config = Config.from_dict({'verbose': True, 'maze': {'width': 32, 'height': 32}})
    assert config.verbose
    assert config.maze.width == 32
    assert config.simulation.max_steps == 1024


def test_invalid_maze_size():
    with pytest.raises(ValueError):
        MazeConfig(width=0)
