#!/usr/bin/env python3
"""
Micromouse Navigator - Main Entry Point
=======================================

Usage:
    # Print a maze file
    python -m micromouse_nav.main show maze.txt --width 16 --height 16

    # Print the step map of a maze file
    python -m micromouse_nav.main stepmap maze.txt --mode unexplored_as_present

    # Simulate search and shortest runs, saving a figure
    python -m micromouse_nav.main run maze.txt --verbose --plot run.png

From Python:
    from micromouse_nav import AdachiNavigator, Maze, MazeSimulator, load_maze

    maze = load_maze('maze.txt', 16, 16)
    navigator = AdachiNavigator(Maze(16, 16))
    results = MazeSimulator(maze, navigator).run_search_and_shortest()
"""

import argparse
import logging
import sys


def configure_logging(level: str = 'WARNING'):
    """Send library log records to stderr at the given level"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(levelname)s %(name)s: %(message)s',
    )


def _load(args):
    from micromouse_nav.maze import load_maze, MazeFileError

    try:
        return load_maze(args.maze_file, args.width, args.height)
    except MazeFileError as e:
        print(f"Error: {e}")
        return None


def run_show(args):
    """Print a maze file"""
    maze = _load(args)
    if maze is None:
        return 1
    print(maze, end='')
    return 0


def run_stepmap(args):
    """Print the step map of a maze file"""
    from micromouse_nav.maze import Position
    from micromouse_nav.planning import StepMap, StepMapMode

    maze = _load(args)
    if maze is None:
        return 1

    goal = Position(*args.goal) if args.goal else maze.get_goal()
    step_map = StepMap()
    step_map.compute(maze, goal, StepMapMode.from_name(args.mode))
    print(step_map.render(maze))
    print(f"\n{step_map.passes} passes")
    return 0


def run_simulation(args):
    """Simulate search and shortest runs on a maze file"""
    from micromouse_nav import Config, Maze, AdachiNavigator, MazeSimulator

    true_maze = _load(args)
    if true_maze is None:
        return 1

    config = Config()
    config.verbose = args.verbose
    config.maze.width = args.width
    config.maze.height = args.height
    config.maze.goal = true_maze.get_goal().as_tuple()
    config.simulation.return_to_start = args.return_to_start
    if args.max_steps:
        config.simulation.max_steps = args.max_steps

    navigator = AdachiNavigator.from_config(config)
    simulator = MazeSimulator(true_maze, navigator, config)
    results = simulator.run_search_and_shortest()

    print("\n" + "=" * 60)
    print(f"SIMULATION RESULT ({args.maze_file})")
    print("=" * 60)
    for name, result in results.items():
        status_icon = "✓" if result.is_success else "✗"
        print(f"{status_icon} {name:10s}: {result.status:10s} "
              f"steps={result.steps:4d} turns={result.turns:4d}")
        if result.failure_type:
            print(f"             {result.failure_type}")
    print("=" * 60)

    if args.verbose:
        print(navigator.display_step_map())

    if args.plot:
        from micromouse_nav.visualization import MazeVisualizer

        visualizer = MazeVisualizer(navigator.maze, config.visualization)
        fig = visualizer.create_figure(
            step_map=navigator.step_map,
            paths={name: r.path for name, r in results.items()},
            title=f'Known maze after {", ".join(results)}'
        )
        visualizer.save_figure(fig, args.plot)
        print(f"Figure saved to: {args.plot}")

    return 0 if all(r.is_success for r in results.values()) else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Micromouse maze navigator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--log-level', type=str, default='WARNING', help='Logging level')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    def add_maze_args(p):
        p.add_argument('maze_file', type=str, help='Maze text file')
        p.add_argument('--width', type=int, default=16, help='Maze width in cells')
        p.add_argument('--height', type=int, default=16, help='Maze height in cells')

    show_parser = subparsers.add_parser('show', help='Print a maze file')
    add_maze_args(show_parser)

    step_parser = subparsers.add_parser('stepmap', help='Print the step map of a maze')
    add_maze_args(step_parser)
    step_parser.add_argument('--mode', type=str, default='unexplored_as_absent',
                             help='unexplored_as_absent or unexplored_as_present')
    step_parser.add_argument('--goal', type=int, nargs=2, metavar=('X', 'Y'),
                             help='Target cell (default: goal from the file)')

    run_parser = subparsers.add_parser('run', help='Simulate search and shortest runs')
    add_maze_args(run_parser)
    run_parser.add_argument('--max_steps', type=int, help='Step budget per run')
    run_parser.add_argument('--return_to_start', action='store_true',
                            help='Drive back to the start after the search run')
    run_parser.add_argument('--plot', type=str, help='Save a figure to this file')
    run_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'show':
        return run_show(args)
    elif args.command == 'stepmap':
        return run_stepmap(args)
    elif args.command == 'run':
        return run_simulation(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
