#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line front end for the NxN cube engine.

Examples:
    python main.py scramble --size 4 --length 30 --seed 7
    python main.py apply "R U R' U'" --size 3
    python main.py solve --scramble "R U F" --method beginner
    python main.py draw --scramble "Rw U2" --size 5 --output cube.png
    python main.py bench --size 2 --count 20 --length 6
"""

import argparse
import logging
import random
import sys
import time

from tqdm import tqdm

from cube_display import draw_cube, format_net
from cube_rotation import invert_moves
from cube_state import Cube, CubeError
from cube_storage import load_cube, save_cube
from random_cube_generator import (
    DEFAULT_CUBE_SIZE,
    DEFAULT_SCRAMBLE_LENGTH,
    ScrambleConfig,
    generate_scramble,
)
from solver_kociemba import solve_3x3
from solver_parity import resolve_parity
from solver_reduction import solve_centers, solve_edges
from solver_search import MOVES_2X2, MOVES_3X3, solve_2x2, solve_3x3_beginner
from solver_solution import Solution, WrongCubeSizeError

logger = logging.getLogger(__name__)

METHODS = ['auto', 'search', 'beginner', 'kociemba', 'reduction']


def solve_reduction(cube):
    """Centers, edges and parity phases combined into one Solution"""
    start = time.perf_counter()
    steps = []
    steps.extend(solve_centers(cube).steps)
    steps.extend(solve_edges(cube).steps)
    steps.extend(resolve_parity(cube).solution.steps)
    elapsed = (time.perf_counter() - start) * 1000.0
    return Solution(steps, elapsed, "4x4+ Reduction Method")


def solve_cube(cube, method='auto'):
    """
    Solve with the named method; 'auto' picks by cube size

    Returns:
        Solution
    """
    if method == 'auto':
        if cube.size == 2:
            method = 'search'
        elif cube.size == 3:
            method = 'kociemba'
        else:
            method = 'reduction'

    if method == 'search':
        return solve_2x2(cube)
    if method == 'beginner':
        return solve_3x3_beginner(cube)
    if method == 'kociemba':
        return solve_3x3(cube)
    if method == 'reduction':
        return solve_reduction(cube)
    raise ValueError(f"Unknown solve method: {method}")


def _load_or_build(args):
    """Cube from --input, or a solved cube of --size with --scramble applied"""
    if getattr(args, 'input', None):
        cube = load_cube(args.input)
    else:
        cube = Cube(args.size)
    scramble = getattr(args, 'scramble', None)
    if scramble:
        cube.apply_algorithm(scramble)
    return cube


def cmd_scramble(args):
    config = ScrambleConfig(length=args.length, size=args.size, seed=args.seed)
    scramble = generate_scramble(config)
    print(f"{args.size}x{args.size} scramble ({len(scramble)} moves):")
    print(scramble.to_notation())
    print()
    print(format_net(scramble.cube))
    if args.output:
        save_cube(args.output, scramble.cube)
    return 0


def cmd_apply(args):
    cube = _load_or_build(args)
    moves = cube.apply_algorithm(args.algorithm)
    print(f"Applied {len(moves)} move(s); solved: {cube.is_solved()}")
    print(format_net(cube))
    if args.output:
        save_cube(args.output, cube)
    return 0


def cmd_solve(args):
    cube = _load_or_build(args)
    solution = solve_cube(cube, args.method)

    print(solution.summary())
    for i, step in enumerate(solution.steps, 1):
        moves = step.to_notation() or "(no moves)"
        print(f"  {i}. {step.description}: {moves}")

    if not solution.is_empty:
        check = cube.copy()
        check.apply_moves(solution.all_moves())
        solved = check.has_uniform_faces()
        print(f"Verified: {'solved' if solved else 'NOT solved'}")
        print(f"Inverse (scramble): {' '.join(m.to_notation() for m in invert_moves(solution.all_moves()))}")
    return 0


def cmd_draw(args):
    cube = _load_or_build(args)
    draw_cube(cube, save_path=args.output)
    print(f"Cube diagram saved to '{args.output}'.")
    return 0


def cmd_bench(args):
    if args.method == 'search' and args.size != 2:
        raise WrongCubeSizeError(args.size, "2x2")

    # search solvers only undo scrambles drawn from their own move set
    pool = None
    if args.method == 'search' or (args.method == 'auto' and args.size == 2):
        pool = MOVES_2X2
    elif args.method == 'beginner':
        pool = MOVES_3X3

    rng = random.Random(args.seed)
    config = ScrambleConfig(length=args.length, size=args.size)
    solved = 0
    failed = 0
    total_moves = 0
    total_ms = 0.0

    for _ in tqdm(range(args.count), desc=f"Solving {args.size}x{args.size}"):
        scramble = generate_scramble(config, rng=rng, pool=pool)
        try:
            solution = solve_cube(scramble.cube, args.method)
        except CubeError as e:
            logger.debug("Scramble %s failed: %s", scramble.to_notation(), e)
            failed += 1
            continue

        check = scramble.cube.copy()
        check.apply_moves(solution.all_moves())
        if check.has_uniform_faces():
            solved += 1
        total_moves += solution.move_count
        total_ms += solution.time_ms

    attempted = args.count - failed
    print(f"Solved {solved}/{args.count} ({failed} failed)")
    if attempted:
        print(f"Average: {total_moves / attempted:.1f} moves, {total_ms / attempted:.0f} ms")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description='NxN cube engine and solvers')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    def add_size(p):
        p.add_argument('--size', type=int, default=DEFAULT_CUBE_SIZE,
                       help='Cube size N (2-20)')

    p = sub.add_parser('scramble', help='Generate a random scramble')
    add_size(p)
    p.add_argument('--length', type=int, default=DEFAULT_SCRAMBLE_LENGTH,
                   help='Number of moves')
    p.add_argument('--seed', type=int, default=None, help='Random seed')
    p.add_argument('--output', type=str, default=None, help='Save the cube as JSON')
    p.set_defaults(func=cmd_scramble)

    p = sub.add_parser('apply', help='Apply an algorithm and print the cube')
    p.add_argument('algorithm', type=str, help='Moves, e.g. "R U R\' U\'"')
    add_size(p)
    p.add_argument('--input', type=str, default=None, help='Start from a saved cube')
    p.add_argument('--output', type=str, default=None, help='Save the result as JSON')
    p.set_defaults(func=cmd_apply)

    p = sub.add_parser('solve', help='Solve a cube')
    add_size(p)
    p.add_argument('--scramble', type=str, default=None, help='Scramble to apply first')
    p.add_argument('--input', type=str, default=None, help='Saved cube to solve')
    p.add_argument('--method', type=str, default='auto', choices=METHODS,
                   help='Solving method')
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser('draw', help='Save a PNG net diagram')
    add_size(p)
    p.add_argument('--scramble', type=str, default=None, help='Scramble to apply first')
    p.add_argument('--input', type=str, default=None, help='Saved cube to draw')
    p.add_argument('--output', type=str, default='cube.png', help='PNG path')
    p.set_defaults(func=cmd_draw)

    p = sub.add_parser('bench', help='Solve many random scrambles')
    add_size(p)
    p.add_argument('--count', type=int, default=20, help='Number of scrambles')
    p.add_argument('--length', type=int, default=6, help='Moves per scramble')
    p.add_argument('--seed', type=int, default=None, help='Random seed')
    p.add_argument('--method', type=str, default='auto', choices=METHODS,
                   help='Solving method')
    p.set_defaults(func=cmd_bench)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        return args.func(args)
    except (CubeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
