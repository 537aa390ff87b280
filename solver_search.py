#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-limited search solvers for 2x2 and 3x3 cubes.

Iterative deepening: try depth 1, 2, ... up to a limit and return the first
solution found, which is therefore one of the shortest over the move pool.
The search keeps one working cube and undoes each move with its inverse
when backtracking instead of copying the cube per node. Moves on the same
layer as the previous move are pruned.

The 2x2 pool only turns R, U and F: the DBL corner never moves, so the
search space is much smaller, but a cube scrambled with L, D or B turns
can only be solved up to a whole-cube rotation, which does not count as
solved: such cubes end in NoSolutionError.
"""

import logging
import time

from cube_rotation import Move
from cube_validation import is_valid
from solver_solution import (
    InvalidCubeError,
    NoSolutionError,
    Solution,
    SolutionStep,
    WrongCubeSizeError,
)

logger = logging.getLogger(__name__)

MAX_DEPTH_2X2 = 8
MAX_DEPTH_3X3 = 12

MOVES_2X2 = [
    Move.R, Move.R_PRIME, Move.R2,
    Move.U, Move.U_PRIME, Move.U2,
    Move.F, Move.F_PRIME, Move.F2,
]

MOVES_3X3 = [
    Move.R, Move.R_PRIME, Move.R2,
    Move.U, Move.U_PRIME, Move.U2,
    Move.F, Move.F_PRIME, Move.F2,
    Move.L, Move.L_PRIME, Move.L2,
    Move.D, Move.D_PRIME, Move.D2,
    Move.B, Move.B_PRIME, Move.B2,
]

METHOD_2X2 = "Depth-Limited Search (2x2)"
METHOD_3X3 = "Depth-Limited Search (3x3 Beginner)"


def solve_2x2(cube, max_depth=MAX_DEPTH_2X2):
    """
    Solve a 2x2 cube

    Raises:
        WrongCubeSizeError, InvalidCubeError, NoSolutionError
    """
    return _solve(cube, 2, MOVES_2X2, max_depth, METHOD_2X2, "Solve 2x2 cube")


def solve_3x3_beginner(cube, max_depth=MAX_DEPTH_3X3):
    """
    Solve a 3x3 cube with a depth-limited search over the 18 face turns.
    Only practical for cubes a handful of moves away from solved; use
    solver_kociemba.solve_3x3 for arbitrary states.
    """
    return _solve(cube, 3, MOVES_3X3, max_depth, METHOD_3X3,
                  "Solve 3x3 cube using beginner's method")


def _solve(cube, size, pool, max_depth, method, description):
    start = time.perf_counter()

    if cube.size != size:
        raise WrongCubeSizeError(cube.size, f"{size}x{size}")
    if not is_valid(cube):
        raise InvalidCubeError()

    if cube.is_solved():
        return Solution([SolutionStep("Cube is already solved")],
                        _elapsed_ms(start), method)

    work = cube.copy()
    for depth in range(1, max_depth + 1):
        logger.debug("%s: searching depth %d", method, depth)
        path = []
        if search(work, depth, pool, path):
            elapsed = _elapsed_ms(start)
            logger.info("%s: found %d-move solution in %.0f ms",
                        method, len(path), elapsed)
            return Solution([SolutionStep(description, path)], elapsed, method)

    raise NoSolutionError(f"Could not find solution within depth limit ({max_depth})")


def search(cube, depth, pool, path):
    """
    Depth-first search for a solution of at most `depth` moves.
    On success `path` holds the moves and `cube` is left solved; on failure
    both are restored.
    """
    if cube.is_solved():
        return True
    if depth == 0:
        return False

    last_layer = path[-1].layer if path else None
    for mv in pool:
        if mv.layer == last_layer:
            continue
        cube.apply_move(mv)
        path.append(mv)
        if search(cube, depth - 1, pool, path):
            return True
        path.pop()
        cube.apply_move(mv.inverse())

    return False


def _elapsed_ms(start):
    return (time.perf_counter() - start) * 1000.0
