#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
3x3 solver bridge to the Kociemba two-phase algorithm.

The cube is encoded as a 54-character facelet string in the order
U (0-8), R (9-17), F (18-26), D (27-35), L (36-44), B (45-53), each face
row-major. Each character names the face whose *current center* has the
sticker's color, so the encoding stays correct after slice moves or
rotations have carried the centers away from their standard faces.

The external solver sits behind the OptimalSolver interface; KociembaSolver
uses the `kociemba` package.
"""

import logging
import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError

import kociemba

from cube_colors import FaceName
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

MAX_SOLUTION_LENGTH = 21
SOLVE_TIMEOUT = 5.0

METHOD = "Kociemba Two-Phase"

FACELET_ORDER = [FaceName.U, FaceName.R, FaceName.F, FaceName.D, FaceName.L, FaceName.B]

# Some two-phase implementations write quarter turns as R1 / R3
_TURN_SUFFIXES = {"": "", "1": "", "'": "'", "3": "'", "2": "2"}


class OptimalSolver(ABC):
    """Facelet string in, list of move tokens out"""

    @abstractmethod
    def solve(self, facelets, max_length, timeout):
        """
        Return the solving move tokens, e.g. ["R", "U'", "F2"].
        Raise NoSolutionError when nothing is found within the bounds.
        """


class KociembaSolver(OptimalSolver):

    def solve(self, facelets, max_length, timeout):
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(kociemba.solve, facelets, max_depth=max_length)
        try:
            result = future.result(timeout=timeout)
        except FutureTimeoutError:
            raise NoSolutionError(
                f"No solution found within constraints (timeout {timeout}s)") from None
        except ValueError as e:
            raise NoSolutionError(f"No solution found within constraints: {e}") from e
        finally:
            # The worker thread cannot be interrupted; let it finish on its own
            executor.shutdown(wait=False)
        if result.startswith("Error"):
            raise NoSolutionError(f"No solution found within constraints: {result}")
        return result.split()


def cube_to_facelets(cube):
    """Encode a 3x3 cube as a 54-character facelet string"""
    if cube.size != 3:
        raise WrongCubeSizeError(cube.size, "3x3")

    center_letters = {}
    for name in FACELET_ORDER:
        center = cube.face(name).get(1, 1)
        if center in center_letters:
            raise InvalidCubeError(
                f"Two centers share the color {center.display_name}")
        center_letters[center] = name.value

    chars = []
    for name in FACELET_ORDER:
        face = cube.face(name)
        for row in range(3):
            for col in range(3):
                chars.append(center_letters[face.get(row, col)])
    return "".join(chars)


def parse_solver_moves(tokens):
    """
    Translate solver output (a string or a list of tokens) into face-turn
    Moves. Any token that is not a face turn raises NoSolutionError.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()

    moves = []
    for token in tokens:
        letter, suffix = token[:1], token[1:]
        if not letter or letter not in "RLUDFB" or suffix not in _TURN_SUFFIXES:
            raise NoSolutionError(f"Unknown move from solver: {token}")
        moves.append(Move(letter + _TURN_SUFFIXES[suffix]))
    return moves


def solve_3x3(cube, solver=None, max_length=MAX_SOLUTION_LENGTH, timeout=SOLVE_TIMEOUT):
    """
    Solve a 3x3 cube with a two-phase solver

    Args:
        cube: the 3x3 Cube to solve (left unchanged)
        solver: OptimalSolver to use, KociembaSolver by default
        max_length: longest solution accepted
        timeout: wall-clock limit in seconds

    Returns:
        Solution; replaying it leaves every face a single color
    """
    start = time.perf_counter()

    if cube.size != 3:
        raise WrongCubeSizeError(cube.size, "3x3")
    if not is_valid(cube):
        raise InvalidCubeError()

    if cube.has_uniform_faces():
        return Solution([SolutionStep("Cube is already solved")], _elapsed_ms(start), METHOD)

    facelets = cube_to_facelets(cube)
    logger.debug("Facelet string: %s", facelets)

    if solver is None:
        solver = KociembaSolver()
    moves = parse_solver_moves(solver.solve(facelets, max_length, timeout))
    if len(moves) > max_length:
        raise NoSolutionError(
            f"Solver returned {len(moves)} moves, more than the limit of {max_length}")

    elapsed = _elapsed_ms(start)
    logger.info("%s: %d-move solution in %.0f ms", METHOD, len(moves), elapsed)
    step = SolutionStep("Solve 3x3 cube (two-phase algorithm)", moves)
    return Solution([step], elapsed, METHOD)


def _elapsed_ms(start):
    return (time.perf_counter() - start) * 1000.0
