#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the two-phase solver bridge.

Encoding and move translation are tested with a stand-in OptimalSolver; the
end-to-end tests run the real kociemba package. Its first call may build
lookup tables, hence the long timeout there.
"""
import pytest

from cube_colors import Color, FaceName
from cube_rotation import Move
from cube_state import Cube
from solver_kociemba import (
    METHOD,
    KociembaSolver,
    OptimalSolver,
    cube_to_facelets,
    parse_solver_moves,
    solve_3x3,
)
from solver_solution import InvalidCubeError, NoSolutionError, WrongCubeSizeError

SOLVED_FACELETS = "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9

REAL_SOLVER_TIMEOUT = 120.0


class FakeSolver(OptimalSolver):
    """Returns canned tokens and records what it was asked"""

    def __init__(self, tokens):
        self.tokens = tokens
        self.calls = []

    def solve(self, facelets, max_length, timeout):
        self.calls.append((facelets, max_length, timeout))
        if isinstance(self.tokens, Exception):
            raise self.tokens
        return self.tokens


def test_facelets_of_solved_cube():
    assert cube_to_facelets(Cube(3)) == SOLVED_FACELETS


def test_facelets_after_r():
    cube = Cube(3)
    cube.apply_move(Move.R)
    assert cube_to_facelets(cube) == (
        "UUFUUFUUF" "RRRRRRRRR" "FFDFFDFFD" "DDBDDBDDB" "LLLLLLLLL" "UBBUBBUBB")


def test_facelets_follow_the_centers():
    cube = Cube(3)
    cube.apply_algorithm("x y")
    assert cube_to_facelets(cube) == SOLVED_FACELETS

    cube = Cube(3)
    cube.apply_algorithm("M E S R")
    facelets = cube_to_facelets(cube)
    assert len(facelets) == 54
    for letter in "URFDLB":
        assert facelets.count(letter) == 9


def test_facelets_reject_bad_input():
    with pytest.raises(WrongCubeSizeError):
        cube_to_facelets(Cube(4))

    cube = Cube(3)
    cube.set_sticker(FaceName.U, 1, 1, Color.YELLOW)
    with pytest.raises(InvalidCubeError):
        cube_to_facelets(cube)


def test_parse_solver_moves():
    assert parse_solver_moves("R U' F2") == [Move.R, Move.U_PRIME, Move.F2]
    assert parse_solver_moves(["D1", "B3", "L2"]) == [Move.D, Move.B_PRIME, Move.L2]
    assert parse_solver_moves("") == []

    for bad in ["Q", "Rw", "M", "x", "R4"]:
        with pytest.raises(NoSolutionError):
            parse_solver_moves([bad])


def test_solve_with_fake_solver():
    cube = Cube(3)
    cube.apply_move(Move.R)
    solver = FakeSolver(["R'"])

    solution = solve_3x3(cube, solver=solver, max_length=19, timeout=2.0)
    assert solution.method == METHOD
    assert solution.all_moves() == [Move.R_PRIME]
    assert solver.calls == [(cube_to_facelets(cube), 19, 2.0)]


def test_solved_cube_skips_the_solver():
    solver = FakeSolver(NoSolutionError("should not be called"))
    solution = solve_3x3(Cube(3), solver=solver)
    assert solution.is_empty
    assert "already solved" in solution.steps[0].description
    assert solver.calls == []


def test_solver_failures_surface():
    cube = Cube(3)
    cube.apply_move(Move.U)

    with pytest.raises(NoSolutionError):
        solve_3x3(cube, solver=FakeSolver(["U'", "Q"]))
    with pytest.raises(NoSolutionError):
        solve_3x3(cube, solver=FakeSolver(NoSolutionError()))
    with pytest.raises(NoSolutionError):
        solve_3x3(cube, solver=FakeSolver(["U", "U", "U"]), max_length=2)


def test_solve_rejects_bad_cubes():
    with pytest.raises(WrongCubeSizeError):
        solve_3x3(Cube(2), solver=FakeSolver([]))

    cube = Cube(3)
    cube.set_sticker(FaceName.F, 0, 0, Color.WHITE)
    with pytest.raises(InvalidCubeError):
        solve_3x3(cube, solver=FakeSolver([]))


def test_kociemba_solves_face_turn_scramble():
    cube = Cube(3)
    cube.apply_algorithm("R U R' U' F2 D L' B U2 R2 F'")
    solution = solve_3x3(cube, timeout=REAL_SOLVER_TIMEOUT)

    assert 0 < solution.move_count <= 21
    check = cube.copy()
    check.apply_moves(solution.all_moves())
    assert check.is_solved()


def test_kociemba_solves_after_slices_and_rotations():
    cube = Cube(3)
    cube.apply_algorithm("M E S y R F'")
    solution = solve_3x3(cube, timeout=REAL_SOLVER_TIMEOUT)

    check = cube.copy()
    check.apply_moves(solution.all_moves())
    assert check.has_uniform_faces()


def test_kociemba_solver_reports_unsolvable_cube():
    # A single twisted corner: color counts are fine but no solution exists
    facelets = list(SOLVED_FACELETS)
    facelets[8], facelets[9], facelets[20] = "R", "F", "U"
    with pytest.raises(NoSolutionError):
        KociembaSolver().solve("".join(facelets), 21, REAL_SOLVER_TIMEOUT)
