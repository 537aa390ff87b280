#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for 4x4+ parity detection and correction
"""
import pytest

from cube_colors import FaceName
from cube_state import Cube
from solver_parity import (
    ParitySolution,
    ParityType,
    detect_oll_parity,
    detect_pll_parity,
    oll_parity_moves,
    pll_parity_moves,
    resolve_parity,
)
from solver_solution import WrongCubeSizeError


def swap_stickers(cube, a, b):
    """Swap two stickers given as (face, row, col); color counts are kept"""
    color_a = cube.get_sticker(*a)
    cube.set_sticker(*a, cube.get_sticker(*b))
    cube.set_sticker(*b, color_a)


def test_no_parity_on_solved_cube():
    result = resolve_parity(Cube(4))
    assert isinstance(result, ParitySolution)
    assert result.parity_type == ParityType.NONE
    assert result.move_count == 0
    assert result.solution.steps[0].description == "No parity detected"
    assert result.solution.method == "4x4+ Parity - None"


@pytest.mark.parametrize("size", [4, 5, 6])
def test_detectors_on_solved_cubes(size):
    assert not detect_oll_parity(Cube(size))
    assert not detect_pll_parity(Cube(size))


def test_detectors_ignore_small_cubes():
    cube = Cube(3)
    swap_stickers(cube, (FaceName.U, 0, 1), (FaceName.F, 1, 1))
    assert not detect_oll_parity(cube)
    assert not detect_pll_parity(cube)


def test_rejects_small_cubes():
    with pytest.raises(WrongCubeSizeError) as excinfo:
        resolve_parity(Cube(3))
    assert "4x4 or larger" in str(excinfo.value)


def test_oll_parity():
    cube = Cube(4)
    swap_stickers(cube, (FaceName.U, 0, 1), (FaceName.F, 1, 1))
    assert detect_oll_parity(cube)
    assert not detect_pll_parity(cube)

    result = resolve_parity(cube)
    assert result.parity_type == ParityType.OLL_PARITY
    assert result.moves == oll_parity_moves()
    assert result.move_count == 11
    assert result.solution.method == "4x4+ Parity - OLL"


def test_pll_parity():
    cube = Cube(4)
    swap_stickers(cube, (FaceName.R, 1, 0), (FaceName.L, 1, 3))
    assert not detect_oll_parity(cube)
    assert detect_pll_parity(cube)

    result = resolve_parity(cube)
    assert result.parity_type == ParityType.PLL_PARITY
    assert result.moves == pll_parity_moves()
    assert result.move_count == 6


def test_both_parities():
    cube = Cube(4)
    swap_stickers(cube, (FaceName.U, 0, 1), (FaceName.R, 1, 0))
    swap_stickers(cube, (FaceName.L, 1, 3), (FaceName.D, 1, 1))

    result = resolve_parity(cube)
    assert result.parity_type == ParityType.BOTH
    assert result.solution.step_count == 2
    assert result.move_count == 17
    assert result.solution.method == "4x4+ Parity - OLL & PLL"


def test_resolve_does_not_touch_the_cube():
    cube = Cube(4)
    swap_stickers(cube, (FaceName.R, 1, 0), (FaceName.L, 1, 3))
    before = cube.copy()
    resolve_parity(cube)
    assert cube == before


def test_pll_strips_follow_the_side_faces():
    """R is read down its first column and L down its last, not along the top rows"""
    cube = Cube(4)
    swap_stickers(cube, (FaceName.R, 0, 1), (FaceName.L, 0, 2))
    assert not detect_pll_parity(cube)

    cube = Cube(4)
    swap_stickers(cube, (FaceName.F, 0, 1), (FaceName.R, 0, 1))
    assert not detect_pll_parity(cube)


def test_parity_type_from_flags():
    assert ParityType.from_flags(False, False) == ParityType.NONE
    assert ParityType.from_flags(True, False) == ParityType.OLL_PARITY
    assert ParityType.from_flags(False, True) == ParityType.PLL_PARITY
    assert ParityType.from_flags(True, True) == ParityType.BOTH
