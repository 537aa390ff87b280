#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the text net and the matplotlib diagram
"""
from cube_display import draw_cube, format_net
from cube_state import Cube


def test_format_net_solved_3x3():
    lines = format_net(Cube(3)).splitlines()
    assert len(lines) == 9
    assert lines[0] == "      W W W"
    assert lines[3] == "O O O G G G R R R B B B"
    assert lines[8] == "      Y Y Y"


def test_format_net_follows_moves():
    cube = Cube(2)
    cube.apply_algorithm("U")
    lines = format_net(cube).splitlines()
    assert len(lines) == 6
    assert lines[2] == "G G R R B B O O"
    assert lines[3] == "O O G G R R B B"


def test_draw_cube_saves_png(tmp_path):
    path = tmp_path / "images" / "net.png"
    cube = Cube(5)
    cube.apply_algorithm("R U Rw' M")
    draw_cube(cube, save_path=str(path))
    assert path.exists()
    assert path.stat().st_size > 0


def test_draw_cube_without_saving():
    fig = draw_cube(Cube(2), title="Solved 2x2")
    assert fig is not None
