#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the command-line front end
"""
import json

from cube_state import Cube
from main import main, solve_cube


def test_scramble_command(capsys, tmp_path):
    out_path = tmp_path / "scrambled.json"
    assert main(["scramble", "--size", "4", "--length", "12", "--seed", "5",
                 "--output", str(out_path)]) == 0

    out = capsys.readouterr().out
    assert "4x4 scramble (12 moves):" in out
    assert json.loads(out_path.read_text())["cube"]["size"] == 4


def test_apply_command(capsys):
    assert main(["apply", "R U R' U'", "--size", "3"]) == 0
    assert "Applied 4 move(s); solved: False" in capsys.readouterr().out


def test_apply_reports_bad_notation(capsys):
    assert main(["apply", "R Q"]) == 1
    assert "Invalid move notation: Q" in capsys.readouterr().err


def test_solve_command(capsys):
    assert main(["solve", "--size", "2", "--scramble", "R U"]) == 0
    out = capsys.readouterr().out
    assert "Depth-Limited Search (2x2)" in out
    assert "Verified: solved" in out


def test_solve_from_saved_cube(capsys, tmp_path):
    path = tmp_path / "cube.json"
    assert main(["apply", "F R", "--output", str(path)]) == 0
    assert main(["solve", "--input", str(path), "--method", "beginner"]) == 0
    assert "Verified: solved" in capsys.readouterr().out


def test_solve_wrong_size(capsys):
    assert main(["solve", "--size", "3", "--method", "search", "--scramble", "R"]) == 1
    assert "2x2" in capsys.readouterr().err


def test_reduction_method():
    cube = Cube(4)
    cube.apply_algorithm("Rw")
    solution = solve_cube(cube)
    assert solution.method == "4x4+ Reduction Method"
    assert any("center" in step.description for step in solution.steps)
    assert any("edge" in step.description for step in solution.steps)


def test_draw_command(tmp_path):
    path = tmp_path / "cube.png"
    assert main(["draw", "--size", "3", "--scramble", "R U", "--output", str(path)]) == 0
    assert path.exists()


def test_bench_command(capsys):
    assert main(["bench", "--size", "2", "--count", "3", "--length", "4", "--seed", "3"]) == 0
    assert "Solved 3/3 (0 failed)" in capsys.readouterr().out


def test_bench_search_scrambles_stay_solvable(capsys):
    assert main(["bench", "--size", "2", "--count", "4", "--length", "5",
                 "--seed", "8", "--method", "search"]) == 0
    assert "Solved 4/4 (0 failed)" in capsys.readouterr().out
