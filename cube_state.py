#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cube state: Face (an NxN grid of colors) and Cube (six faces of one size).

A new Cube is solved with the standard color scheme:
  U: White, D: Yellow, F: Green, B: Blue, L: Orange, R: Red
Moves are applied through cube_rotation; scanners and other external input
write individual stickers with Cube.set_sticker().
"""

from collections import Counter

import numpy as np

from cube_colors import Color, FaceName
from cube_rotation import (
    apply as apply_parsed_move,
    apply_move as engine_apply_move,
    apply_wide_move as engine_apply_wide_move,
    rotate_face,
    rotate_face_180,
    rotate_face_ccw,
)

MIN_SIZE = 2
MAX_SIZE = 20


class CubeError(Exception):
    """Base class for recoverable, user-facing cube errors"""


def _check_size(size, what):
    if not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"{what} size must be between {MIN_SIZE} and {MAX_SIZE}")


class Face:
    """An NxN grid of sticker colors, stored as seen from outside the cube"""

    def __init__(self, size, color=Color.WHITE):
        _check_size(size, "Face")
        self.size = size
        self.grid = np.full((size, size), int(color), dtype=np.int8)

    @classmethod
    def from_stickers(cls, stickers):
        """Build a face from a square list of rows of Color"""
        size = len(stickers)
        face = cls(size)
        for row, colors in enumerate(stickers):
            face.set_row(row, colors)
        return face

    def _check_index(self, index, what):
        if not 0 <= index < self.size:
            raise IndexError(f"{what} {index} out of range for size {self.size}")

    def get(self, row, col):
        self._check_index(row, "Row")
        self._check_index(col, "Column")
        return Color(int(self.grid[row, col]))

    def set(self, row, col, color):
        self._check_index(row, "Row")
        self._check_index(col, "Column")
        self.grid[row, col] = int(Color(color))

    def get_row(self, row):
        self._check_index(row, "Row")
        return [Color(int(v)) for v in self.grid[row, :]]

    def set_row(self, row, colors):
        self._check_index(row, "Row")
        if len(colors) != self.size:
            raise ValueError(f"Row must have {self.size} colors (got {len(colors)})")
        self.grid[row, :] = [int(Color(c)) for c in colors]

    def get_col(self, col):
        self._check_index(col, "Column")
        return [Color(int(v)) for v in self.grid[:, col]]

    def set_col(self, col, colors):
        self._check_index(col, "Column")
        if len(colors) != self.size:
            raise ValueError(f"Column must have {self.size} colors (got {len(colors)})")
        self.grid[:, col] = [int(Color(c)) for c in colors]

    def stickers(self):
        """Rows of Color, row-major"""
        return [self.get_row(row) for row in range(self.size)]

    def rotate_cw(self):
        self.grid = rotate_face(self.grid)

    def rotate_ccw(self):
        self.grid = rotate_face_ccw(self.grid)

    def rotate_180(self):
        self.grid = rotate_face_180(self.grid)

    def rotate(self, clockwise=True):
        if clockwise:
            self.rotate_cw()
        else:
            self.rotate_ccw()

    def is_solved(self):
        """True when every sticker matches the top-left one"""
        return bool(np.all(self.grid == self.grid[0, 0]))

    def copy(self):
        face = Face(self.size)
        face.grid = self.grid.copy()
        return face

    def __eq__(self, other):
        if not isinstance(other, Face):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self):
        rows = [" ".join(c.letter for c in row) for row in self.stickers()]
        return f"Face(size={self.size}, [{' / '.join(rows)}])"


class Cube:
    """Six faces of one size, keyed by FaceName"""

    def __init__(self, size=3):
        _check_size(size, "Cube")
        self.size = size
        self.faces = {name: Face(size, name.standard_color) for name in FaceName.all()}

    def face(self, name):
        return self.faces[name]

    @property
    def up(self):
        return self.faces[FaceName.U]

    @property
    def down(self):
        return self.faces[FaceName.D]

    @property
    def front(self):
        return self.faces[FaceName.F]

    @property
    def back(self):
        return self.faces[FaceName.B]

    @property
    def left(self):
        return self.faces[FaceName.L]

    @property
    def right(self):
        return self.faces[FaceName.R]

    def get_sticker(self, face, row, col):
        return self.faces[face].get(row, col)

    def set_sticker(self, face, row, col, color):
        self.faces[face].set(row, col, color)

    def is_solved(self):
        """Every face uniform and carrying its standard color"""
        return all(
            face.is_solved() and face.get(0, 0) == name.standard_color
            for name, face in self.faces.items()
        )

    def has_uniform_faces(self):
        """Every face is one color, in any orientation of the whole cube"""
        return all(face.is_solved() for face in self.faces.values())

    def count_colors(self):
        counts = Counter()
        for face in self.faces.values():
            values, freq = np.unique(face.grid, return_counts=True)
            for value, count in zip(values, freq):
                counts[Color(int(value))] += int(count)
        return counts

    def has_valid_color_counts(self):
        expected = self.size * self.size
        counts = self.count_colors()
        if len(counts) != 6:
            return False
        return all(count == expected for count in counts.values())

    def validate(self):
        """Raise a ValidationError if the sticker counts are inconsistent"""
        from cube_validation import validate
        validate(self)

    def apply_move(self, move):
        engine_apply_move(self, move)

    def apply_moves(self, moves):
        for mv in moves:
            apply_parsed_move(self, mv)

    def apply_wide_move(self, wide):
        engine_apply_wide_move(self, wide)

    def apply(self, parsed):
        """Apply a parsed move, either a Move or a WideMove"""
        apply_parsed_move(self, parsed)

    def apply_algorithm(self, algorithm):
        """Parse a notation string such as "R U R' U'" and apply it"""
        from cube_notation import parse_algorithm
        moves = parse_algorithm(algorithm)
        self.apply_moves(moves)
        return moves

    def copy(self):
        cube = Cube.__new__(Cube)
        cube.size = self.size
        cube.faces = {name: face.copy() for name, face in self.faces.items()}
        return cube

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self.size == other.size and all(
            self.faces[name] == other.faces[name] for name in FaceName.all())

    def __repr__(self):
        return f"Cube(size={self.size}, solved={self.is_solved()})"
