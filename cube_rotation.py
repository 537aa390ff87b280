#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Move engine for NxN cubes (2x2 up to 20x20).

This module implements:
1. Move / WideMove / Direction, the move vocabulary with inverses and notation
2. Grid rotation helpers used by Face
3. Layer turns: a face turn rotates the face grid and cycles the four adjacent
   strips (rows or columns) of the neighbouring faces. The strip tables below
   are parameterized by the layer offset, so outer turns, wide turns, slices
   and whole-cube rotations all go through turn_layer().

Every face grid is stored as seen from outside the cube:
  U seen from above with B at the top edge, D seen from below with F at the
  top edge, F/R/B/L seen with U at the top edge.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from cube_colors import FaceName


def rotate_face(grid):
    """Rotate an NxN grid clockwise: (r, c) -> (c, n-1-r)"""
    return np.rot90(grid, k=-1).copy()


def rotate_face_ccw(grid):
    """Rotate an NxN grid counterclockwise: (r, c) -> (n-1-c, r)"""
    return np.rot90(grid, k=1).copy()


def rotate_face_180(grid):
    """Rotate 180 degrees"""
    return np.rot90(grid, k=2).copy()


class Direction(Enum):
    CLOCKWISE = ""
    COUNTER_CLOCKWISE = "'"
    DOUBLE = "2"

    def inverse(self):
        if self is Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE
        if self is Direction.COUNTER_CLOCKWISE:
            return Direction.CLOCKWISE
        return Direction.DOUBLE


class Move(Enum):
    """
    Quarter and half turns of the six faces, the three middle slices and the
    three whole-cube rotation axes. The value is the standard notation.
    """
    R = "R"
    R_PRIME = "R'"
    R2 = "R2"
    L = "L"
    L_PRIME = "L'"
    L2 = "L2"
    U = "U"
    U_PRIME = "U'"
    U2 = "U2"
    D = "D"
    D_PRIME = "D'"
    D2 = "D2"
    F = "F"
    F_PRIME = "F'"
    F2 = "F2"
    B = "B"
    B_PRIME = "B'"
    B2 = "B2"
    # Middle slices, odd sizes only (M like L, E like D, S like F)
    M = "M"
    M_PRIME = "M'"
    M2 = "M2"
    E = "E"
    E_PRIME = "E'"
    E2 = "E2"
    S = "S"
    S_PRIME = "S'"
    S2 = "S2"
    # Whole-cube rotations (x like R, y like U, z like F)
    X = "x"
    X_PRIME = "x'"
    X2 = "x2"
    Y = "y"
    Y_PRIME = "y'"
    Y2 = "y2"
    Z = "z"
    Z_PRIME = "z'"
    Z2 = "z2"

    @property
    def layer(self):
        """Family letter: R L U D F B, M E S or x y z"""
        return self.value[0]

    @property
    def direction(self):
        return Direction(self.value[1:])

    @property
    def quarter_turns(self):
        """Number of clockwise quarter turns: 1, 2 or 3"""
        return _QUARTER_TURNS[self.direction]

    @property
    def face(self):
        """The FaceName for outer face turns, None for slices and rotations"""
        if self.is_slice or self.is_rotation:
            return None
        return FaceName(self.layer)

    @property
    def is_slice(self):
        return self.layer in "MES"

    @property
    def is_rotation(self):
        return self.layer in "xyz"

    def inverse(self):
        return _INVERSE_MOVES[self]

    def to_notation(self):
        return self.value

    @classmethod
    def face_turns(cls):
        """The 18 outer face turns"""
        return [m for m in cls if m.face is not None]

    @classmethod
    def slice_turns(cls):
        return [m for m in cls if m.is_slice]

    @classmethod
    def rotations(cls):
        return [m for m in cls if m.is_rotation]


_QUARTER_TURNS = {
    Direction.CLOCKWISE: 1,
    Direction.DOUBLE: 2,
    Direction.COUNTER_CLOCKWISE: 3,
}

_INVERSE_MOVES = {m: Move(m.layer + m.direction.inverse().value) for m in Move}


@dataclass(frozen=True)
class WideMove:
    """
    Turn of the outer face together with depth-1 inner layers.
    Rw is depth 2; 3Rw turns three layers.
    """
    face: FaceName
    direction: Direction = Direction.CLOCKWISE
    depth: int = 2

    def __post_init__(self):
        if not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"Wide move depth must be at least 1 (got {self.depth})")

    def inverse(self):
        return WideMove(self.face, self.direction.inverse(), self.depth)

    def to_notation(self):
        prefix = "" if self.depth == 2 else str(self.depth)
        return f"{prefix}{self.face.value}w{self.direction.value}"


# Adjacent strips for a turn of each face at layer offset k (0 = outer layer),
# listed in the order stickers travel on a clockwise turn. Each entry is
# (face, "row" | "col", index, reversed).
_TURN_CYCLES = {
    FaceName.R: lambda n, k: (
        (FaceName.F, "col", n - 1 - k, False),
        (FaceName.U, "col", n - 1 - k, False),
        (FaceName.B, "col", k, True),
        (FaceName.D, "col", n - 1 - k, False),
    ),
    FaceName.L: lambda n, k: (
        (FaceName.U, "col", k, False),
        (FaceName.F, "col", k, False),
        (FaceName.D, "col", k, False),
        (FaceName.B, "col", n - 1 - k, True),
    ),
    FaceName.U: lambda n, k: (
        (FaceName.F, "row", k, False),
        (FaceName.L, "row", k, False),
        (FaceName.B, "row", k, False),
        (FaceName.R, "row", k, False),
    ),
    FaceName.D: lambda n, k: (
        (FaceName.F, "row", n - 1 - k, False),
        (FaceName.R, "row", n - 1 - k, False),
        (FaceName.B, "row", n - 1 - k, False),
        (FaceName.L, "row", n - 1 - k, False),
    ),
    FaceName.F: lambda n, k: (
        (FaceName.U, "row", n - 1 - k, False),
        (FaceName.R, "col", k, False),
        (FaceName.D, "row", k, True),
        (FaceName.L, "col", n - 1 - k, True),
    ),
    FaceName.B: lambda n, k: (
        (FaceName.U, "row", k, False),
        (FaceName.L, "col", k, True),
        (FaceName.D, "row", n - 1 - k, True),
        (FaceName.R, "col", n - 1 - k, False),
    ),
}

# Which face's cycle a slice or rotation reuses
_LAYER_FACES = {
    "R": FaceName.R, "L": FaceName.L, "U": FaceName.U,
    "D": FaceName.D, "F": FaceName.F, "B": FaceName.B,
    "M": FaceName.L, "E": FaceName.D, "S": FaceName.F,
    "x": FaceName.R, "y": FaceName.U, "z": FaceName.F,
}


def _read_strip(cube, face, axis, index, reverse):
    grid = cube.face(face).grid
    strip = grid[index, :] if axis == "row" else grid[:, index]
    strip = strip.copy()
    return strip[::-1] if reverse else strip


def _write_strip(cube, face, axis, index, reverse, values):
    grid = cube.face(face).grid
    if reverse:
        values = values[::-1]
    if axis == "row":
        grid[index, :] = values
    else:
        grid[:, index] = values


def turn_layer(cube, face, layer=0, clockwise=True):
    """
    Turn a single layer parallel to `face`, `layer` steps in from it.

    Layer 0 also rotates the face itself; layer size-1 rotates the opposite
    face the other way (seen from that face).
    """
    n = cube.size
    strips = _TURN_CYCLES[face](n, layer)

    if layer == 0:
        cube.face(face).rotate(clockwise)
    elif layer == n - 1:
        cube.face(face.opposite()).rotate(not clockwise)

    values = [_read_strip(cube, *strip) for strip in strips]
    for i in range(4):
        if clockwise:
            _write_strip(cube, *strips[(i + 1) % 4], values[i])
        else:
            _write_strip(cube, *strips[i], values[(i + 1) % 4])


def apply_move(cube, move):
    """Apply a basic move, slice or whole-cube rotation"""
    n = cube.size
    if move.is_slice:
        if n % 2 == 0:
            raise ValueError(
                f"Slice move {move.value} requires an odd-sized cube (got {n}x{n})")
        layers = [n // 2]
    elif move.is_rotation:
        layers = range(n)
    else:
        layers = [0]

    face = _LAYER_FACES[move.layer]
    _turn_layers(cube, face, layers, move.direction)


def apply_wide_move(cube, wide):
    """Apply a wide move: the outer face plus depth-1 inner layers"""
    n = cube.size
    if n < 3:
        raise ValueError(f"Wide moves require a cube of size 3 or larger (got {n}x{n})")
    max_depth = (n + 1) // 2
    if not 1 <= wide.depth <= max_depth:
        raise ValueError(
            f"Wide move depth {wide.depth} out of range 1..{max_depth} for {n}x{n}")
    _turn_layers(cube, wide.face, range(wide.depth), wide.direction)


def _turn_layers(cube, face, layers, direction):
    # Double turns are two clockwise passes
    passes = 2 if direction is Direction.DOUBLE else 1
    clockwise = direction is not Direction.COUNTER_CLOCKWISE
    for _ in range(passes):
        for layer in layers:
            turn_layer(cube, face, layer, clockwise)


def apply(cube, parsed):
    """Apply either a Move or a WideMove"""
    if isinstance(parsed, WideMove):
        apply_wide_move(cube, parsed)
    else:
        apply_move(cube, parsed)


def apply_moves(cube, moves):
    for mv in moves:
        apply(cube, mv)


def invert_moves(moves):
    """Inverse of a move sequence: reversed order, each move inverted"""
    return [mv.inverse() for mv in reversed(list(moves))]
