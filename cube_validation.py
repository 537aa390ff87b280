#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cube state validation.

Only color-count conservation is checked: all six colors present, each
exactly size*size times. Edge, corner and permutation parity need piece
identities, which a sticker model does not track; their error classes exist
so callers can already handle them, but validate() never raises them.
"""

from cube_colors import Color
from cube_state import CubeError


class ValidationError(CubeError):
    """The cube state cannot come from a real cube"""


class InvalidColorCountError(ValidationError):
    def __init__(self, color, expected, actual):
        super().__init__(
            f"Invalid color count for {color.display_name}: expected {expected}, found {actual}")
        self.color = color
        self.expected = expected
        self.actual = actual


class MissingColorsError(ValidationError):
    def __init__(self, missing):
        names = ", ".join(c.display_name for c in missing)
        super().__init__(f"Missing colors: {names}")
        self.missing = list(missing)


class EdgeParityError(ValidationError):
    def __init__(self):
        super().__init__("Edge parity error: edges cannot be solved")


class CornerParityError(ValidationError):
    def __init__(self):
        super().__init__("Corner parity error: corners cannot be solved")


class PermutationParityError(ValidationError):
    def __init__(self):
        super().__init__("Permutation parity error: cube has an odd permutation")


def validate(cube):
    """Raise a ValidationError if the cube cannot be a real cube state"""
    validate_color_counts(cube)


def validate_color_counts(cube):
    expected = cube.size * cube.size
    counts = cube.count_colors()

    missing = [color for color in Color if counts[color] == 0]
    if missing:
        raise MissingColorsError(missing)

    for color in Color:
        if counts[color] != expected:
            raise InvalidColorCountError(color, expected, counts[color])


def is_valid(cube):
    try:
        validate(cube)
    except ValidationError:
        return False
    return True
