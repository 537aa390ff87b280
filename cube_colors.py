#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Color and face identities shared by every other module.

Standard color scheme:
  U: White, D: Yellow, F: Green, B: Blue, L: Orange, R: Red
"""

from enum import Enum, IntEnum


class Color(IntEnum):
    """Sticker color. The integer value is what Face stores in its grid."""
    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    BLUE = 4
    GREEN = 5

    def opposite(self):
        return _OPPOSITE_COLORS[self]

    @property
    def display_name(self):
        """Capitalized name, e.g. "White" """
        return self.name.capitalize()

    @property
    def letter(self):
        return self.name[0]

    @classmethod
    def from_name(cls, name):
        """Look up a color by its display name (case-insensitive)"""
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown color: {name!r}") from None


_OPPOSITE_COLORS = {
    Color.WHITE: Color.YELLOW,
    Color.YELLOW: Color.WHITE,
    Color.RED: Color.ORANGE,
    Color.ORANGE: Color.RED,
    Color.BLUE: Color.GREEN,
    Color.GREEN: Color.BLUE,
}


class FaceName(Enum):
    U = "U"
    D = "D"
    F = "F"
    B = "B"
    L = "L"
    R = "R"

    @classmethod
    def all(cls):
        """All six faces in the order U, D, F, B, L, R"""
        return list(cls)

    def opposite(self):
        return _OPPOSITE_FACES[self]

    @property
    def standard_color(self):
        return _STANDARD_COLORS[self]

    @property
    def full_name(self):
        return _FULL_NAMES[self]


_OPPOSITE_FACES = {
    FaceName.U: FaceName.D,
    FaceName.D: FaceName.U,
    FaceName.F: FaceName.B,
    FaceName.B: FaceName.F,
    FaceName.L: FaceName.R,
    FaceName.R: FaceName.L,
}

_STANDARD_COLORS = {
    FaceName.U: Color.WHITE,
    FaceName.D: Color.YELLOW,
    FaceName.F: Color.GREEN,
    FaceName.B: Color.BLUE,
    FaceName.L: Color.ORANGE,
    FaceName.R: Color.RED,
}

_FULL_NAMES = {
    FaceName.U: "Up",
    FaceName.D: "Down",
    FaceName.F: "Front",
    FaceName.B: "Back",
    FaceName.L: "Left",
    FaceName.R: "Right",
}
