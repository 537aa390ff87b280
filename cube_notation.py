#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Move notation parser.

Supported notation (one token):
- Face turns: R L U D F B, with ' (counterclockwise) or 2 (half turn)
- Slices: M E S, with ' or 2
- Rotations: x y z, with ' or 2
- Wide turns: Rw, Rw', Rw2, and with an explicit depth 3Rw, 3Rw' ...
Face letters are case-insensitive ("r" == "R"); rotations are written
lowercase but uppercase X/Y/Z are accepted too.

An algorithm is a whitespace-separated sequence of tokens: "R U R' U'".
"""

import re

from cube_colors import FaceName
from cube_rotation import Direction, Move, WideMove
from cube_state import CubeError

_TOKEN = re.compile(r"^([0-9]*)([A-Za-z])(w?)('|2)?$")

_ROTATION_LETTERS = "xyz"
_BASIC_LETTERS = "RLUDFBMES"


class NotationError(CubeError):
    """A move or algorithm string could not be parsed"""


class InvalidMoveError(NotationError):
    def __init__(self, token):
        super().__init__(f"Invalid move notation: {token}")
        self.token = token


class InvalidDepthError(NotationError):
    def __init__(self, depth):
        super().__init__(f"Invalid depth value: {depth}")
        self.depth = depth


class EmptyInputError(NotationError):
    def __init__(self):
        super().__init__("Empty input string")


def parse_move(text):
    """
    Parse a single move token.

    Returns a Move for face turns, slices and rotations, or a WideMove for
    wide turns ("Rw" is depth 2, "3Rw" depth 3).
    """
    token = text.strip()
    if not token:
        raise EmptyInputError()

    match = _TOKEN.match(token)
    if match is None:
        raise InvalidMoveError(token)
    digits, letter, wide, modifier = match.groups()
    modifier = modifier or ""

    if wide:
        return _parse_wide(token, digits, letter, modifier)

    # A depth prefix only makes sense on a wide turn
    if digits:
        raise InvalidDepthError(digits)

    if letter in _ROTATION_LETTERS:
        return Move(letter + modifier)

    letter = letter.upper()
    if letter in _ROTATION_LETTERS.upper():
        return Move(letter.lower() + modifier)
    if letter not in _BASIC_LETTERS:
        raise InvalidMoveError(token)
    return Move(letter + modifier)


def _parse_wide(token, digits, letter, modifier):
    depth = 2
    if digits:
        depth = int(digits)
        if depth == 0:
            raise InvalidDepthError(digits)

    letter = letter.upper()
    if letter not in "RLUDFB":
        raise InvalidMoveError(token)
    return WideMove(FaceName(letter), Direction(modifier), depth)


def parse_algorithm(text):
    """
    Parse a space-separated algorithm into a list of moves.
    Empty or whitespace-only input gives an empty list.
    """
    return [parse_move(token) for token in text.split()]


def moves_to_notation(moves):
    return " ".join(mv.to_notation() for mv in moves)
