#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solution representation shared by all solvers, plus the solver error types.

A Solution is an ordered list of named steps; each step holds a description
and the moves that accomplish it. Concatenating the steps gives the full
move list that a player replays on the cube.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from cube_state import CubeError


class SolverError(CubeError):
    """A solver could not produce a solution"""


class WrongCubeSizeError(SolverError):
    def __init__(self, size, expected):
        super().__init__(f"Cube must be {expected} for this solver (got {size}x{size})")
        self.size = size
        self.expected = expected


class InvalidCubeError(SolverError):
    def __init__(self, reason="Cube is not in a valid state"):
        super().__init__(reason)
        self.reason = reason


class NoSolutionError(SolverError):
    def __init__(self, reason="Could not find solution within depth limit"):
        super().__init__(reason)
        self.reason = reason


@dataclass
class SolutionStep:
    description: str
    moves: list = field(default_factory=list)
    explanation: Optional[str] = None

    @property
    def move_count(self):
        return len(self.moves)

    def to_notation(self):
        return " ".join(m.to_notation() for m in self.moves)


@dataclass
class Solution:
    steps: List[SolutionStep] = field(default_factory=list)
    time_ms: float = 0.0
    method: Optional[str] = None

    def all_moves(self):
        return [mv for step in self.steps for mv in step.moves]

    @property
    def move_count(self):
        return sum(step.move_count for step in self.steps)

    @property
    def step_count(self):
        return len(self.steps)

    @property
    def is_empty(self):
        return self.move_count == 0

    def to_notation(self):
        return " ".join(m.to_notation() for m in self.all_moves())

    def summary(self):
        method = self.method or "Unknown method"
        return (f"{method}: {self.step_count} step(s), {self.move_count} move(s) "
                f"in {self.time_ms:.0f} ms")
