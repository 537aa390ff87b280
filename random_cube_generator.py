#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Random scramble generation for NxN cubes.

The move pool depends on the cube size:
- Face turns (R L U D F B with ', 2) for every size
- Slice turns (M E S with ', 2) only for odd sizes 3 and up

Two rules keep scrambles from wasting moves:
1. Never turn the same layer as the previous move (R R, R R', R R2)
2. If the last two moves were on opposite faces (R L), avoid both faces
   for the next move, unless that leaves nothing to pick from
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from cube_rotation import Move
from cube_state import Cube

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_LENGTH = 20
DEFAULT_CUBE_SIZE = 3

_OPPOSITE_LAYERS = {"R": "L", "L": "R", "U": "D", "D": "U", "F": "B", "B": "F"}


@dataclass(frozen=True)
class ScrambleConfig:
    length: int = DEFAULT_SCRAMBLE_LENGTH
    size: int = DEFAULT_CUBE_SIZE
    seed: Optional[int] = None


@dataclass(frozen=True)
class Scramble:
    """A generated move sequence and the cube state it produces"""
    moves: Tuple[Move, ...]
    cube: Cube = field(compare=False)

    def to_notation(self):
        return " ".join(m.to_notation() for m in self.moves)

    def __len__(self):
        return len(self.moves)


def available_moves(size):
    """
    Move pool for a cube of the given size
    """
    moves = Move.face_turns()
    if size >= 3 and size % 2 == 1:
        moves.extend(Move.slice_turns())
    return moves


def are_opposite(layer_a, layer_b):
    return _OPPOSITE_LAYERS.get(layer_a) == layer_b


def select_next_move(previous, pool, rng):
    """
    Pick the next move at random, skipping the previous move's layer and,
    after two moves on opposite faces, both of those faces
    """
    if not previous:
        return rng.choice(pool)

    last = previous[-1].layer
    candidates = [m for m in pool if m.layer != last]

    if len(previous) >= 2:
        second_last = previous[-2].layer
        if are_opposite(last, second_last):
            filtered = [m for m in candidates if m.layer != second_last]
            if filtered:
                return rng.choice(filtered)

    return rng.choice(candidates)


def generate_scramble(config=None, rng=None, pool=None):
    """
    Generate a scramble according to the config

    Args:
        config: ScrambleConfig (defaults to 20 moves on a 3x3)
        rng: random.Random to draw from; when omitted one is seeded from
             config.seed
        pool: moves to draw from instead of available_moves(size), e.g. the
              move set of a solver that cannot use every face

    Returns:
        Scramble with the moves and the resulting cube
    """
    if config is None:
        config = ScrambleConfig()
    if config.length < 0:
        raise ValueError(f"Scramble length must not be negative (got {config.length})")
    if rng is None:
        rng = random.Random(config.seed)

    cube = Cube(config.size)
    if pool is None:
        pool = available_moves(config.size)
    moves = []

    for _ in range(config.length):
        move = select_next_move(moves, pool, rng)
        cube.apply_move(move)
        moves.append(move)

    logger.debug("Generated %dx%d scramble: %s", config.size, config.size,
                 " ".join(m.to_notation() for m in moves))
    return Scramble(tuple(moves), cube)


def main():
    for size in (2, 3, 4, 5):
        scramble = generate_scramble(ScrambleConfig(length=20, size=size))
        print(f"{size}x{size} scramble:")
        print(scramble.to_notation())
        print()


if __name__ == '__main__':
    main()
