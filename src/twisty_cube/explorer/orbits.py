from __future__ import annotations

from collections.abc import Sequence

from twisty_cube.core.cube import Cube
from twisty_cube.core.moves import Face, Move, Single, Turn


def face_moves(sides: int) -> list[Move]:
    """Every single-layer face move valid on a cube with `sides` sides.

    Ordered by face, then depth, then turn, so indexing into it is stable.
    """
    return [Move.for_face(face, Single(depth), turn) for face in Face for depth in range(sides) for turn in Turn]


def sequence_order(sides: int, moves: Sequence[Move], limit: int = 10_000) -> int:
    """Number of repetitions of `moves` that bring a solved cube back to itself."""
    if not moves:
        return 1
    cube = Cube(sides)
    start = cube.hash()
    for k in range(1, limit + 1):
        cube.apply_all(moves)
        if cube.hash() == start:
            return k
    raise ValueError(f"sequence did not return to the start within {limit} repetitions")
