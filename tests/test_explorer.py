from __future__ import annotations

import pytest

from twisty_cube import Axis, Face, Move, Single, Turn, construct, face_moves, sequence_order


@pytest.mark.parametrize("sides", [2, 3, 4])
def test_face_moves(sides: int):
    moves = face_moves(sides)
    assert len(moves) == 6 * sides * 3
    assert len(set(moves)) == len(moves)
    assert moves[0] == Move.for_face(Face.FRONT, Single(0), Turn.CLOCKWISE)
    assert moves == face_moves(sides)
    cube = construct(sides)
    for m in moves:
        cube.rotate(m)
    cube.audit()


@pytest.mark.parametrize("sides", [2, 3, 4])
def test_sequence_order(sides: int):
    assert sequence_order(sides, []) == 1
    assert sequence_order(sides, [Move.top(Single(0), Turn.CLOCKWISE)]) == 4
    assert sequence_order(sides, [Move.front(Single(0), Turn.TWICE)]) == 2
    assert sequence_order(sides, [Move.for_cube(Axis.Y, Turn.COUNTER_CLOCKWISE)]) == 4
    assert (
        sequence_order(
            sides,
            [Move.left(Single(0), Turn.CLOCKWISE), Move.left(Single(0), Turn.COUNTER_CLOCKWISE)],
        )
        == 1
    )


def test_sequence_order_limit():
    with pytest.raises(ValueError):
        sequence_order(3, [Move.top(Single(0), Turn.CLOCKWISE)], limit=3)
