from __future__ import annotations

import random

import pytest

from twisty_cube import construct
from twisty_cube.explorer import face_moves


@pytest.mark.parametrize("sides", [2, 3, 4, 5])
def test_audit_non_mutating(sides: int):
    cube = construct(sides)
    rng = random.Random(42)
    for _ in range(20):
        cube.rotate(rng.choice(face_moves(sides)))
    h0 = cube.hash()
    cube.audit()
    assert cube.hash() == h0


@pytest.mark.parametrize("sides", [3, 5])
def test_audit_detects_interior_cubit(sides: int):
    cube = construct(sides)
    cube.cubits[0].inner = ((0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))
    with pytest.raises(AssertionError):
        cube.audit()


@pytest.mark.parametrize("sides", [2, 3])
def test_audit_detects_collision(sides: int):
    cube = construct(sides)
    cube.cubits[0].inner = cube.cubits[1].inner
    with pytest.raises(AssertionError):
        cube.audit()


def test_audit_detects_off_lattice_position():
    cube = construct(4)
    x, y, z = cube.cubits[0].position
    cube.cubits[0].inner = ((0, 1, 0, 0), (y, 0, 1, 0), (z, 0, 0, 1))
    with pytest.raises(AssertionError):
        cube.audit()


def test_audit_detects_reflected_orientation():
    cube = construct(3)
    x, y, z = cube.cubits[0].position
    cube.cubits[0].inner = ((x, -1, 0, 0), (y, 0, 1, 0), (z, 0, 0, 1))
    with pytest.raises(AssertionError):
        cube.audit()


def test_state_snapshot():
    cube = construct(2)
    st = cube.state()
    assert st["sides"] == 2
    assert len(st["cubits"]) == 8
    assert st["cubits"][0] == [[-1, 1, 0, 0], [-1, 0, 1, 0], [-1, 0, 0, 1]]
