from __future__ import annotations

import itertools

import pytest

from twisty_cube import Cube, InvalidSides, construct, construct2, construct3
from twisty_cube.core.coords import build_coords, index_to_coord, is_shell
from twisty_cube.core.cubit import Cubit


@pytest.mark.parametrize("sides", [2, 3, 4, 5, 6, 7])
def test_shell_count_and_rule(sides: int):
    cube = construct(sides)
    assert len(cube.cubits) == sides**3 - (sides - 2) ** 3
    coords = cube.coords
    for c in cube.cubits:
        assert is_shell(coords, c.position)
        assert all(v in coords.domain for v in c.position)


@pytest.mark.parametrize("sides", [2, 3, 4, 5, 6])
def test_positions_are_exactly_the_shell(sides: int):
    cube = construct(sides)
    coords = cube.coords
    expected = {p for p in itertools.product(coords.domain, repeat=3) if is_shell(coords, p)}
    positions = [c.position for c in cube.cubits]
    assert len(set(positions)) == len(positions)
    assert set(positions) == expected


@pytest.mark.parametrize("sides", [1, 0, -3])
def test_invalid_sides(sides: int):
    with pytest.raises(InvalidSides) as exc:
        construct(sides)
    assert exc.value.sides == sides


def test_invalid_sides_is_value_error():
    with pytest.raises(ValueError):
        Cube(1)


def test_2x2x2():
    cube = construct2()
    expected = [
        Cubit.standard((x, y, z))
        for z in (-1, 1)
        for x in (-1, 1)
        for y in (-1, 1)
    ]
    assert cube.sides == 2
    assert cube.cubits == expected


def test_3x3x3():
    cube = construct3()
    expected = [
        Cubit.standard((x, y, z))
        for z in (-1, 0, 1)
        for x in (-1, 0, 1)
        for y in (-1, 0, 1)
        if (x, y, z) != (0, 0, 0)
    ]
    assert cube.sides == 3
    assert cube.cubits == expected


def test_4x4x4_uses_odd_coordinates():
    coords = build_coords(4)
    assert coords.offset == 3
    assert coords.step == 2
    assert coords.domain == (-3, -1, 1, 3)
    assert 0 not in {v for c in construct(4).cubits for v in c.position}


def test_5x5x5_coordinates():
    coords = build_coords(5)
    assert coords.offset == 2
    assert coords.step == 1
    assert coords.domain == (-2, -1, 0, 1, 2)


def test_index_to_coord_order():
    coords = build_coords(3)
    assert index_to_coord(coords, 0) == (-1, -1, -1)
    assert index_to_coord(coords, 1) == (-1, 0, -1)
    assert index_to_coord(coords, 3) == (0, -1, -1)
    assert index_to_coord(coords, 9) == (-1, -1, 0)
    assert index_to_coord(coords, 26) == (1, 1, 1)


def test_standard_orientation():
    for c in construct3().cubits:
        assert c.orientation == ((1, 0, 0), (0, 1, 0), (0, 0, 1))


@pytest.mark.parametrize("sides", [2, 3, 4, 5])
def test_construction_is_deterministic(sides: int):
    a = construct(sides)
    b = construct(sides)
    assert a == b
    assert a.hash() == b.hash()
