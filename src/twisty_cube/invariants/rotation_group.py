from __future__ import annotations

from dataclasses import dataclass

from twisty_cube.core.rotations import IDENTITY, ROTATION_TABLE, Matrix3, det3, is_signed_permutation, mat_mul


@dataclass(frozen=True, slots=True)
class MoveGroup:
    elements: frozenset[Matrix3]


def build_move_group() -> MoveGroup:
    """Close the nine move matrices under multiplication.

    The closure must be the 24 proper rotations of the cube.
    """
    generators = list(ROTATION_TABLE.values())
    elements: set[Matrix3] = {IDENTITY}
    frontier = [IDENTITY]
    while frontier:
        nxt = []
        for a in frontier:
            for g in generators:
                c = mat_mul(g, a)
                if det3(c) != 1 or not is_signed_permutation(c):
                    raise AssertionError("rotation closure violated")
                if c not in elements:
                    elements.add(c)
                    nxt.append(c)
        frontier = nxt
    if len(elements) != 24:
        raise AssertionError(f"expected 24 cube rotations, got {len(elements)}")
    return MoveGroup(elements=frozenset(elements))


def matrix_order(m: Matrix3) -> int:
    """Smallest k >= 1 with m**k == identity."""
    p = m
    for k in range(1, 25):
        if p == IDENTITY:
            return k
        p = mat_mul(m, p)
    raise AssertionError(f"matrix has no finite order: {m}")
