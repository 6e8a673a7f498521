from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

Vector3 = tuple[int, int, int]
Matrix3 = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]
Matrix3x4 = tuple[tuple[int, int, int, int], tuple[int, int, int, int], tuple[int, int, int, int]]

IDENTITY: Matrix3 = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


class Axis(Enum):
    """Canonical rotation axis."""

    X = "x"
    Y = "y"
    Z = "z"

    @property
    def index(self) -> int:
        return "xyz".index(self.value)


class Turn(Enum):
    """Turn amount, as seen from outside the face being turned."""

    CLOCKWISE = "cw"
    COUNTER_CLOCKWISE = "ccw"
    TWICE = "2"

    def opposite(self) -> Turn:
        if self is Turn.CLOCKWISE:
            return Turn.COUNTER_CLOCKWISE
        if self is Turn.COUNTER_CLOCKWISE:
            return Turn.CLOCKWISE
        return Turn.TWICE


def det3(m: Matrix3) -> int:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def mat_mul(a: Matrix3, b: Matrix3) -> Matrix3:
    # integer 3x3 multiply
    out = []
    for r in range(3):
        row = []
        for c in range(3):
            s = 0
            for k in range(3):
                s += a[r][k] * b[k][c]
            row.append(s)
        out.append(tuple(row))
    return (out[0], out[1], out[2])  # type: ignore[return-value]


def mat_mul_3x4(m: Matrix3, b: Matrix3x4) -> Matrix3x4:
    """Left-multiply a 3x4 block (position column + three orientation columns)."""
    out = []
    for r in range(3):
        m0, m1, m2 = m[r]
        out.append(tuple(m0 * b[0][c] + m1 * b[1][c] + m2 * b[2][c] for c in range(4)))
    return (out[0], out[1], out[2])  # type: ignore[return-value]


def transpose(m: Matrix3) -> Matrix3:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def is_signed_permutation(m: Matrix3) -> bool:
    """Exactly one +/-1 per row and per column, zeros elsewhere."""
    for row in m:
        if sorted(abs(v) for v in row) != [0, 0, 1]:
            return False
    for col in transpose(m):
        if sorted(abs(v) for v in col) != [0, 0, 1]:
            return False
    return True


# Clockwise is as seen from outside the positive face of each axis
# (right-handed frame): looking down +Z, +X turns onto -Y.
ROT_MAT_Z_CW: Matrix3 = ((0, 1, 0), (-1, 0, 0), (0, 0, 1))
ROT_MAT_Z_CCW: Matrix3 = ((0, -1, 0), (1, 0, 0), (0, 0, 1))
ROT_MAT_Z_2: Matrix3 = ((-1, 0, 0), (0, -1, 0), (0, 0, 1))

ROT_MAT_Y_CW: Matrix3 = ((0, 0, -1), (0, 1, 0), (1, 0, 0))
ROT_MAT_Y_CCW: Matrix3 = ((0, 0, 1), (0, 1, 0), (-1, 0, 0))
ROT_MAT_Y_2: Matrix3 = ((-1, 0, 0), (0, 1, 0), (0, 0, -1))

ROT_MAT_X_CW: Matrix3 = ((1, 0, 0), (0, 0, 1), (0, -1, 0))
ROT_MAT_X_CCW: Matrix3 = ((1, 0, 0), (0, 0, -1), (0, 1, 0))
ROT_MAT_X_2: Matrix3 = ((1, 0, 0), (0, -1, 0), (0, 0, -1))


ROTATION_TABLE: Mapping[tuple[Axis, Turn], Matrix3] = MappingProxyType(
    {
        (Axis.X, Turn.CLOCKWISE): ROT_MAT_X_CW,
        (Axis.X, Turn.COUNTER_CLOCKWISE): ROT_MAT_X_CCW,
        (Axis.X, Turn.TWICE): ROT_MAT_X_2,
        (Axis.Y, Turn.CLOCKWISE): ROT_MAT_Y_CW,
        (Axis.Y, Turn.COUNTER_CLOCKWISE): ROT_MAT_Y_CCW,
        (Axis.Y, Turn.TWICE): ROT_MAT_Y_2,
        (Axis.Z, Turn.CLOCKWISE): ROT_MAT_Z_CW,
        (Axis.Z, Turn.COUNTER_CLOCKWISE): ROT_MAT_Z_CCW,
        (Axis.Z, Turn.TWICE): ROT_MAT_Z_2,
    }
)

if len(ROTATION_TABLE) != 9:
    raise AssertionError("rotation table must have exactly 9 entries")
for _m in ROTATION_TABLE.values():
    if det3(_m) != 1 or not is_signed_permutation(_m):
        raise AssertionError(f"not a proper cube rotation: {_m}")
del _m


def rotation_matrix(axis: Axis, turn: Turn) -> Matrix3:
    return ROTATION_TABLE[(axis, turn)]
