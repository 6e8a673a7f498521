from __future__ import annotations

from dataclasses import dataclass

from .rotations import Matrix3, Matrix3x4, Vector3, mat_mul_3x4


@dataclass(slots=True)
class Cubit:
    """A single piece of the puzzle.

    `inner` packs the whole rigid body into one 3x4 matrix so one multiply
    moves it:
    - column 0: position (x, y, z)
    - column 1: x-facing sticker vector (blue positive)
    - column 2: y-facing sticker vector (red positive)
    - column 3: z-facing sticker vector (yellow positive)
    """

    inner: Matrix3x4

    @classmethod
    def standard(cls, position: Vector3) -> Cubit:
        x, y, z = position
        return cls(((x, 1, 0, 0), (y, 0, 1, 0), (z, 0, 0, 1)))

    @property
    def position(self) -> Vector3:
        return (self.inner[0][0], self.inner[1][0], self.inner[2][0])

    @property
    def orientation(self) -> tuple[Vector3, Vector3, Vector3]:
        m = self.inner
        return (
            (m[0][1], m[1][1], m[2][1]),
            (m[0][2], m[1][2], m[2][2]),
            (m[0][3], m[1][3], m[2][3]),
        )

    def orientation_matrix(self) -> Matrix3:
        # columns 1..3 as a 3x3 matrix (row-major)
        m = self.inner
        return (
            (m[0][1], m[0][2], m[0][3]),
            (m[1][1], m[1][2], m[1][3]),
            (m[2][1], m[2][2], m[2][3]),
        )

    def rotate(self, matrix: Matrix3) -> None:
        self.inner = mat_mul_3x4(matrix, self.inner)
