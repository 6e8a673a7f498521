from __future__ import annotations

import hashlib
import logging
import struct
from collections.abc import Iterable

from twisty_cube.errors import InvalidMoveLayer

from .coords import Coords, build_coords, depth_range, is_shell, shell_positions
from .cubit import Cubit
from .moves import Move, Multiple, Single, WholeCube
from .rotations import Vector3, det3, is_signed_permutation

logger = logging.getLogger(__name__)


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


class Cube:
    """The outer shell of an NxNxN twisty puzzle.

    Only shell pieces are modelled; the hidden core is not. Pieces are created
    in standard orientation and afterwards only ever move through `rotate`.
    """

    __slots__ = ("sides", "coords", "cubits")

    def __init__(self, sides: int):
        self.coords: Coords = build_coords(sides)
        self.sides: int = sides
        self.cubits: list[Cubit] = [Cubit.standard(v) for v in shell_positions(self.coords)]
        logger.debug("built %dx%dx%d cube with %d cubits", sides, sides, sides, len(self.cubits))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.sides == other.sides and self.cubits == other.cubits

    def __repr__(self) -> str:
        return f"Cube(sides={self.sides}, cubits={len(self.cubits)})"

    def copy(self) -> Cube:
        new = Cube.__new__(Cube)
        new.sides = self.sides
        new.coords = self.coords
        new.cubits = [Cubit(c.inner) for c in self.cubits]
        return new

    def validate(self, move: Move) -> None:
        """Raise InvalidMoveLayer if `move` does not fit this cube."""
        layer = move.layer
        if isinstance(layer, Single):
            if not _is_int(layer.index) or not 0 <= layer.index < self.sides:
                raise InvalidMoveLayer(layer, self.sides)
        elif isinstance(layer, Multiple):
            if not _is_int(layer.count) or not 0 <= layer.count <= self.sides:
                raise InvalidMoveLayer(layer, self.sides)
        elif not isinstance(layer, WholeCube):
            raise InvalidMoveLayer(layer, self.sides)

    def affected_ranges(self, move: Move) -> tuple[tuple[int, int], tuple[int, int], tuple[int, int]]:
        """Inclusive (lo, hi) per axis of the lattice box `move` turns."""
        full = (-self.coords.offset, self.coords.offset)
        ranges = [full, full, full]
        ranges[move.axis.index] = depth_range(self.coords, move.face.sign, move.layer)
        return (ranges[0], ranges[1], ranges[2])

    def rotate(self, move: Move) -> None:
        self.validate(move)
        self._apply(move)

    def apply_all(self, moves: Iterable[Move]) -> None:
        """Apply a sequence of moves; nothing is applied if any move is invalid."""
        moves = list(moves)
        for m in moves:
            self.validate(m)
        for m in moves:
            self._apply(m)

    def _apply(self, move: Move) -> None:
        (x0, x1), (y0, y1), (z0, z1) = self.affected_ranges(move)
        matrix = move.rotation_matrix()
        turned = 0
        for cubit in self.cubits:
            x, y, z = cubit.position
            if x0 <= x <= x1 and y0 <= y <= y1 and z0 <= z <= z1:
                cubit.rotate(matrix)
                turned += 1
        logger.debug("%s: rotated %d cubits", move, turned)

    def cubit_at(self, position: Vector3) -> Cubit | None:
        position = tuple(position)
        for cubit in self.cubits:
            if cubit.position == position:
                return cubit
        return None

    def state(self) -> dict:
        return {
            "sides": self.sides,
            "cubits": [[list(row) for row in c.inner] for c in self.cubits],
        }

    def _canonical_bytes(self) -> bytes:
        # little-endian: uint32 sides, then int32 x 12 per cubit (row-major 3x4)
        flat = [v for c in self.cubits for row in c.inner for v in row]
        return struct.pack("<I" + "i" * len(flat), self.sides, *flat)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        """Check the shell invariants; raises AssertionError. Non-mutating."""
        if len(self.cubits) != self.coords.shell_count:
            raise AssertionError("cubit count mismatch")
        domain = set(self.coords.domain)
        seen: set[Vector3] = set()
        for cubit in self.cubits:
            pos = cubit.position
            if any(c not in domain for c in pos):
                raise AssertionError(f"cubit off the lattice: {pos}")
            if not is_shell(self.coords, pos):
                raise AssertionError(f"cubit inside the shell: {pos}")
            if pos in seen:
                raise AssertionError(f"two cubits at {pos}")
            seen.add(pos)
            m = cubit.orientation_matrix()
            if not is_signed_permutation(m) or det3(m) != 1:
                raise AssertionError(f"cubit at {pos} has an invalid orientation")


def construct(sides: int) -> Cube:
    return Cube(sides)


def construct2() -> Cube:
    return Cube(2)


def construct3() -> Cube:
    return Cube(3)
