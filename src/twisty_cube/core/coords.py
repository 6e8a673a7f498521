from __future__ import annotations

from dataclasses import dataclass

from twisty_cube.errors import InvalidSides

from .moves import Layer, Multiple, Single, WholeCube
from .rotations import Vector3


@dataclass(frozen=True, slots=True)
class Coords:
    """Per-axis lattice for a cube with `sides` pieces along each edge.

    Even cubes use odd coordinates with step 2 (no zero plane), odd cubes use
    consecutive integers centred on 0.
    """

    sides: int
    offset: int
    step: int
    domain: tuple[int, ...]

    @property
    def full(self) -> int:
        return self.sides**3

    @property
    def shell_count(self) -> int:
        return self.sides**3 - (self.sides - 2) ** 3

    @property
    def even(self) -> bool:
        return self.sides % 2 == 0


def build_coords(sides: int) -> Coords:
    if isinstance(sides, bool) or not isinstance(sides, int) or sides < 2:
        raise InvalidSides(sides)
    if sides % 2 == 0:
        offset, step = sides - 1, 2
    else:
        offset, step = sides // 2, 1
    domain = tuple(range(-offset, offset + 1, step))
    if len(domain) != sides:
        raise AssertionError("coordinate domain size mismatch")
    return Coords(sides=sides, offset=offset, step=step, domain=domain)


def index_to_coord(coords: Coords, idx: int) -> Vector3:
    s = coords.sides
    i, j, k = (idx // s) % s, idx % s, (idx // (s * s)) % s
    return (
        i * coords.step - coords.offset,
        j * coords.step - coords.offset,
        k * coords.step - coords.offset,
    )


def is_shell(coords: Coords, v: Vector3) -> bool:
    return any(abs(c) == coords.offset for c in v)


def shell_positions(coords: Coords) -> list[Vector3]:
    """Shell points in index order 0..sides**3 (y fastest, then x, then z)."""
    out = [v for v in (index_to_coord(coords, i) for i in range(coords.full)) if is_shell(coords, v)]
    if len(out) != coords.shell_count:
        raise AssertionError("shell enumeration size mismatch")
    return out


def depth_range(coords: Coords, sign: int, layer: Layer) -> tuple[int, int]:
    """Inclusive (lo, hi) coordinate range selected by `layer` from a face.

    `sign` is +1 when measuring inward from the positive face, -1 from the
    negative one. The range is empty (lo > hi) only for Multiple(0).
    """
    offset, step = coords.offset, coords.step
    if isinstance(layer, WholeCube):
        return (-offset, offset)
    if isinstance(layer, Single):
        v = sign * (offset - layer.index * step)
        return (v, v)
    if isinstance(layer, Multiple):
        inner = offset - (layer.count - 1) * step
        if sign > 0:
            return (inner, offset)
        return (-offset, -inner)
    raise TypeError(f"unknown layer selector: {layer!r}")
