from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from twisty_cube.errors import AxisConversionError

from .rotations import Axis, Matrix3, Turn, rotation_matrix


class Face(Enum):
    """Directional axis: the face a move is measured from."""

    FRONT = (Axis.X, 1)
    BACK = (Axis.X, -1)
    RIGHT = (Axis.Y, 1)
    LEFT = (Axis.Y, -1)
    TOP = (Axis.Z, 1)
    BOTTOM = (Axis.Z, -1)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def sign(self) -> int:
        return self.value[1]

    @classmethod
    def from_axis(cls, axis: Axis) -> Face:
        return cls((axis, 1))

    def to_axis(self) -> Axis:
        if self.sign < 0:
            raise AxisConversionError(self)
        return self.axis


@dataclass(frozen=True, slots=True)
class Single:
    """One layer, `index` slices in from the face (0 = outermost)."""

    index: int


@dataclass(frozen=True, slots=True)
class Multiple:
    """The first `count` layers from the face."""

    count: int


@dataclass(frozen=True, slots=True)
class WholeCube:
    pass


Layer = Union[Single, Multiple, WholeCube]


@dataclass(frozen=True, slots=True)
class Move:
    """An immutable, cube-independent description of one rotation.

    The directional `face` is normalized once on construction: a negative face
    turned clockwise is the same rigid motion as its positive partner turned
    counter-clockwise, so `axis` and `canonical_turn` only ever name one of the
    nine table entries. `face` is kept to resolve which layers are affected.
    """

    face: Face
    layer: Layer
    turn: Turn
    axis: Axis = field(init=False, compare=False)
    canonical_turn: Turn = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.face.sign < 0:
            axis, turn = self.face.axis, self.turn.opposite()
        else:
            axis, turn = self.face.to_axis(), self.turn
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "canonical_turn", turn)

    @classmethod
    def for_face(cls, face: Face, layer: Layer, turn: Turn) -> Move:
        return cls(face, layer, turn)

    @classmethod
    def for_cube(cls, axis: Axis, turn: Turn) -> Move:
        return cls(Face.from_axis(axis), WholeCube(), turn)

    @classmethod
    def top(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.TOP, layer, turn)

    @classmethod
    def bottom(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.BOTTOM, layer, turn)

    @classmethod
    def left(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.LEFT, layer, turn)

    @classmethod
    def right(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.RIGHT, layer, turn)

    @classmethod
    def front(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.FRONT, layer, turn)

    @classmethod
    def back(cls, layer: Layer, turn: Turn) -> Move:
        return cls(Face.BACK, layer, turn)

    def inverse(self) -> Move:
        return Move(self.face, self.layer, self.turn.opposite())

    def rotation_matrix(self) -> Matrix3:
        return rotation_matrix(self.axis, self.canonical_turn)
