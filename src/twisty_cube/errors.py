from __future__ import annotations


class CubeError(Exception):
    """Base class for every error raised by twisty_cube."""


class InvalidSides(CubeError, ValueError):
    def __init__(self, sides: object):
        self.sides = sides
        super().__init__(f"side count must be at least 2 but got {sides!r}")


class InvalidMoveLayer(CubeError, ValueError):
    def __init__(self, layer: object, sides: int):
        self.layer = layer
        self.sides = sides
        super().__init__(f"layer selector {layer!r} is out of range for a cube with {sides} sides")


class AxisConversionError(CubeError, AssertionError):
    """A directional face could not be narrowed to a canonical axis.

    Only positive faces map onto an axis directly; negative faces go through
    move normalization. Seeing this means that normalization was bypassed.
    """

    def __init__(self, face: object):
        self.face = face
        super().__init__(f"{face!r} is not a canonical axis")
