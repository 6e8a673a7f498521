"""Twisty cube package: NxNxN shell pieces and layer rotations."""

from .core.cube import Cube, construct, construct2, construct3
from .core.cubit import Cubit
from .core.moves import Axis, Face, Layer, Move, Multiple, Single, Turn, WholeCube
from .errors import AxisConversionError, CubeError, InvalidMoveLayer, InvalidSides
from .explorer.orbits import face_moves, sequence_order

__all__ = [
    "Axis",
    "AxisConversionError",
    "Cube",
    "CubeError",
    "Cubit",
    "Face",
    "InvalidMoveLayer",
    "InvalidSides",
    "Layer",
    "Move",
    "Multiple",
    "Single",
    "Turn",
    "WholeCube",
    "construct",
    "construct2",
    "construct3",
    "face_moves",
    "sequence_order",
]
