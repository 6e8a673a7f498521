"""twisty_cube.explorer"""

from .orbits import face_moves, sequence_order

__all__ = [
    "face_moves",
    "sequence_order",
]
