from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from twisty_cube import Move, Single, Turn, sequence_order  # noqa: E402


def main() -> None:
    commutator = [
        Move.right(Single(0), Turn.CLOCKWISE),
        Move.top(Single(0), Turn.CLOCKWISE),
        Move.right(Single(0), Turn.COUNTER_CLOCKWISE),
        Move.top(Single(0), Turn.COUNTER_CLOCKWISE),
    ]
    for sides in (2, 3, 4):
        print({"sides": sides, "order": sequence_order(sides, commutator)})


if __name__ == "__main__":
    main()
