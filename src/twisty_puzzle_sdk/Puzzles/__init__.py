"""
Puzzle variants.

The set is closed: ``create_puzzle`` dispatches over ``PuzzleKind`` and every
variant implements the three ``Puzzle`` operations.
"""

from enum import Enum
from typing import Mapping, Optional

from ..Color import Color
from .Mirror import Mirror, MirrorFinish
from .Puzzle import Puzzle
from .Pyraminx import Pyraminx, PyraminxShape
from .Rubik import Rubik, RubikColors


class PuzzleKind(Enum):
    RUBIK = "rubik"
    MIRROR = "mirror"
    PYRAMINX = "pyraminx"


def create_puzzle(kind, dimension: int = 3, *,
                  colors: Optional[Mapping[str, Color]] = None,
                  finish=MirrorFinish.GOLD,
                  shape=PyraminxShape.TETRAHEDRON) -> Puzzle:
    """Build a puzzle of ``kind``. ``dimension`` is ignored by the mirror cube
    (always 3); ``colors`` overrides Rubik face colours by face name."""
    kind = PuzzleKind(kind)
    if kind is PuzzleKind.RUBIK:
        return Rubik(dimension, RubikColors().with_overrides(colors or {}))
    if kind is PuzzleKind.MIRROR:
        return Mirror(finish)
    if kind is PuzzleKind.PYRAMINX:
        return Pyraminx(dimension, shape)
    raise AssertionError(f"unhandled puzzle kind {kind}")


__all__ = [
    "Mirror",
    "MirrorFinish",
    "Puzzle",
    "PuzzleKind",
    "Pyraminx",
    "PyraminxShape",
    "Rubik",
    "RubikColors",
    "create_puzzle",
]
