# src/twisty_puzzle_sdk/__init__.py
"""
Twisty Puzzle SDK – procedural geometry for cube, mirror cube and pyraminx
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("twisty-puzzle-sdk")  # resolve from installed wheel
except PackageNotFoundError:                    # editable/dev install fallback
    __version__ = "0.0.0+editable"

from .PuzzleDataTypes import (
    Face,
    INTERIOR_SLOT,
    InvalidColor,
    InvalidDimension,
    MaterialDescriptor,
    Mesh,
    Placement,
    PuzzleError,
    RawImage,
)
from .Color import ColorAtlas
from .Puzzles import (
    Mirror,
    MirrorFinish,
    Puzzle,
    PuzzleKind,
    Pyraminx,
    PyraminxShape,
    Rubik,
    RubikColors,
    create_puzzle,
)
