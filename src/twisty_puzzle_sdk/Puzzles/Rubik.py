# Rubik.py – N×N×N cube, one uniform cubie per visible grid cell
import logging
from dataclasses import dataclass, fields, replace
from typing import List, Mapping, Optional, Tuple

from ..Color import BLUE, GRAY, GREEN, ORANGE, RED, WHITE, YELLOW, Color, ColorAtlas
from ..Geometry.MeshMaker import MeshMaker
from ..Geometry.TileLayout import GAP_SIZE, TOTAL_SIDE_LENGTH, GridLayout
from ..PuzzleDataTypes import InvalidColor, Mesh, Placement, check_dimension
from .Puzzle import Puzzle


@dataclass(frozen=True)
class RubikColors:
    """Face colours, in atlas order (+X, -X, +Y, -Y, +Z, -Z)."""
    right: Color = RED
    left: Color = ORANGE
    top: Color = YELLOW
    bottom: Color = WHITE
    front: Color = BLUE
    back: Color = GREEN

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, Color(*getattr(self, f.name)).validate())

    def as_list(self) -> List[Color]:
        return [getattr(self, f.name) for f in fields(self)]

    def with_overrides(self, overrides: Mapping[str, Color]) -> "RubikColors":
        names = {f.name for f in fields(self)}
        unknown = set(overrides) - names
        if unknown:
            raise InvalidColor(f"Unknown face(s) {sorted(unknown)}; expected one of {sorted(names)}")
        return replace(self, **dict(overrides))


class Rubik(Puzzle):
    INTERIOR_COLOR = GRAY

    def __init__(self, dimension: int = 3, colors: Optional[RubikColors] = None,
                 total_side_length: float = TOTAL_SIDE_LENGTH, gap: float = GAP_SIZE):
        self.dimension = check_dimension(dimension)
        self.colors = colors if colors is not None else RubikColors()
        self._layout = GridLayout(self.dimension, total_side_length, gap)
        self._atlas = ColorAtlas(self.colors.as_list(), interior=self.INTERIOR_COLOR)

    @property
    def atlas(self) -> ColorAtlas:
        return self._atlas

    @property
    def layout(self) -> GridLayout:
        return self._layout

    def create_meshes(self) -> List[Tuple[Mesh, Placement]]:
        slot_count = self._atlas.slot_count
        meshes = [
            (MeshMaker.create_box(tile.half_extents, tile.color_map, slot_count),
             Placement.from_translation(tile.translation))
            for tile in self._layout.tiles()
        ]
        logging.debug("rubik %dx%dx%d: %d cubies", self.dimension, self.dimension,
                      self.dimension, len(meshes))
        return meshes

    def __repr__(self) -> str:
        return f"Rubik(dimension={self.dimension})"
