# Mirror.py – 3×3×3 mirror cube: single metallic colour, layers of unequal thickness
import logging
from enum import Enum
from typing import List, Tuple

from ..Color import GOLD, SILVER, ColorAtlas
from ..Geometry.MeshMaker import MeshMaker
from ..Geometry.TileLayout import GAP_SIZE, TOTAL_SIDE_LENGTH, LayerThicknessLayout
from ..PuzzleDataTypes import NUMBER_OF_SIDES, Mesh, Placement
from .Puzzle import Puzzle

PHYSICAL_SIDE_LENGTH = 0.057
SCALE_FACTOR = TOTAL_SIDE_LENGTH / PHYSICAL_SIDE_LENGTH

GAP_SPACE = 2.0 * GAP_SIZE

# opposite sides add up to 0.038, every middle layer is 0.019
RIGHT_THICKNESS = 0.025 * SCALE_FACTOR
LEFT_THICKNESS = 0.013 * SCALE_FACTOR
TOP_THICKNESS = 0.029 * SCALE_FACTOR
BOTTOM_THICKNESS = 0.009 * SCALE_FACTOR
FRONT_THICKNESS = 0.021 * SCALE_FACTOR
BACK_THICKNESS = 0.017 * SCALE_FACTOR
MIDDLE_THICKNESS = 0.019 * SCALE_FACTOR - GAP_SPACE  # middle layer absorbs both gaps

X_THICKNESS = (RIGHT_THICKNESS, MIDDLE_THICKNESS, LEFT_THICKNESS)
Y_THICKNESS = (TOP_THICKNESS, MIDDLE_THICKNESS, BOTTOM_THICKNESS)
Z_THICKNESS = (FRONT_THICKNESS, MIDDLE_THICKNESS, BACK_THICKNESS)


class MirrorFinish(Enum):
    GOLD = "gold"
    SILVER = "silver"

    @property
    def color(self):
        return GOLD if self is MirrorFinish.GOLD else SILVER


class Mirror(Puzzle):
    DIMENSION = 3
    ROUGHNESS = 0.05
    METALLIC = 0.75

    def __init__(self, finish: MirrorFinish = MirrorFinish.GOLD):
        self.finish = MirrorFinish(finish)
        self._layout = LayerThicknessLayout((X_THICKNESS, Y_THICKNESS, Z_THICKNESS),
                                            TOTAL_SIDE_LENGTH, GAP_SIZE)
        self._atlas = ColorAtlas([self.finish.color])

    @property
    def dimension(self) -> int:
        return self.DIMENSION

    @property
    def atlas(self) -> ColorAtlas:
        return self._atlas

    @property
    def layout(self) -> LayerThicknessLayout:
        return self._layout

    def create_meshes(self) -> List[Tuple[Mesh, Placement]]:
        # every side samples the single metallic texel
        color_map = (0,) * NUMBER_OF_SIDES
        meshes = [
            (MeshMaker.create_box(tile.half_extents, color_map, self._atlas.slot_count),
             Placement.from_translation(tile.translation))
            for tile in self._layout.tiles()
        ]
        logging.debug("mirror cube (%s): %d cubies", self.finish.value, len(meshes))
        return meshes

    def __repr__(self) -> str:
        return f"Mirror(finish={self.finish.value!r})"
