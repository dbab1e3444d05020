# Pyraminx.py – tetrahedral puzzle rendered as one flat-shaded solid
import logging
from enum import Enum
from typing import List, Tuple

from ..Color import BLUE, GRAY, GREEN, RED, YELLOW, ColorAtlas
from ..Geometry.MeshMaker import MeshMaker
from ..Geometry.TileLayout import TOTAL_SIDE_LENGTH
from ..PuzzleDataTypes import Mesh, Placement, check_dimension
from .Puzzle import Puzzle

NUMBER_OF_SIDES = 4

# atlas slots
GREEN_SLOT, BLUE_SLOT, YELLOW_SLOT, RED_SLOT = range(NUMBER_OF_SIDES)
INTERIOR_SLOT = NUMBER_OF_SIDES

# bottom, front, right, left
TETRAHEDRON_FACE_SLOTS = (YELLOW_SLOT, RED_SLOT, BLUE_SLOT, GREEN_SLOT)
# upper front, upper right, upper left, then the three lower faces
BIPYRAMID_FACE_SLOTS = (RED_SLOT, BLUE_SLOT, GREEN_SLOT, YELLOW_SLOT, YELLOW_SLOT, YELLOW_SLOT)


class PyraminxShape(Enum):
    TETRAHEDRON = "tetrahedron"
    BIPYRAMID = "bipyramid"


class Pyraminx(Puzzle):
    """
    ``dimension`` is validated and kept but does not subdivide the solid yet:
    every dimension renders the same single body.
    """

    def __init__(self, dimension: int = 3, shape: PyraminxShape = PyraminxShape.TETRAHEDRON):
        self.dimension = check_dimension(dimension)
        self.shape = PyraminxShape(shape)
        self._atlas = ColorAtlas(
            [GREEN, BLUE, YELLOW, RED],
            interior=GRAY,
        )

    @property
    def atlas(self) -> ColorAtlas:
        return self._atlas

    @property
    def face_slots(self) -> Tuple[int, ...]:
        if self.shape is PyraminxShape.TETRAHEDRON:
            return TETRAHEDRON_FACE_SLOTS
        return BIPYRAMID_FACE_SLOTS

    def create_meshes(self) -> List[Tuple[Mesh, Placement]]:
        face_colors = [self._atlas.color(slot) for slot in self.face_slots]
        if self.shape is PyraminxShape.TETRAHEDRON:
            mesh = MeshMaker.create_tetrahedron(face_colors, TOTAL_SIDE_LENGTH)
        else:
            mesh = MeshMaker.create_bipyramid(face_colors, TOTAL_SIDE_LENGTH)
        logging.debug("pyraminx (%s): %d faces", self.shape.value, mesh.triangle_count)
        return [(mesh, Placement.identity())]

    def __repr__(self) -> str:
        return f"Pyraminx(dimension={self.dimension}, shape={self.shape.value!r})"
