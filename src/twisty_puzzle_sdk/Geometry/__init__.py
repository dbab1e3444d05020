from .MeshMaker import MeshMaker
from .TileLayout import (
    GAP_SIZE,
    TOTAL_SIDE_LENGTH,
    GridLayout,
    LayerThicknessLayout,
    Tile,
    shell_coordinates,
    shell_size,
)
