#!/usr/bin/env python3
# TileLayout.py – which cubies of an N×N×N grid are visible, where they sit and
# which of their sides are painted
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from ..PuzzleDataTypes import INTERIOR_SLOT, NUMBER_OF_SIDES, Face, check_dimension

TOTAL_SIDE_LENGTH = 1.0
GAP_SIZE = 0.005

Coordinate = Tuple[int, int, int]
ColorMap = Tuple[int, ...]


@dataclass(frozen=True)
class Tile:
    coordinate: Coordinate            # 1-indexed grid cell
    translation: Tuple[float, float, float]
    half_extents: Tuple[float, float, float]
    color_map: ColorMap               # +X, -X, +Y, -Y, +Z, -Z atlas slots


def shell_coordinates(dimension: int) -> Iterator[Coordinate]:
    """Yield every cell on the outer shell of a ``dimension``³ grid exactly once.

    Cells are 1-indexed. The shell is split into three disjoint ranges so the
    interior is never visited:

      1. both X end layers, full Y and Z
      2. both Y end layers, full Z, X strictly inside
      3. both Z end layers, X and Y strictly inside
    """
    d = check_dimension(dimension)
    ends = (1,) if d == 1 else (1, d)
    full = range(1, d + 1)
    inner = range(2, d)

    for x in ends:
        for y in full:
            for z in full:
                yield (x, y, z)

    for y in ends:
        for z in full:
            for x in inner:
                yield (x, y, z)

    for z in ends:
        for x in inner:
            for y in inner:
                yield (x, y, z)


def shell_size(dimension: int) -> int:
    """dimension³ - (dimension-2)³, and 1 for a single cubie."""
    d = check_dimension(dimension)
    if d == 1:
        return 1
    return 6 * d * d - 12 * d + 8


def color_map_for(coordinate: Coordinate, dimension: int) -> ColorMap:
    """Atlas slot per side: a side is painted with its own face colour only
    when the cell lies on that side's outermost layer."""
    color_map = [INTERIOR_SLOT] * NUMBER_OF_SIDES
    for face in Face:
        # layer 1 sits on the + side of the axis, layer `dimension` on the - side
        outer_layer = 1 if face.sign > 0 else dimension
        if coordinate[face.axis] == outer_layer:
            color_map[face] = face.value
    return tuple(color_map)


class GridLayout:
    """Uniform cubies laid out symmetrically about the origin with fixed gaps."""

    def __init__(self, dimension: int,
                 total_side_length: float = TOTAL_SIDE_LENGTH,
                 gap: float = GAP_SIZE):
        self.dimension = check_dimension(dimension)
        if total_side_length <= 0 or gap < 0:
            raise ValueError(f"Invalid layout: side {total_side_length}, gap {gap}")
        self.total_side_length = float(total_side_length)
        self.gap = float(gap)
        if self.tile_side_length <= 0:
            raise ValueError(
                f"Gap {gap} leaves no room for {self.dimension} cubies in side {total_side_length}")

    @property
    def tile_side_length(self) -> float:
        d = self.dimension
        return (self.total_side_length - (d - 1) * self.gap) / d

    def __len__(self) -> int:
        return shell_size(self.dimension)

    def coordinates(self) -> Iterator[Coordinate]:
        return shell_coordinates(self.dimension)

    def translation(self, coordinate: Coordinate) -> np.ndarray:
        # centre layer of an odd grid lands exactly on 0
        pitch = self.tile_side_length + self.gap
        index = np.asarray(coordinate, dtype=np.float64)
        return (self.dimension + 1 - 2.0 * index) * pitch / 2.0

    def color_map(self, coordinate: Coordinate) -> ColorMap:
        return color_map_for(coordinate, self.dimension)

    def tiles(self) -> List[Tile]:
        half = self.tile_side_length / 2.0
        return [
            Tile(coordinate=c,
                 translation=tuple(float(v) for v in self.translation(c)),
                 half_extents=(half, half, half),
                 color_map=self.color_map(c))
            for c in self.coordinates()
        ]


class LayerThicknessLayout:
    """Three-layer cube whose layers have per-axis, per-layer thicknesses.

    ``thickness[axis]`` holds the full thickness of the (+ outer, middle,
    - outer) layer along that axis. Outer faces stay flush with +/- half the
    total side length, gaps sit between neighbouring layers.
    """

    DIMENSION = 3

    def __init__(self, thickness: Sequence[Sequence[float]],
                 total_side_length: float = TOTAL_SIDE_LENGTH,
                 gap: float = GAP_SIZE):
        table = np.asarray(thickness, dtype=np.float64)
        if table.shape != (3, self.DIMENSION) or not np.all(table > 0):
            raise ValueError(f"thickness must be a positive 3x3 table, got {thickness}")
        self.thickness = table
        self.total_side_length = float(total_side_length)
        self.gap = float(gap)

    def __len__(self) -> int:
        return shell_size(self.DIMENSION)

    def coordinates(self) -> Iterator[Coordinate]:
        return shell_coordinates(self.DIMENSION)

    def side_lengths(self, coordinate: Coordinate) -> np.ndarray:
        return np.array([self.thickness[axis][c - 1] for axis, c in enumerate(coordinate)])

    def translation(self, coordinate: Coordinate) -> np.ndarray:
        half_middle = self.thickness[:, 1] / 2.0
        index = np.asarray(coordinate, dtype=np.float64) - 2.0     # -1, 0, +1
        middle_offset = half_middle + self.gap
        side_offset = self.side_lengths(coordinate) / 2.0

        # centre of the middle layer, measured from the origin
        offset = self.total_side_length / 2.0 - (self.thickness[:, 0] + half_middle + self.gap)

        return -(index * (side_offset + middle_offset) - offset)

    def color_map(self, coordinate: Coordinate) -> ColorMap:
        return color_map_for(coordinate, self.DIMENSION)

    def tiles(self) -> List[Tile]:
        return [
            Tile(coordinate=c,
                 translation=tuple(float(v) for v in self.translation(c)),
                 half_extents=tuple(float(v) for v in self.side_lengths(c) / 2.0),
                 color_map=self.color_map(c))
            for c in self.coordinates()
        ]
