#!/usr/bin/env python3
# MeshMaker.py – NumPy generators for the solids puzzles are built from
import math
from typing import Sequence, Tuple

import numpy as np

from ..PuzzleDataTypes import Face, Mesh, NUMBER_OF_SIDES


class MeshMaker:
    """Factory class bundling the box and tetrahedral solid generators."""

    # ------------------------------------------------------------------------- utility
    _VERTICES_PER_BOX_SIDE = 4
    _VERTICES_PER_TRIANGLE = 3

    # per-side triangles for the 4-vertex block of a box side; the vertex order
    # inside a block is mirrored between the + and - side of an axis
    _POSITIVE_SIDE_TRIANGLES = ((0, 2, 1), (1, 2, 3))
    _NEGATIVE_SIDE_TRIANGLES = ((0, 1, 2), (2, 1, 3))

    @staticmethod
    def _normalize(v: np.ndarray) -> np.ndarray:
        n = np.linalg.norm(v)
        return v / n if n > 0 else v

    @staticmethod
    def _rotate_right(values: Sequence[float], k: int) -> list:
        """``[a, b, c]`` rotated so ``a`` lands on index ``k``."""
        k %= len(values)
        return list(values[-k:]) + list(values[:-k]) if k else list(values)

    # ------------------------------------------------------------------------- box
    @staticmethod
    def create_box(half_extents: Sequence[float],
                   color_map: Sequence[int],
                   slot_count: int) -> Mesh:
        """Closed box centred at the origin, flat-coloured per side.

        Parameters
        ----------
        half_extents : (hx, hy, hz)
            Positive half sizes along each axis.
        color_map : six atlas slots
            Ordered +X, -X, +Y, -Y, +Z, -Z.
        slot_count : int
            Width of the atlas the slots index into.

        Returns
        -------
        Mesh
            24 vertices (4 per side, unshared) and 12 triangles.
        """
        half = np.asarray(half_extents, dtype=np.float32)
        if half.shape != (3,) or not np.all(half > 0):
            raise ValueError(f"half_extents must be three positive values, got {half_extents}")
        if len(color_map) != NUMBER_OF_SIDES:
            raise ValueError(f"color_map needs {NUMBER_OF_SIDES} slots, got {len(color_map)}")
        if slot_count < 1 or any(not 0 <= s < slot_count for s in color_map):
            raise ValueError(f"color_map {tuple(color_map)} does not fit an atlas of {slot_count}")

        per_side = MeshMaker._VERTICES_PER_BOX_SIDE
        positions, normals, uvs, indices = [], [], [], []

        color_size = 1.0 / slot_count
        offset = color_size / 2.0

        for face in Face:
            ext = MeshMaker._rotate_right(half, -face.axis)   # (h[axis], h[axis+1], h[axis+2])
            a = face.sign * ext[0]
            base = len(positions)
            for b in (ext[1], -ext[1]):
                for c in (ext[2], -ext[2]):
                    positions.append(MeshMaker._rotate_right([a, b, c], face.axis))

            normals.extend([face.normal] * per_side)

            slot = color_map[face]
            uvs.extend([[slot * color_size + offset, offset]] * per_side)

            tris = MeshMaker._POSITIVE_SIDE_TRIANGLES if face.sign > 0 else MeshMaker._NEGATIVE_SIDE_TRIANGLES
            indices.extend([base + i for i in tri] for tri in tris)

        return Mesh(positions=np.asarray(positions, np.float32),
                    normals=np.asarray(normals, np.float32),
                    indices=np.asarray(indices, np.uint32),
                    uvs=np.asarray(uvs, np.float32))

    # ------------------------------------------------------------------------- tetrahedral solids
    @staticmethod
    def tetrahedron_vertices(side: float = 1.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, float]:
        """Base corners (back, left, right), the apex height above the base and
        the base height, for a regular tetrahedron standing on the XZ plane.

        face height = side/2 * sqrt(3), body height = side/3 * sqrt(6).
        The base triangle is centred on the Y axis; ``back`` points to -Z.
        """
        half_side = side / 2.0
        face_height = half_side * math.sqrt(3.0)
        third_face_height = face_height / 3.0
        height = (side / 3.0) * math.sqrt(6.0)

        back = np.array([0.0, 0.0, -third_face_height * 2.0])
        left = np.array([-half_side, 0.0, third_face_height])
        right = np.array([half_side, 0.0, third_face_height])
        return back, left, right, np.array([0.0, height, 0.0]), height

    @staticmethod
    def _flat_polyhedron(faces: Sequence[Tuple[np.ndarray, np.ndarray, np.ndarray]],
                         face_colors: Sequence[Sequence[float]]) -> Mesh:
        """Triangle soup of flat faces, each anchored at its first vertex.

        Faces are listed counter-clockwise seen from outside, so the cross
        product of the two edges leaving the anchor is the outward normal.
        """
        per_face = MeshMaker._VERTICES_PER_TRIANGLE
        positions, normals, colors = [], [], []
        for (anchor, b, c), rgba in zip(faces, face_colors):
            normal = MeshMaker._normalize(np.cross(b - anchor, c - anchor))
            positions.extend([anchor, b, c])
            normals.extend([normal] * per_face)
            colors.extend([list(rgba)] * per_face)

        indices = np.arange(len(positions), dtype=np.uint32).reshape(-1, 3)
        return Mesh(positions=np.asarray(positions, np.float32),
                    normals=np.asarray(normals, np.float32),
                    indices=indices,
                    colors=np.asarray(colors, np.float32))

    @staticmethod
    def create_tetrahedron(face_colors: Sequence[Sequence[float]], side: float = 1.0) -> Mesh:
        """Regular tetrahedron centred vertically on the origin (4 faces, 12 vertices).

        face_colors : RGBA per face, ordered bottom, front, right, left.
        """
        if len(face_colors) != 4:
            raise ValueError(f"A tetrahedron has 4 faces, got {len(face_colors)} colours")
        back, left, right, apex, height = MeshMaker.tetrahedron_vertices(side)
        shift = np.array([0.0, -height / 2.0, 0.0])
        back, left, right, top = back + shift, left + shift, right + shift, apex + shift

        faces = [
            (back, right, left),  # bottom
            (top, left, right),   # front
            (top, right, back),   # right
            (top, back, left),    # left
        ]
        return MeshMaker._flat_polyhedron(faces, face_colors)

    @staticmethod
    def create_bipyramid(face_colors: Sequence[Sequence[float]], side: float = 1.0) -> Mesh:
        """Two regular tetrahedra glued on a shared base lying in the XZ plane
        (6 faces, 18 vertices), apexes at +/- body height.

        face_colors : RGBA per face, ordered upper front, upper right, upper left,
        lower front, lower right, lower left.
        """
        if len(face_colors) != 6:
            raise ValueError(f"A triangular bipyramid has 6 faces, got {len(face_colors)} colours")
        back, left, right, top, _ = MeshMaker.tetrahedron_vertices(side)
        bottom = -top

        faces = [
            (top, left, right),
            (top, right, back),
            (top, back, left),
            (bottom, right, left),
            (bottom, back, right),
            (bottom, left, back),
        ]
        return MeshMaker._flat_polyhedron(faces, face_colors)
