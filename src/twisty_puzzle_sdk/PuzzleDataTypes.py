# PuzzleDataTypes.py

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Tuple

import numpy as np


# === Errors ===
class PuzzleError(Exception):
    """Base class for every error raised by the puzzle generators."""


class InvalidDimension(PuzzleError, ValueError):
    def __init__(self, dimension):
        super().__init__(f"Puzzle dimension must be an integer >= 1, got {dimension!r}")
        self.dimension = dimension


class InvalidColor(PuzzleError, ValueError):
    pass


def check_dimension(dimension) -> int:
    # bool is an int subclass but never a sensible size
    if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)) or dimension < 1:
        raise InvalidDimension(dimension)
    return int(dimension)


# === Enums ===
class Face(IntEnum):
    RIGHT  = 0  # +X
    LEFT   = 1  # -X
    TOP    = 2  # +Y
    BOTTOM = 3  # -Y
    FRONT  = 4  # +Z
    BACK   = 5  # -Z

    @property
    def axis(self) -> int:
        return self.value // 2

    @property
    def sign(self) -> float:
        return 1.0 if self.value % 2 == 0 else -1.0

    @property
    def normal(self) -> Tuple[float, float, float]:
        n = [0.0, 0.0, 0.0]
        n[self.axis] = self.sign
        return tuple(n)


NUMBER_OF_SIDES = len(Face)

# atlas slot of the unpainted colour; always appended after the six face colours
INTERIOR_SLOT = NUMBER_OF_SIDES


class TextureFormat(IntEnum):
    RGBA8_UNORM_SRGB = 0x8C43  # GL_SRGB8_ALPHA8


# === Structures ===
@dataclass(frozen=True)
class RawImage:
    width: int
    height: int
    data: bytes
    format: TextureFormat = TextureFormat.RGBA8_UNORM_SRGB

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image must be at least 1x1, got {self.width}x{self.height}")
        if len(self.data) != 4 * self.width * self.height:
            raise ValueError(
                f"RGBA8 image {self.width}x{self.height} needs {4 * self.width * self.height} "
                f"bytes, got {len(self.data)}")

    def pixels(self) -> np.ndarray:
        """(height, width, 4) uint8 view of the image."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    def to_pil(self):
        from PIL import Image
        return Image.frombytes("RGBA", (self.width, self.height), self.data)


@dataclass(frozen=True)
class MaterialDescriptor:
    base_color_texture: Any
    perceptual_roughness: float
    metallic: float = 0.0
    base_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    unlit: bool = False


@dataclass(frozen=True)
class Placement:
    """Rigid transform applied to a mesh: rotation (quaternion x, y, z, w) then translation."""
    translation: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    @classmethod
    def identity(cls) -> "Placement":
        return cls()

    @classmethod
    def from_translation(cls, translation) -> "Placement":
        x, y, z = (float(v) for v in translation)
        return cls(translation=(x, y, z))

    @property
    def is_identity(self) -> bool:
        return self.translation == (0.0, 0.0, 0.0) and self.rotation == (0.0, 0.0, 0.0, 1.0)

    def rotation_matrix(self) -> np.ndarray:
        x, y, z, w = self.rotation
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w),     2 * (x * z + y * w)],
            [2 * (x * y + z * w),     1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w),     2 * (y * z + x * w),     1 - 2 * (x * x + y * y)],
        ], dtype=np.float32)

    def matrix(self) -> np.ndarray:
        m = np.eye(4, dtype=np.float32)
        m[:3, :3] = self.rotation_matrix()
        m[:3, 3] = self.translation
        return m

    def apply(self, points) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float32)
        return pts @ self.rotation_matrix().T + np.asarray(self.translation, dtype=np.float32)


@dataclass
class Mesh:
    """
    Triangle-list mesh handed to the renderer.

    positions: (N,3) float32
    normals:   (N,3) float32, one per position
    indices:   (T,3) uint32 triangles, counter-clockwise seen from the normal side
    uvs:       (N,2) float32, optional
    colors:    (N,4) float32 per-vertex RGBA, optional
    """
    positions: np.ndarray
    normals: np.ndarray
    indices: np.ndarray
    uvs: Optional[np.ndarray] = None
    colors: Optional[np.ndarray] = field(default=None)

    def __post_init__(self):
        self.positions = np.ascontiguousarray(self.positions, dtype=np.float32).reshape(-1, 3)
        self.normals = np.ascontiguousarray(self.normals, dtype=np.float32).reshape(-1, 3)
        self.indices = np.ascontiguousarray(self.indices, dtype=np.uint32).reshape(-1, 3)
        n = self.positions.shape[0]

        if self.normals.shape[0] != n:
            raise ValueError(f"Expected {n} normals, got {self.normals.shape[0]}")
        if self.uvs is not None:
            self.uvs = np.ascontiguousarray(self.uvs, dtype=np.float32).reshape(-1, 2)
            if self.uvs.shape[0] != n:
                raise ValueError(f"Expected {n} uvs, got {self.uvs.shape[0]}")
        if self.colors is not None:
            self.colors = np.ascontiguousarray(self.colors, dtype=np.float32).reshape(-1, 4)
            if self.colors.shape[0] != n:
                raise ValueError(f"Expected {n} colors, got {self.colors.shape[0]}")
        if self.indices.size and int(self.indices.max()) >= n:
            raise ValueError(f"Index {int(self.indices.max())} out of range for {n} vertices")

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0])

    def triangle_normals(self) -> np.ndarray:
        """Unit normals implied by the winding of each triangle."""
        tri = self.positions[self.indices]
        n = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
        return n / np.linalg.norm(n, axis=1, keepdims=True)

    def interleaved(self) -> np.ndarray:
        """(N,12) float32 rows: position(3) | normal(3) | uv(2) | rgba(4)."""
        n = self.vertex_count
        uvs = self.uvs if self.uvs is not None else np.zeros((n, 2), np.float32)
        colors = self.colors if self.colors is not None else np.ones((n, 4), np.float32)
        return np.hstack([self.positions, self.normals, uvs, colors]).astype(np.float32)
