# Puzzle.py – capability interface shared by every puzzle variant
from abc import ABC, abstractmethod
from typing import Any, List, Tuple

from ..Color import ColorAtlas
from ..PuzzleDataTypes import MaterialDescriptor, Mesh, Placement, RawImage


class Puzzle(ABC):
    """
    A puzzle is immutable once constructed. All three operations are pure:
    they may be called in any order, any number of times, and return freshly
    allocated data each time.
    """

    #: Material constants, overridden per variant.
    ROUGHNESS = 0.15
    METALLIC = 0.0

    @property
    @abstractmethod
    def atlas(self) -> ColorAtlas:
        ...

    def create_texture(self) -> RawImage:
        return self.atlas.create_texture()

    def create_material(self, texture: Any) -> MaterialDescriptor:
        """``texture`` is the renderer's handle for the uploaded atlas; it is
        stored, never inspected."""
        return MaterialDescriptor(base_color_texture=texture,
                                  perceptual_roughness=self.ROUGHNESS,
                                  metallic=self.METALLIC)

    @abstractmethod
    def create_meshes(self) -> List[Tuple[Mesh, Placement]]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
