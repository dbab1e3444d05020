#!/usr/bin/env python3
# Mesh.py – uploads a generated puzzle Mesh into a VAO/VBO/EBO
import ctypes

import numpy as np
from OpenGL.GL import *

from ..PuzzleDataTypes import Mesh

_FLOAT = ctypes.sizeof(ctypes.c_float)

# location, component count, float offset inside an interleaved row
_LAYOUT = (
    (0, 3, 0),   # position
    (1, 3, 3),   # normal
    (2, 2, 6),   # uv
    (3, 4, 8),   # rgba
)
_STRIDE = 12 * _FLOAT


class GpuMesh:
    """
    GPU copy of a :class:`Mesh`. Keeps the numpy buffers alive for as long
    as the GL objects exist.
    """
    def __init__(self, mesh: Mesh):
        self._vertices = np.ascontiguousarray(mesh.interleaved(), dtype=np.float32)
        self._indices = np.ascontiguousarray(mesh.indices.reshape(-1), dtype=np.uint32)
        self.index_count = int(self._indices.size)
        self.has_uvs = mesh.uvs is not None

        # ---- VAO -----------------------------------------------------------
        self.vao = glGenVertexArrays(1)
        glBindVertexArray(self.vao)

        # ---- VBO -----------------------------------------------------------
        self.vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
        glBufferData(GL_ARRAY_BUFFER, self._vertices.nbytes, self._vertices, GL_STATIC_DRAW)

        # ---- EBO (stays bound to the VAO) ------------------------------------
        self.ebo = glGenBuffers(1)
        glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        glBufferData(GL_ELEMENT_ARRAY_BUFFER, self._indices.nbytes, self._indices, GL_STATIC_DRAW)

        # ---- attribute layout ---------------------------------------------
        for loc, size, offset in _LAYOUT:
            glEnableVertexAttribArray(loc)
            glVertexAttribPointer(loc, size, GL_FLOAT, GL_FALSE, _STRIDE,
                                  ctypes.c_void_p(offset * _FLOAT))

        # ---- tidy up -------------------------------------------------------
        glBindVertexArray(0)
        glBindBuffer(GL_ARRAY_BUFFER, 0)

    def draw(self, mode: int = GL_TRIANGLES) -> None:
        glBindVertexArray(self.vao)
        glDrawElements(mode, self.index_count, GL_UNSIGNED_INT, ctypes.c_void_p(0))
        glBindVertexArray(0)

    def delete(self) -> None:
        glDeleteBuffers(2, [self.vbo, self.ebo])
        glDeleteVertexArrays(1, [self.vao])
