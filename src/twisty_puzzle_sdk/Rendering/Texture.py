#!/usr/bin/env python3
# Texture.py – uploads a colour atlas as a nearest-filtered 2D texture
import numpy as np
from OpenGL.GL import *
from PIL import Image

from ..PuzzleDataTypes import RawImage, TextureFormat


class Texture2D:
    def __init__(self, img: Image.Image, srgb: bool = True):
        img = img.convert("RGBA")
        w, h = img.size
        data = np.frombuffer(img.tobytes(), dtype=np.uint8)
        internal = GL_SRGB8_ALPHA8 if srgb else GL_RGBA8
        self.size = (w, h)
        self.id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, self.id)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glTexImage2D(GL_TEXTURE_2D, 0, internal, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        # one texel per colour: filtering would blend neighbouring slots
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
        glBindTexture(GL_TEXTURE_2D, 0)

    @classmethod
    def from_raw_image(cls, image: RawImage) -> "Texture2D":
        return cls(image.to_pil(), srgb=image.format == TextureFormat.RGBA8_UNORM_SRGB)

    def bind(self, unit: int):
        glActiveTexture(GL_TEXTURE0 + unit)
        glBindTexture(GL_TEXTURE_2D, self.id)

    def delete(self):
        glDeleteTextures(1, [self.id])
