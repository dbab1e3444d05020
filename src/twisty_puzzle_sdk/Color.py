# Color.py – puzzle palette and the 1-pixel-tall colour atlas every puzzle samples from
import logging
import re
from typing import NamedTuple, Optional, Sequence

import numpy as np

from .PuzzleDataTypes import InvalidColor, RawImage


class Color(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)."""
        m = re.fullmatch(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})", text.strip())
        if not m:
            raise InvalidColor(f"Expected #RRGGBB or #RRGGBBAA, got {text!r}")
        digits = m.group(1)
        channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls(*channels)

    def validate(self) -> "Color":
        for name, value in zip(self._fields, self):
            if not (0.0 <= float(value) <= 1.0):
                raise InvalidColor(f"Channel {name}={value} of {tuple(self)} is outside [0, 1]")
        return self


# ------------------------------------------------------------------------- palette
BLUE   = Color(0.239, 0.506, 0.965)
GREEN  = Color(0.0, 0.616, 0.329)
RED    = Color(0.863, 0.259, 0.184)
ORANGE = Color(1.0, 0.424, 0.0)
YELLOW = Color(0.992, 0.8, 0.035)
WHITE  = Color(1.0, 1.0, 1.0)
GRAY   = Color(0.22, 0.22, 0.22)
GOLD   = Color(1.0, 0.8627, 0.6157)
SILVER = Color(1.0, 0.9765, 0.9601)


class ColorAtlas:
    """
    Ordered strip of colours, one texel each, addressed by slot index.

    The optional interior colour is always the last slot, so a slot index
    baked into a UV stays valid only while the named colours keep their order.
    """

    def __init__(self, colors: Sequence[Color], interior: Optional[Color] = None):
        if not colors:
            raise InvalidColor("A colour atlas needs at least one colour")
        self._named = tuple(Color(*c).validate() for c in colors)
        self._interior = None if interior is None else Color(*interior).validate()

    # ------------------------------------------------ slots
    @property
    def colors(self) -> tuple:
        if self._interior is None:
            return self._named
        return self._named + (self._interior,)

    @property
    def slot_count(self) -> int:
        return len(self.colors)

    @property
    def interior_slot(self) -> Optional[int]:
        return None if self._interior is None else len(self._named)

    def color(self, slot: int) -> Color:
        return self.colors[slot]

    def u(self, slot: int) -> float:
        """Horizontal texture coordinate of the centre of ``slot``."""
        if not 0 <= slot < self.slot_count:
            raise IndexError(f"Slot {slot} outside atlas of {self.slot_count}")
        return (slot + 0.5) / self.slot_count

    # ------------------------------------------------ pixels
    def to_bytes(self) -> bytes:
        # float32 arithmetic and truncation, so golden bytes match the shipped textures
        rgba = np.asarray(self.colors, dtype=np.float32)
        scaled = np.floor(np.float32(255.0) * rgba)
        return np.clip(scaled, 0, 255).astype(np.uint8).tobytes()

    def create_texture(self) -> RawImage:
        data = self.to_bytes()
        logging.debug("colour atlas: %d slots, %d bytes", self.slot_count, len(data))
        return RawImage(width=self.slot_count, height=1, data=data)
