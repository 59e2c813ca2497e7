"""An RGBA pixel buffer with a depth buffer."""

from __future__ import annotations

import math
import os
from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
YELLOW = Color(253, 249, 0)
GREEN = Color(0, 228, 48)
DARKGREEN = Color(0, 117, 44)
GRAY = Color(130, 130, 130)
LIGHTGRAY = Color(200, 200, 200)
DARKGRAY = Color(80, 80, 80)
BROWN = Color(127, 106, 79)
BLUE = Color(0, 121, 241)
DARKBLUE = Color(0, 82, 172)
SKYBLUE = Color(102, 191, 255)
ORANGE = Color(255, 161, 0)
ORANGERED = Color(255, 69, 0)
RED = Color(230, 41, 55)
MAROON = Color(190, 33, 55)


class Framebuffer:
    """Row-major RGBA pixels plus a per-pixel depth buffer."""

    def __init__(self, width: int, height: int, background_color: Color) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._background_color = Color(*background_color)
        self._current = bytes(WHITE)
        self._data = bytearray(bytes(self._background_color) * (width * height))
        self._zbuffer = [math.inf] * (width * height)

    def clear(self) -> None:
        """Fill with the background colour and reset all depths."""
        count = self.width * self.height
        self._data[:] = bytes(self._background_color) * count
        self._zbuffer = [math.inf] * count

    def set_pixel(self, x: int, y: int, depth: float) -> None:
        """Paint one pixel in the current colour if in bounds and nearer."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        index = y * self.width + x
        if depth < self._zbuffer[index]:
            offset = index * 4
            self._data[offset:offset + 4] = self._current
            self._zbuffer[index] = depth

    def get_color(self, x: int, y: int) -> Color:
        """Return the colour stored at a pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        offset = (y * self.width + x) * 4
        return Color(*self._data[offset:offset + 4])

    def set_background_color(self, color: Color) -> None:
        self._background_color = Color(*color)

    def set_current_color(self, color: Color) -> None:
        self._current = bytes(Color(*color))

    def to_surface(self):
        """Return a pygame surface holding a copy of the pixels."""
        import pygame

        return pygame.image.frombuffer(bytes(self._data), (self.width, self.height), "RGBA")

    def render_to_file(self, file_path: str | os.PathLike[str]) -> None:
        """Write the pixels to an image file; the format follows the extension."""
        import pygame

        pygame.image.save(self.to_surface(), os.fspath(file_path))