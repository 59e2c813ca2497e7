"""Sprite images held in memory for per-pixel sampling."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from mazecaster.framebuffer import WHITE, Color

DEFAULT_TEXTURE_FILES: Tuple[Tuple[str, str], ...] = (
    ("#", "assets/pumpkinblur.png"),
    ("e", "assets/carved_pumpkin.png"),
)


@dataclass
class Image:
    """A row-major grid of RGBA pixels."""

    width: int
    height: int
    pixels: List[Color] = field(repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = [Color(*pixel) for pixel in self.pixels]
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def get_pixel(self, x: int, y: int) -> Color:
        """Return a pixel, or white when outside the image."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return WHITE
        return self.pixels[y * self.width + x]

    def rotate_ccw(self) -> None:
        """Rotate the image 90 degrees counter-clockwise in place."""
        w, h = self.width, self.height
        old = self.pixels
        self.pixels = [old[y * w + (w - 1 - x)] for x in range(w) for y in range(h)]
        self.width, self.height = h, w


def load_image(path: str | os.PathLike[str]) -> Image:
    """Load an image file into memory as RGBA pixels."""
    import pygame

    surface = pygame.image.load(os.fspath(path))
    width, height = surface.get_size()
    pixels = [
        Color(*surface.get_at((x, y))) for y in range(height) for x in range(width)
    ]
    return Image(width, height, pixels)


class TextureManager:
    """Images keyed by the character that refers to them."""

    def __init__(self, images: Dict[str, Image]) -> None:
        self.images = dict(images)

    def get_pixel_color(self, ch: str, tx: int, ty: int) -> Color:
        """Sample an image, clamping to its far edges; white if unknown."""
        image = self.images.get(ch)
        if image is None:
            return WHITE
        x = min(tx, image.width - 1)
        y = min(ty, image.height - 1)
        return image.get_pixel(x, y)

    def rotate_images(self) -> None:
        for image in self.images.values():
            image.rotate_ccw()


def load_texture_manager(
    texture_files: Optional[Iterable[Tuple[str, str | os.PathLike[str]]]] = None,
) -> TextureManager:
    """Load each (character, path) pair into a texture manager."""
    pairs = DEFAULT_TEXTURE_FILES if texture_files is None else texture_files
    return TextureManager({ch: load_image(path) for ch, path in pairs})