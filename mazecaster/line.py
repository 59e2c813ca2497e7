"""Bresenham line drawing into a framebuffer."""

from __future__ import annotations

from typing import Tuple

from mazecaster.framebuffer import Framebuffer

Point = Tuple[float, float]


def line(framebuffer: Framebuffer, start: Point, end: Point) -> None:
    """Draw a line between two points at depth zero."""
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        if x0 >= 0 and y0 >= 0:
            framebuffer.set_pixel(x0, y0, 0.0)
        if x0 == x1 and y0 == y1:
            break
        e2 = err * 2
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy