"""Ray casting through the maze grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mazecaster.framebuffer import WHITE, Framebuffer
from mazecaster.maze import Maze
from mazecaster.player import Player

_PASSABLE = frozenset(" s")


@dataclass(frozen=True)
class Intersect:
    """Where a ray stopped: distance, the cell hit and a texture column."""

    distance: float
    impact: str
    tx: int


def cast_ray(
    framebuffer: Framebuffer,
    maze: Maze,
    player: Player,
    a: float,
    block_size: int,
    draw: bool,
) -> Intersect:
    """March a ray from the player at angle a until it hits a wall."""
    max_distance = block_size * 200.0
    miss = Intersect(max_distance, " ", 0)

    rows = len(maze)
    cols = len(maze[0]) if rows else 0
    world_width = cols * block_size
    world_height = rows * block_size

    framebuffer.set_current_color(WHITE)

    cos_a = math.cos(a)
    sin_a = math.sin(a)
    d = 0.1
    while True:
        wx = player.x + d * cos_a
        wy = player.y + d * sin_a
        if wx < 0.0 or wy < 0.0 or wx >= world_width or wy >= world_height:
            return miss

        x = int(wx)
        y = int(wy)
        i = x // block_size
        j = y // block_size
        if j >= rows or i >= cols or i >= len(maze[j]):
            return miss

        cell = maze[j][i]
        if cell not in _PASSABLE:
            hitx = x - i * block_size
            hity = y - j * block_size
            maxhit = hitx if 1 < hitx < block_size - 1 else hity
            tx = int(maxhit * 128.0 / block_size)
            return Intersect(d, cell, tx)

        if draw:
            framebuffer.set_pixel(x, y, d)

        d += 1.0
        if d > max_distance:
            return miss