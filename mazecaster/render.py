"""Drawing the 3D view and the minimap into a framebuffer."""

from __future__ import annotations

import math
from typing import Iterable

from mazecaster.caster import cast_ray
from mazecaster.framebuffer import (
    BROWN,
    DARKBLUE,
    DARKGRAY,
    GREEN,
    ORANGE,
    ORANGERED,
    SKYBLUE,
    WHITE,
    YELLOW,
    Color,
    Framebuffer,
)
from mazecaster.maze import Maze
from mazecaster.player import Player
from mazecaster.sprite import Enemy

MINIMAP_CELL_SIZE = 4
MINIMAP_MARGIN = 10
MINIMAP_MARKER_MIN = 3
STAKE_SCALE = 0.15

_MINIMAP_COLORS = {
    "-": DARKGRAY,
    "|": DARKGRAY,
    "+": BROWN,
    "s": GREEN,
    "S": GREEN,
    "g": YELLOW,
    "G": YELLOW,
}

_WALL_COLORS = {
    "+": ORANGERED,
    "g": GREEN,
}


def _fill_square(framebuffer: Framebuffer, x0: int, y0: int, size: int) -> None:
    for dx in range(size):
        for dy in range(size):
            framebuffer.set_pixel(x0 + dx, y0 + dy, 0.0)


def render_minimap(
    framebuffer: Framebuffer,
    maze: Maze,
    block_size: int,
    player: Player,
    enemies: Iterable[Enemy],
) -> None:
    """Draw a small map of the maze, the player and enemies in the top-right corner."""
    rows = len(maze)
    if rows == 0:
        return
    cols = len(maze[0])
    cell_size = MINIMAP_CELL_SIZE

    origin_x = framebuffer.width - cols * cell_size - MINIMAP_MARGIN
    origin_y = MINIMAP_MARGIN

    for row_index, row in enumerate(maze):
        for col_index, cell in enumerate(row):
            if cell == " ":
                continue
            framebuffer.set_current_color(_MINIMAP_COLORS.get(cell, DARKBLUE))
            _fill_square(
                framebuffer,
                origin_x + col_index * cell_size,
                origin_y + row_index * cell_size,
                cell_size,
            )

    marker_size = max(cell_size, MINIMAP_MARKER_MIN)

    def draw_marker(world_x: float, world_y: float, color: Color) -> None:
        col = int(world_x / block_size)
        row = int(world_y / block_size)
        if row < 0 or col < 0 or row >= rows or col >= cols:
            return
        framebuffer.set_current_color(color)
        _fill_square(
            framebuffer,
            origin_x + col * cell_size,
            origin_y + row * cell_size,
            marker_size,
        )

    draw_marker(player.x, player.y, SKYBLUE)
    for enemy in enemies:
        draw_marker(enemy.x, enemy.y, ORANGE)


def render_world(
    framebuffer: Framebuffer, player: Player, maze: Maze, block_size: int
) -> None:
    """Cast one ray per column and draw depth-tested wall stakes."""
    num_rays = framebuffer.width
    hw = framebuffer.width / 2.0
    hh = framebuffer.height / 2.0
    framebuffer.set_current_color(WHITE)

    distance_to_projection_plane = hw / math.tan(player.fov / 2.0)

    for i in range(num_rays):
        current_ray = i / num_rays
        a = player.a - (player.fov / 2.0) + (player.fov * current_ray)
        intersect = cast_ray(framebuffer, maze, player, a, block_size, False)

        distance_to_wall = intersect.distance * math.cos(player.a - a)
        stake_height = (hh / distance_to_wall) * distance_to_projection_plane * STAKE_SCALE

        stake_top = max(0, int(hh - stake_height / 2.0))
        stake_bottom = min(framebuffer.height, max(0, int(hh + stake_height / 2.0)))

        framebuffer.set_current_color(_WALL_COLORS.get(intersect.impact, YELLOW))
        for y in range(stake_top, stake_bottom):
            framebuffer.set_pixel(i, y, distance_to_wall)