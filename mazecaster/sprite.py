"""Enemies and their billboard sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mazecaster.framebuffer import Color, Framebuffer
from mazecaster.player import Player
from mazecaster.textures import TextureManager

TRANSPARENT_COLOR = Color(152, 0, 136, 255)
NEAR_PLANE = 50.0
FAR_PLANE = 1000.0


@dataclass
class Enemy:
    """An enemy's world position and the texture it shows."""

    x: float
    y: float
    texture_key: str = "e"


def draw_sprite(
    framebuffer: Framebuffer,
    player: Player,
    enemy: Enemy,
    texture_manager: TextureManager,
) -> None:
    """Draw an enemy as a depth-tested, scaled billboard."""
    sprite_a = math.atan2(enemy.y - player.y, enemy.x - player.x)
    angle_diff = sprite_a - player.a
    while angle_diff > math.pi:
        angle_diff -= 2.0 * math.pi
    while angle_diff < -math.pi:
        angle_diff += 2.0 * math.pi

    if abs(angle_diff) > player.fov / 2.0:
        return

    sprite_d = math.hypot(player.x - enemy.x, player.y - enemy.y)
    if sprite_d < NEAR_PLANE or sprite_d > FAR_PLANE:
        return

    image = texture_manager.images.get(enemy.texture_key)
    if image is None:
        return

    screen_height = float(framebuffer.height)
    screen_width = float(framebuffer.width)

    sprite_size = (screen_height / sprite_d) * 70.0
    screen_x = ((angle_diff / player.fov) + 0.5) * screen_width

    start_x = int(max(screen_x - sprite_size / 2.0, 0.0))
    start_y = int(max(screen_height / 2.0 - sprite_size / 2.0, 0.0))
    size = int(sprite_size)
    end_x = min(start_x + size, framebuffer.width)
    end_y = min(start_y + size, framebuffer.height)

    for x in range(start_x, end_x):
        tx = (x - start_x) * image.width // size
        for y in range(start_y, end_y):
            ty = (y - start_y) * image.height // size
            color = texture_manager.get_pixel_color(enemy.texture_key, tx, ty)
            if color != TRANSPARENT_COLOR:
                framebuffer.set_current_color(color)
                framebuffer.set_pixel(x, y, sprite_d)