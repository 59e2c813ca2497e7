"""The player and its keyboard and mouse driven movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mazecaster.maze import Maze

ROTATION_SPEED = math.pi / 50.0
MOUSE_SENSITIVITY = 0.003
_WALKABLE = frozenset(" gs")


@dataclass(frozen=True)
class MovementInput:
    """The controls held during one frame."""

    rotate_left: bool = False
    rotate_right: bool = False
    forward: bool = False
    backward: bool = False
    strafe_right: bool = False
    strafe_left: bool = False
    mouse_dx: float = 0.0


def can_walk_to(maze: Maze, x: float, y: float, block_size: float) -> bool:
    """Whether a world position lies on an open, start or goal cell."""
    if x < 0.0 or y < 0.0 or not maze:
        return False
    i = int(x / block_size)
    j = int(y / block_size)
    if j >= len(maze) or i >= len(maze[0]) or i >= len(maze[j]):
        return False
    return maze[j][i] in _WALKABLE


@dataclass
class Player:
    """Position in world units, view angle and field of view in radians."""

    x: float
    y: float
    a: float = math.pi / 3.0
    fov: float = math.pi / 3.0
    health: int = 5

    def process_events(self, controls: MovementInput, maze: Maze, block_size: float) -> None:
        """Turn and move for one frame, sliding along walls axis by axis."""
        move_speed = block_size / 25.0

        if controls.rotate_left:
            self.a -= ROTATION_SPEED
        if controls.rotate_right:
            self.a += ROTATION_SPEED
        self.a += controls.mouse_dx * MOUSE_SENSITIVITY

        dir_x = math.cos(self.a) * move_speed
        dir_y = math.sin(self.a) * move_speed

        if controls.forward:
            self._slide(dir_x, dir_y, maze, block_size)
        if controls.backward:
            self._slide(-dir_x, -dir_y, maze, block_size)
        if controls.strafe_right:
            self._slide(-dir_y, dir_x, maze, block_size)
        if controls.strafe_left:
            self._slide(dir_y, -dir_x, maze, block_size)

    def _slide(self, dx: float, dy: float, maze: Maze, block_size: float) -> None:
        next_x = self.x + dx
        if can_walk_to(maze, next_x, self.y, block_size):
            self.x = next_x
        next_y = self.y + dy
        if can_walk_to(maze, self.x, next_y, block_size):
            self.y = next_y