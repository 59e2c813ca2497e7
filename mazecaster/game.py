"""Game state: levels, enemies, health and the screen transitions."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from mazecaster.maze import Maze, load_maze
from mazecaster.player import MovementInput, Player
from mazecaster.screens import ScreenKind, defeat, game, main_menu, pause, victory
from mazecaster.sprite import Enemy
from mazecaster.textures import TextureManager
from mazecaster.widgets import Button, Element, Panel, Screen

DEFAULT_MAZE_FILES = ("maze1.txt", "maze2.txt", "maze3.txt")
MAX_HEALTH = 5
HIT_COOLDOWN = 1.0
ANIMATION_RATE = 1.0
MOVE_RATE = 0.25
MAX_FLASH_ALPHA = 180.0
ENEMY_DAMAGE = 1

_ENEMY_WALKABLE = frozenset(" g")
_DIRECTIONS = ((1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0))
_SPAWNS = {
    0: ((11.0, 3.0), (7.0, 7.0)),
    1: ((11.0, 3.0), (11.0, 7.0)),
    2: ((1.0, 11.0), (1.0, 5.0)),
}


def find_start_cell(maze: Maze, ch: str) -> Optional[Tuple[int, int]]:
    """Return (column, row) of the first cell holding ch, or None."""
    for j, row in enumerate(maze):
        for i, cell in enumerate(row):
            if cell == ch:
                return i, j
    return None


def _cell(maze: Maze, i: int, j: int) -> Optional[str]:
    if not maze or j >= len(maze) or i >= len(maze[0]) or i >= len(maze[j]):
        return None
    return maze[j][i]


def is_free_cell(maze: Maze, x: float, y: float, block_size: float) -> bool:
    """Whether an enemy may stand at a world position (open or goal cell)."""
    if x < 0.0 or y < 0.0:
        return False
    cell = _cell(maze, int(x / block_size), int(y / block_size))
    return cell is not None and cell in _ENEMY_WALKABLE


@dataclass(frozen=True)
class FrameInput:
    """Everything the game reads from the window during one frame."""

    mouse_pos: Tuple[float, float] = (0.0, 0.0)
    mouse_pressed: bool = False
    escape_pressed: bool = False
    frame_time: float = 0.0
    time: float = 0.0
    movement: MovementInput = field(default_factory=MovementInput)


def _is_clicked(container: Element, element_id: str) -> bool:
    element = getattr(container, "elements", {}).get(element_id)
    return isinstance(element, Button) and element.clicked


def _panel(screen: Screen, element_id: str) -> Optional[Panel]:
    element = screen.elements.get(element_id)
    return element if isinstance(element, Panel) else None


class AppState:
    """The whole game: current screen, level, player and enemies."""

    def __init__(
        self,
        width: int,
        height: int,
        block_size: float,
        texture_manager: TextureManager,
        mazes: Optional[Iterable[Maze]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if mazes is None:
            mazes = [load_maze(name) for name in DEFAULT_MAZE_FILES]
        self.mazes: List[Maze] = list(mazes)
        if not self.mazes:
            raise ValueError("at least one maze is required")
        self.width = width
        self.height = height
        self.block_size = float(block_size)
        self.texture_manager = texture_manager
        self.rng = rng if rng is not None else random.Random()
        self.max_health = MAX_HEALTH
        self.current_screen: Screen = main_menu(width, height)
        self.current_level = 0
        self.is_playing = False
        self.paused = False
        self.enabled_cursor = True
        self.close_window = False
        self.hit_frame = False
        self.player = Player(
            self.block_size,
            self.block_size,
            a=math.pi / 3.0,
            fov=math.pi / 3.0,
            health=self.max_health,
        )
        self.enemies: List[Enemy] = []
        self.cooldown = HIT_COOLDOWN
        self.remaining_cooldown = 0.0
        self.last_hit = -1.0
        self.animation_left = 0.0

    @property
    def current_maze(self) -> Maze:
        return self.mazes[self.current_level]

    def start_level(self) -> None:
        """Reset the player and enemies and begin playing the current level."""
        self.is_playing = True
        self.paused = False
        self.enabled_cursor = False
        self.last_hit = -self.cooldown
        self.remaining_cooldown = 0.0
        self.animation_left = 0.0

        self.player.health = self.max_health
        start = find_start_cell(self.current_maze, "s")
        if start is not None:
            i, j = start
            self.player.x = (i + 0.5) * self.block_size
            self.player.y = (j + 0.5) * self.block_size
        self.player.a = math.pi / 4.0

        self.spawn_enemies_for_level()
        self.current_screen = game(self.width, self.height)

    def spawn_enemies_for_level(self) -> None:
        """Place the two enemies at the current level's spawn points."""
        spawns = _SPAWNS.get(self.current_level)
        if spawns is None:
            positions = [(1.0, 1.0), (1.0, 1.0)]
        else:
            positions = [(cx * self.block_size, cy * self.block_size) for cx, cy in spawns]
        self.enemies = [Enemy(x, y, "e") for x, y in positions]

    def update_enemies(self, now: float) -> None:
        """Step enemies randomly, animate their textures and rotate images."""
        maze = self.current_maze
        step = self.block_size / 10.0
        may_move = math.fmod(now, MOVE_RATE) < 0.1
        blurred = math.fmod(now, ANIMATION_RATE) < 0.5 * ANIMATION_RATE

        for enemy in self.enemies:
            if may_move:
                for _ in range(4):
                    dx, dy = _DIRECTIONS[self.rng.randint(0, 3)]
                    next_x = enemy.x + dx * step
                    next_y = enemy.y + dy * step
                    if is_free_cell(maze, next_x, next_y, self.block_size):
                        enemy.x = next_x
                        enemy.y = next_y
                        break
            enemy.texture_key = "#" if blurred else "e"

        if self.animation_left <= 0.0:
            self.texture_manager.rotate_images()
            self.animation_left = ANIMATION_RATE

    def is_on_goal(self) -> bool:
        """Whether the player stands on a goal cell."""
        i = max(0, int(self.player.x / self.block_size))
        j = max(0, int(self.player.y / self.block_size))
        return _cell(self.current_maze, i, j) == "g"

    def check_enemy_collisions(self, now: float) -> None:
        """Take health for each nearby enemy, at most once per cooldown."""
        damage_distance = self.block_size / 3.5
        for enemy in self.enemies:
            dx = enemy.x - self.player.x
            dy = enemy.y - self.player.y
            close = dx * dx + dy * dy <= damage_distance * damage_distance
            if close and now - self.last_hit >= self.cooldown:
                self.last_hit = now
                self.player.health = max(0, self.player.health - ENEMY_DAMAGE)
                self.hit_frame = True
                self.remaining_cooldown = self.cooldown

    def cooldown_alpha(self) -> int:
        """Opacity of the red damage flash, 0 when there is none."""
        if self.remaining_cooldown <= 0.0:
            return 0
        alpha = int(self.remaining_cooldown / self.cooldown * MAX_FLASH_ALPHA)
        return min(255, max(0, alpha))

    def handle_input(self, frame: FrameInput) -> None:
        """Advance the game by one frame of input."""
        screen = self.current_screen
        screen.update(frame.mouse_pos, frame.mouse_pressed)
        handler = {
            ScreenKind.MAIN_MENU: self._handle_main_menu,
            ScreenKind.GAME: self._handle_game,
            ScreenKind.PAUSE: self._handle_pause,
            ScreenKind.VICTORY: self._handle_victory,
            ScreenKind.DEFEAT: self._handle_defeat,
        }.get(screen.kind)
        if handler is not None:
            handler(screen, frame)

    def _toggle_pause(self) -> None:
        self.paused = not self.paused
        self.enabled_cursor = not self.enabled_cursor

    def _back_to_menu(self) -> None:
        self.is_playing = False
        self.paused = False
        self.enabled_cursor = True
        self.current_screen = main_menu(self.width, self.height)

    def _handle_main_menu(self, screen: Screen, frame: FrameInput) -> None:
        levels = _panel(screen, "levels_panel")
        if levels is not None:
            for element_id, element in levels.elements.items():
                if not (isinstance(element, Button) and element.clicked):
                    continue
                suffix = element_id[len("level_"):] if element_id.startswith("level_") else ""
                if suffix.isdigit() and int(suffix) < len(self.mazes):
                    self.current_level = int(suffix)

        if isinstance(screen.elements.get("play"), Button):
            if _is_clicked(screen, "play"):
                self.start_level()
            elif _is_clicked(screen, "quit"):
                self.close_window = True

    def _handle_game(self, screen: Screen, frame: FrameInput) -> None:
        self.remaining_cooldown -= frame.frame_time
        self.animation_left -= frame.frame_time

        if frame.escape_pressed:
            self._toggle_pause()

        if not self.paused and self.is_playing:
            self.player.process_events(frame.movement, self.current_maze, self.block_size)
            self.update_enemies(frame.time)
            self.check_enemy_collisions(frame.time)

            if self.is_on_goal():
                self.is_playing = False
                self.enabled_cursor = True
                self.current_screen = victory(self.width, self.height)
            elif self.player.health == 0:
                self.is_playing = False
                self.enabled_cursor = True
                self.current_screen = defeat(self.width, self.height)
        else:
            self.current_screen = pause(self.width, self.height)

    def _handle_pause(self, screen: Screen, frame: FrameInput) -> None:
        if frame.escape_pressed:
            self._toggle_pause()
            self.current_screen = game(self.width, self.height)
            return
        panel = _panel(screen, "pause_panel")
        if panel is None or not isinstance(panel.elements.get("pause_resume"), Button):
            return
        if _is_clicked(panel, "pause_resume"):
            self._toggle_pause()
            self.current_screen = game(self.width, self.height)
        elif isinstance(panel.elements.get("pause_menu"), Button):
            if _is_clicked(panel, "pause_menu"):
                self.is_playing = False
                self.current_screen = main_menu(self.width, self.height)
            elif _is_clicked(panel, "pause_quit"):
                self.close_window = True

    def _handle_victory(self, screen: Screen, frame: FrameInput) -> None:
        panel = _panel(screen, "victory_panel")
        if panel is None:
            return
        if _is_clicked(panel, "victory_next"):
            if self.current_level + 1 < len(self.mazes):
                self.current_level += 1
            else:
                self.current_level = 0
            self.start_level()
        elif _is_clicked(panel, "victory_restart"):
            self.start_level()
        elif _is_clicked(panel, "victory_menu"):
            self._back_to_menu()

    def _handle_defeat(self, screen: Screen, frame: FrameInput) -> None:
        panel = _panel(screen, "defeat_panel")
        if panel is None:
            return
        if _is_clicked(panel, "defeat_restart"):
            self.start_level()
        elif _is_clicked(panel, "defeat_menu"):
            self._back_to_menu()
        elif _is_clicked(panel, "defeat_quit"):
            self.close_window = True