"""Factories for the menu, game, pause, victory and defeat screens."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

from mazecaster.framebuffer import (
    BLUE,
    DARKBLUE,
    DARKGRAY,
    DARKGREEN,
    GRAY,
    GREEN,
    LIGHTGRAY,
    MAROON,
    RED,
    WHITE,
    Color,
)
from mazecaster.widgets import Button, Label, Panel, Rect, Screen

BUTTON_HEIGHT = 40.0
BUTTON_SPACING = 10.0
TITLE_FONT_SIZE = 40


class ScreenKind(Enum):
    """Which screen is showing."""

    MAIN_MENU = "main_menu"
    GAME = "game"
    PAUSE = "pause"
    VICTORY = "victory"
    DEFEAT = "defeat"


def _half(n: int) -> int:
    return int(n / 2)


def _panel_rect(screen_w: int, height: float) -> Rect:
    return Rect(float(_half(screen_w) - 150), 160.0, 300.0, height)


def _title(text: str, screen_w: int, offset: int) -> Label:
    return Label(text, (float(_half(screen_w) - offset), 80.0), TITLE_FONT_SIZE, WHITE)


def _button_panel(
    rect: Rect,
    background: Optional[Color],
    buttons: Iterable[Tuple[str, str, Color, Color]],
) -> Panel:
    panel = Panel(rect, background)
    y = rect.y + 20.0
    for element_id, text, color, hover in buttons:
        button_rect = Rect(rect.x + 20.0, y, rect.width - 40.0, BUTTON_HEIGHT)
        panel.add_element(element_id, Button(button_rect, text, color, hover))
        y += BUTTON_HEIGHT + BUTTON_SPACING
    return panel


def main_menu(screen_w: int, screen_h: int) -> Screen:
    """The title screen with level choice, play and quit."""
    panel_rect = _panel_rect(screen_w, 200.0)
    levels = _button_panel(
        panel_rect,
        DARKGRAY,
        (
            (f"level_{i}", name, GRAY, LIGHTGRAY)
            for i, name in enumerate(("Level 1", "Level 2", "Level 3"))
        ),
    )
    play_rect = Rect(
        float(_half(screen_w) - 100),
        panel_rect.y + panel_rect.height + 40.0,
        200.0,
        50.0,
    )
    quit_rect = Rect(play_rect.x, play_rect.y + 70.0, 200.0, 50.0)
    return Screen(
        ScreenKind.MAIN_MENU,
        {
            "title": _title("Maze Raycaster", screen_w, 150),
            "levels_panel": levels,
            "play": Button(play_rect, "PLAY", DARKGREEN, GREEN),
            "quit": Button(quit_rect, "QUIT", MAROON, RED),
        },
    )


def game(screen_w: int, screen_h: int) -> Screen:
    """The in-game overlay."""
    hint = Label("ESC - Pause", (20.0, 20.0), 20, WHITE)
    return Screen(ScreenKind.GAME, {"hint_esc": hint})


def pause(screen_w: int, screen_h: int) -> Screen:
    """The pause menu: resume, main menu or quit."""
    panel = _button_panel(
        _panel_rect(screen_w, 200.0),
        DARKGRAY,
        (
            ("pause_resume", "Resume", DARKGREEN, GREEN),
            ("pause_menu", "Main Menu", GRAY, LIGHTGRAY),
            ("pause_quit", "Quit", MAROON, RED),
        ),
    )
    return Screen(
        ScreenKind.PAUSE,
        {"title": _title("Paused", screen_w, 70), "pause_panel": panel},
    )


def victory(screen_w: int, screen_h: int) -> Screen:
    """The screen shown on reaching the goal."""
    panel = _button_panel(
        _panel_rect(screen_w, 220.0),
        DARKGREEN,
        (
            ("victory_next", "Next Level", DARKGREEN, GREEN),
            ("victory_restart", "Replay Level", GRAY, LIGHTGRAY),
            ("victory_menu", "Main Menu", MAROON, RED),
        ),
    )
    return Screen(
        ScreenKind.VICTORY,
        {"title": _title("You escaped the maze!", screen_w, 180), "victory_panel": panel},
    )


def defeat(screen_w: int, screen_h: int) -> Screen:
    """The screen shown when health runs out."""
    panel = _button_panel(
        _panel_rect(screen_w, 220.0),
        DARKGRAY,
        (
            ("defeat_restart", "Retry Level", GRAY, LIGHTGRAY),
            ("defeat_menu", "Main Menu", DARKBLUE, BLUE),
            ("defeat_quit", "Quit", MAROON, RED),
        ),
    )
    return Screen(
        ScreenKind.DEFEAT,
        {"title": _title("You got lost in the maze!", screen_w, 200), "defeat_panel": panel},
    )