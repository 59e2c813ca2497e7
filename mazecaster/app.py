"""The game window: input gathering, rendering and the main loop."""

from __future__ import annotations

import argparse
import functools
import time
from typing import Optional, Sequence, Tuple

import pygame

from mazecaster.framebuffer import (
    BLACK,
    DARKGRAY,
    GREEN,
    YELLOW,
    Color,
    Framebuffer,
)
from mazecaster.game import AppState, FrameInput
from mazecaster.player import MovementInput
from mazecaster.render import render_minimap, render_world
from mazecaster.screens import ScreenKind
from mazecaster.sprite import draw_sprite
from mazecaster.textures import load_texture_manager

WINDOW_TITLE = "Raycaster Example"
DEFAULT_WIDTH = 900
DEFAULT_HEIGHT = 600
DEFAULT_BLOCK_SIZE = 100
BACKGROUND = Color(50, 50, 100, 255)
MUSIC_FILE = "assets/video0.MP3"
DAMAGE_SOUND_FILE = "assets/hit1.ogg"
FRAME_SLEEP = 0.008

HUD_MARGIN = 10
FPS_FONT_SIZE = 20
HEART_FONT_SIZE = 30


@functools.lru_cache(maxsize=None)
def _font(size: int) -> "pygame.font.Font":
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _mouse_pos() -> Tuple[int, int]:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return pygame.mouse.get_pos()
    return (0, 0)


def draw_hud(surface: pygame.Surface, state: AppState, fps: int) -> None:
    """Draw the screen overlay, FPS counter, health hearts and damage flash."""
    state.current_screen.draw(surface, _mouse_pos())

    width, height = state.width, state.height

    fps_font = _font(FPS_FONT_SIZE)
    fps_text = f"FPS: {fps}"
    fps_width = fps_font.size(fps_text)[0]
    surface.blit(
        fps_font.render(fps_text, True, YELLOW),
        (width - fps_width - HUD_MARGIN, height - HUD_MARGIN - 20),
    )

    heart_font = _font(HEART_FONT_SIZE)
    hearts_y = height - HEART_FONT_SIZE - HUD_MARGIN
    for i in range(state.max_health):
        color = GREEN if i < state.player.health else DARKGRAY
        surface.blit(
            heart_font.render("*", True, color),
            (HUD_MARGIN + i * HEART_FONT_SIZE, hearts_y),
        )

    alpha = state.cooldown_alpha()
    if alpha > 0:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((255, 0, 0, alpha))
        surface.blit(overlay, (0, 0))


def present(
    surface: pygame.Surface, framebuffer: Framebuffer, state: AppState, fps: int
) -> None:
    """Copy the framebuffer onto a surface and add the HUD while playing."""
    surface.blit(framebuffer.to_surface(), (0, 0))
    if state.is_playing:
        draw_hud(surface, state, fps)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazecaster", description="A maze raycaster game.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    return parser.parse_args(argv)


def _apply_cursor(state: AppState, was_captured: bool, window: pygame.Surface) -> bool:
    captured = not state.enabled_cursor
    if captured != was_captured:
        pygame.mouse.set_visible(not captured)
        pygame.event.set_grab(captured)
        if captured:
            pygame.mouse.set_pos(window.get_width() // 2, window.get_height() // 2)
        pygame.mouse.get_rel()
    return captured


def _movement(captured: bool) -> MovementInput:
    keys = pygame.key.get_pressed()
    rel_x = pygame.mouse.get_rel()[0]
    return MovementInput(
        rotate_left=keys[pygame.K_LEFT],
        rotate_right=keys[pygame.K_RIGHT],
        forward=keys[pygame.K_UP] or keys[pygame.K_w],
        backward=keys[pygame.K_DOWN] or keys[pygame.K_s],
        strafe_right=keys[pygame.K_d],
        strafe_left=keys[pygame.K_a],
        mouse_dx=float(rel_x) if captured else 0.0,
    )


def _run(
    window: pygame.Surface,
    state: AppState,
    framebuffer: Framebuffer,
    damage_sound: "pygame.mixer.Sound",
    block_size: int,
) -> None:
    clock = pygame.time.Clock()
    started = time.perf_counter()
    frame_time = 0.0
    captured = False
    should_close = False

    while not should_close and not state.close_window:
        escape_pressed = False
        mouse_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_close = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                escape_pressed = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True
        if should_close:
            break

        frame = FrameInput(
            mouse_pos=pygame.mouse.get_pos(),
            mouse_pressed=mouse_pressed,
            escape_pressed=escape_pressed,
            frame_time=frame_time,
            time=time.perf_counter() - started,
            movement=_movement(captured),
        )
        state.handle_input(frame)
        captured = _apply_cursor(state, captured, window)
        if state.close_window:
            break

        if state.hit_frame:
            damage_sound.play()
            state.hit_frame = False

        fps = int(clock.get_fps())
        kind = state.current_screen.kind
        if kind is ScreenKind.GAME:
            framebuffer.clear()
            maze = state.current_maze
            render_world(framebuffer, state.player, maze, block_size)
            for enemy in state.enemies:
                draw_sprite(framebuffer, state.player, enemy, state.texture_manager)
            render_minimap(
                framebuffer, maze, int(state.block_size), state.player, state.enemies
            )
            present(window, framebuffer, state, fps)
        elif kind is ScreenKind.MAIN_MENU:
            window.fill(BACKGROUND)
            state.current_screen.draw(window, pygame.mouse.get_pos())
        else:
            state.current_screen.draw(window, pygame.mouse.get_pos())

        pygame.display.flip()
        time.sleep(FRAME_SLEEP)
        frame_time = clock.tick() / 1000.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    block_size = DEFAULT_BLOCK_SIZE

    pygame.init()
    try:
        window = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(WINDOW_TITLE)

        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(MUSIC_FILE)
        pygame.mixer.music.play(-1)
        damage_sound = pygame.mixer.Sound(DAMAGE_SOUND_FILE)

        framebuffer = Framebuffer(args.width, args.height, BLACK)
        framebuffer.set_background_color(BACKGROUND)

        texture_manager = load_texture_manager()
        state = AppState(args.width, args.height, float(block_size), texture_manager)

        _run(window, state, framebuffer, damage_sound, block_size)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())