"""Immediate-mode GUI widgets: buttons, labels, panels and screens."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Tuple

import pygame

from mazecaster.framebuffer import WHITE, Color

Point = Tuple[float, float]

BUTTON_FONT_SIZE = 20
_ROUNDNESS = 0.3


@functools.lru_cache(maxsize=None)
def _font(size: int) -> "pygame.font.Font":
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Whether a point lies inside the rectangle, edges included."""
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )

    def _to_pygame(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


class Element(ABC):
    """Something that reacts to the mouse each frame and draws itself."""

    @abstractmethod
    def update(self, mouse_pos: Point, mouse_pressed: bool) -> None:
        """React to this frame's mouse position and left-button press."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, mouse_pos: Point) -> None:
        """Draw onto a surface; the mouse position drives hover feedback."""


class Button(Element):
    """A clickable rectangle with optional centred text."""

    def __init__(
        self,
        rect: Rect,
        text: Optional[str],
        color: Color,
        hover_color: Color,
    ) -> None:
        self.rect = rect
        self.text = text
        self.color = Color(*color)
        self.hover_color = Color(*hover_color)
        self.clicked = False
        self.is_rounded = False
        self.selected = False

    def update(self, mouse_pos: Point, mouse_pressed: bool) -> None:
        hovered = self.rect.contains(mouse_pos)
        self.clicked = hovered and mouse_pressed
        if mouse_pressed:
            self.selected = hovered

    def draw(self, surface: pygame.Surface, mouse_pos: Point) -> None:
        highlighted = self.rect.contains(mouse_pos) or self.selected
        fill = self.hover_color if highlighted else self.color
        radius = 0
        if self.is_rounded:
            radius = int(_ROUNDNESS * min(self.rect.width, self.rect.height) / 2)
        pygame.draw.rect(surface, fill, self.rect._to_pygame(), border_radius=radius)

        if self.text:
            font = _font(BUTTON_FONT_SIZE)
            text_width = font.size(self.text)[0]
            x = self.rect.x + (self.rect.width - text_width) / 2.0
            y = self.rect.y + (self.rect.height - BUTTON_FONT_SIZE) / 2.0
            surface.blit(font.render(self.text, True, WHITE), (int(x), int(y)))


@dataclass
class Label(Element):
    """Static text at a fixed position."""

    text: str
    position: Point
    font_size: int
    color: Color

    def update(self, mouse_pos: Point, mouse_pressed: bool) -> None:
        """Labels do not react to input."""

    def draw(self, surface: pygame.Surface, mouse_pos: Point) -> None:
        image = _font(self.font_size).render(self.text, True, self.color)
        surface.blit(image, (int(self.position[0]), int(self.position[1])))


class Panel(Element):
    """A rectangle, optionally filled, holding child elements by id."""

    def __init__(self, rect: Rect, background_color: Optional[Color] = None) -> None:
        self.rect = rect
        self.background_color = (
            None if background_color is None else Color(*background_color)
        )
        self.elements: Dict[str, Element] = {}

    def add_element(self, element_id: str, element: Element) -> None:
        """Add a child, replacing any with the same id."""
        self.elements[element_id] = element

    def update(self, mouse_pos: Point, mouse_pressed: bool) -> None:
        for element in self.elements.values():
            element.update(mouse_pos, mouse_pressed)

    def draw(self, surface: pygame.Surface, mouse_pos: Point) -> None:
        if self.background_color is not None:
            pygame.draw.rect(surface, self.background_color, self.rect._to_pygame())
        for element in self.elements.values():
            element.draw(surface, mouse_pos)


class Screen(Element):
    """A full screen of elements with an optional background image."""

    def __init__(
        self,
        kind: Hashable,
        elements: Optional[Dict[str, Element]] = None,
        background: Optional[pygame.Surface] = None,
    ) -> None:
        self.kind = kind
        self.elements: Dict[str, Element] = dict(elements or {})
        self.background = background

    def update(self, mouse_pos: Point, mouse_pressed: bool) -> None:
        for element in self.elements.values():
            element.update(mouse_pos, mouse_pressed)

    def draw(self, surface: pygame.Surface, mouse_pos: Point) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for element in self.elements.values():
            element.draw(surface, mouse_pos)