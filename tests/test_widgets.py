import pygame
import pytest

from mazecaster.framebuffer import BLACK, BLUE, GREEN, RED, WHITE, Color
from mazecaster.widgets import Button, Label, Panel, Rect, Screen


def _surface(w=100, h=100):
    surface = pygame.Surface((w, h))
    surface.fill(BLACK)
    return surface


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))


@pytest.mark.parametrize(
    "point, inside",
    [
        ((10, 20), True),
        ((40, 60), True),
        ((25, 30), True),
        ((9, 20), False),
        ((41, 60), False),
        ((20, 61), False),
    ],
)
def test_rect_contains_includes_edges(point, inside):
    assert Rect(10, 20, 30, 40).contains(point) is inside


def test_button_starts_unclicked():
    button = Button(Rect(0, 0, 10, 10), "x", RED, GREEN)
    assert (button.clicked, button.selected, button.is_rounded) == (False, False, False)


def test_button_click_inside_sets_clicked_and_selected():
    button = Button(Rect(0, 0, 10, 10), None, RED, GREEN)
    button.update((5, 5), True)
    assert button.clicked is True
    assert button.selected is True


def test_button_click_clears_on_next_frame_but_stays_selected():
    button = Button(Rect(0, 0, 10, 10), None, RED, GREEN)
    button.update((5, 5), True)
    button.update((5, 5), False)
    assert button.clicked is False
    assert button.selected is True


def test_button_press_outside_deselects():
    button = Button(Rect(0, 0, 10, 10), None, RED, GREEN)
    button.update((5, 5), True)
    button.update((50, 50), True)
    assert button.clicked is False
    assert button.selected is False


def test_button_hover_without_press_does_not_click():
    button = Button(Rect(0, 0, 10, 10), None, RED, GREEN)
    button.update((5, 5), False)
    assert button.clicked is False
    assert button.selected is False


def test_label_update_changes_nothing():
    label = Label("hi", (1.0, 2.0), 20, WHITE)
    label.update((1, 2), True)
    assert label == Label("hi", (1.0, 2.0), 20, WHITE)


def test_panel_forwards_update_to_children():
    panel = Panel(Rect(0, 0, 100, 100), None)
    button = Button(Rect(10, 10, 20, 20), "b", RED, GREEN)
    panel.add_element("b", button)
    panel.update((15, 15), True)
    assert button.clicked is True


def test_panel_add_element_replaces_same_id():
    panel = Panel(Rect(0, 0, 100, 100))
    first = Label("a", (0, 0), 10, WHITE)
    second = Label("b", (0, 0), 10, WHITE)
    panel.add_element("x", first)
    panel.add_element("x", second)
    assert list(panel.elements) == ["x"]
    assert panel.elements["x"] is second


def test_screen_forwards_update_through_nested_panels():
    button = Button(Rect(10, 10, 20, 20), "b", RED, GREEN)
    panel = Panel(Rect(0, 0, 100, 100))
    panel.add_element("b", button)
    screen = Screen("menu", {"panel": panel})
    screen.update((15, 15), True)
    assert button.clicked is True
    screen.update((90, 90), True)
    assert button.clicked is False


def test_screen_defaults_to_no_elements():
    screen = Screen("kind")
    assert screen.elements == {}
    assert screen.background is None
    assert screen.kind == "kind"


def test_button_draw_uses_base_color_when_not_hovered():
    surface = _surface()
    Button(Rect(10, 10, 30, 30), None, RED, GREEN).draw(surface, (90, 90))
    assert _pixel(surface, 20, 20) == tuple(RED)
    assert _pixel(surface, 5, 5) == tuple(BLACK)


def test_button_draw_uses_hover_color_when_hovered():
    surface = _surface()
    Button(Rect(10, 10, 30, 30), None, RED, GREEN).draw(surface, (20, 20))
    assert _pixel(surface, 20, 20) == tuple(GREEN)


def test_selected_button_draws_hover_color():
    surface = _surface()
    button = Button(Rect(10, 10, 30, 30), None, RED, GREEN)
    button.update((20, 20), True)
    button.draw(surface, (90, 90))
    assert _pixel(surface, 20, 20) == tuple(GREEN)


def test_rounded_button_leaves_corner_unpainted():
    surface = _surface()
    button = Button(Rect(10, 10, 40, 40), None, RED, GREEN)
    button.is_rounded = True
    button.draw(surface, (90, 90))
    assert _pixel(surface, 10, 10) == tuple(BLACK)
    assert _pixel(surface, 30, 30) == tuple(RED)


def test_panel_draws_background():
    surface = _surface()
    Panel(Rect(0, 0, 50, 50), BLUE).draw(surface, (99, 99))
    assert _pixel(surface, 25, 25) == tuple(BLUE)
    assert _pixel(surface, 75, 75) == tuple(BLACK)


def test_panel_without_background_leaves_surface():
    surface = _surface()
    Panel(Rect(0, 0, 50, 50), None).draw(surface, (99, 99))
    assert _pixel(surface, 25, 25) == tuple(BLACK)


def test_screen_blits_background():
    surface = _surface()
    background = pygame.Surface((100, 100))
    background.fill(Color(10, 20, 30))
    Screen("k", {}, background).draw(surface, (0, 0))
    assert _pixel(surface, 50, 50) == (10, 20, 30, 255)


def test_label_draw_paints_text():
    surface = _surface(200, 60)
    Label("HELLO", (5.0, 5.0), 40, WHITE).draw(surface, (0, 0))
    painted = {_pixel(surface, x, y) for x in range(200) for y in range(60)}
    assert tuple(WHITE) in painted
    assert _pixel(surface, 0, 0) == tuple(BLACK)