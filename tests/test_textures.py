import pygame
import pytest

from mazecaster.framebuffer import WHITE, Color
from mazecaster.textures import Image, TextureManager, load_image, load_texture_manager

A = Color(10, 20, 30)
B = Color(40, 50, 60)
C = Color(70, 80, 90)
D = Color(100, 110, 120)
E = Color(1, 2, 3)
F = Color(4, 5, 6)


def sample():
    # 3 wide, 2 high
    return Image(3, 2, [A, B, C, D, E, F])


def test_wrong_pixel_count():
    with pytest.raises(ValueError):
        Image(2, 2, [A, B, C])


def test_get_pixel_in_range():
    img = sample()
    assert img.get_pixel(0, 0) == A
    assert img.get_pixel(2, 0) == C
    assert img.get_pixel(1, 1) == E


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_get_pixel_out_of_range_is_white(x, y):
    assert sample().get_pixel(x, y) == WHITE


def test_rotate_ccw_swaps_dimensions():
    img = sample()
    img.rotate_ccw()
    assert (img.width, img.height) == (2, 3)


def test_rotate_ccw_moves_top_right_to_top_left():
    img = Image(2, 1, [A, B])
    img.rotate_ccw()
    assert img.pixels == [B, A]


def test_rotate_ccw_left_column_becomes_bottom_row():
    img = sample()
    img.rotate_ccw()
    assert [img.get_pixel(x, 2) for x in range(2)] == [A, D]


def test_four_rotations_restore_image():
    img = sample()
    for _ in range(4):
        img.rotate_ccw()
    assert img == sample()


def test_manager_clamps_coordinates():
    tm = TextureManager({"e": sample()})
    assert tm.get_pixel_color("e", 99, 0) == C
    assert tm.get_pixel_color("e", 0, 99) == D
    assert tm.get_pixel_color("e", 1, 0) == B


def test_manager_unknown_key_is_white():
    tm = TextureManager({"e": sample()})
    assert tm.get_pixel_color("#", 0, 0) == WHITE


def test_rotate_images_rotates_all():
    tm = TextureManager({"e": sample(), "#": Image(2, 1, [A, B])})
    tm.rotate_images()
    assert (tm.images["e"].width, tm.images["e"].height) == (2, 3)
    assert tm.images["#"].pixels == [B, A]


def write_bmp(path, colors, width, height):
    surface = pygame.Surface((width, height))
    for index, color in enumerate(colors):
        surface.set_at((index % width, index // width), color[:3])
    pygame.image.save(surface, str(path))


def test_load_image_round_trip(tmp_path):
    path = tmp_path / "tex.bmp"
    write_bmp(path, [A, B, C, D], 2, 2)
    img = load_image(path)
    assert (img.width, img.height) == (2, 2)
    assert [p[:3] for p in img.pixels] == [tuple(c)[:3] for c in (A, B, C, D)]


def test_load_texture_manager(tmp_path):
    first = tmp_path / "one.bmp"
    second = tmp_path / "two.bmp"
    write_bmp(first, [A], 1, 1)
    write_bmp(second, [B, C], 2, 1)
    tm = load_texture_manager([("e", first), ("#", second)])
    assert sorted(tm.images) == ["#", "e"]
    assert tm.get_pixel_color("#", 1, 0)[:3] == tuple(C)[:3]