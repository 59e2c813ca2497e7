from mazecaster.framebuffer import BLACK, WHITE, Framebuffer
from mazecaster.line import line


def drawn(fb):
    return {
        (x, y)
        for y in range(fb.height)
        for x in range(fb.width)
        if fb.get_color(x, y) == WHITE
    }


def make_fb():
    return Framebuffer(8, 8, BLACK)


def test_horizontal_line():
    fb = make_fb()
    line(fb, (0, 1), (3, 1))
    assert drawn(fb) == {(0, 1), (1, 1), (2, 1), (3, 1)}


def test_single_point():
    fb = make_fb()
    line(fb, (4, 5), (4, 5))
    assert drawn(fb) == {(4, 5)}


def test_diagonal_line():
    fb = make_fb()
    line(fb, (0, 0), (3, 3))
    assert drawn(fb) == {(0, 0), (1, 1), (2, 2), (3, 3)}


def test_float_coordinates_truncate():
    fb = make_fb()
    line(fb, (0.9, 2.7), (2.2, 2.1))
    assert drawn(fb) == {(0, 2), (1, 2), (2, 2)}


def test_steep_line_has_endpoints_and_one_pixel_per_row():
    fb = make_fb()
    line(fb, (1, 0), (3, 7))
    pixels = drawn(fb)
    assert (1, 0) in pixels and (3, 7) in pixels
    assert sorted(y for _, y in pixels) == list(range(8))


def test_negative_part_is_clipped():
    fb = make_fb()
    line(fb, (-2, 0), (2, 0))
    assert drawn(fb) == {(0, 0), (1, 0), (2, 0)}


def test_off_screen_end_is_clipped():
    fb = make_fb()
    line(fb, (6, 3), (10, 3))
    assert drawn(fb) == {(6, 3), (7, 3)}