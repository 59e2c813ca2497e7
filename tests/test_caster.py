import math

from mazecaster.caster import cast_ray
from mazecaster.framebuffer import BLACK, WHITE, Framebuffer
from mazecaster.maze import parse_maze
from mazecaster.player import Player

BLOCK = 100
MAZE = parse_maze("+++++\n+   +\n+   +\n+++++\n")


def make_fb():
    return Framebuffer(5 * BLOCK, 4 * BLOCK, BLACK)


def test_hits_east_wall():
    player = Player(150, 150)
    hit = cast_ray(make_fb(), MAZE, player, 0.0, BLOCK, False)
    assert hit.impact == "+"
    assert int((player.x + hit.distance) / BLOCK) == 4
    assert int((player.x + hit.distance - 1.0) / BLOCK) == 3


def test_texture_column_on_vertical_face():
    hit = cast_ray(make_fb(), MAZE, Player(150, 150), 0.0, BLOCK, False)
    assert hit.tx == 64


def test_texture_column_in_range_for_many_angles():
    player = Player(170, 230)
    for step in range(16):
        hit = cast_ray(make_fb(), MAZE, player, step * math.pi / 8, BLOCK, False)
        assert hit.impact == "+"
        assert 0 <= hit.tx < 128


def test_hits_north_wall():
    player = Player(250, 250)
    hit = cast_ray(make_fb(), MAZE, player, -math.pi / 2, BLOCK, False)
    assert hit.impact == "+"
    assert int((player.y - hit.distance) / BLOCK) == 0


def test_reports_goal_cell():
    maze = parse_maze("+++++\n+  g+\n+++++\n")
    hit = cast_ray(make_fb(), maze, Player(150, 150), 0.0, BLOCK, False)
    assert hit.impact == "g"


def test_start_cell_is_transparent():
    maze = parse_maze("+++++\n+ s +\n+++++\n")
    player = Player(150, 150)
    hit = cast_ray(make_fb(), maze, player, 0.0, BLOCK, False)
    assert int((player.x + hit.distance) / BLOCK) == 4


def test_open_maze_misses():
    maze = parse_maze("    \n    \n")
    hit = cast_ray(make_fb(), maze, Player(5, 5), 0.0, 10, False)
    assert hit.distance == 10 * 200.0
    assert hit.impact == " "
    assert hit.tx == 0


def test_draw_marks_ray_path():
    fb = make_fb()
    cast_ray(fb, MAZE, Player(150, 150), 0.0, BLOCK, True)
    assert fb.get_color(150, 150) == WHITE
    assert fb.get_color(399, 150) == WHITE
    assert fb.get_color(400, 150) == BLACK
    assert fb.get_color(150, 151) == BLACK


def test_no_draw_leaves_framebuffer():
    fb = make_fb()
    cast_ray(fb, MAZE, Player(150, 150), 0.0, BLOCK, False)
    assert fb.get_color(200, 150) == BLACK