import pytest

from raycube.constants import HEIGHT, WIDTH
from raycube.player import Player
from raycube.rays import Ray
from raycube.render import (
    BACKGROUND_COLOR,
    DIRECTION_COLOR,
    MINIMAP_EMPTY_COLOR,
    MINIMAP_WALL_COLOR,
    PLAYER_COLOR,
    RAY_COLOR,
    SHADED_WALL_COLOR,
    WALL_COLOR,
    Renderer,
    wall_color,
    wall_span,
)


def pixel(renderer, x, y):
    color = renderer.surface.get_at((x, y))
    return (color.r << 16) | (color.g << 8) | color.b


def make_ray(distance=1.0, down=True, left=False, kind=1, angle=0.0,
             origin=(50.0, 50.0), hit=(50.0, 50.0)):
    return Ray(
        angle=angle,
        origin_x=origin[0],
        origin_y=origin[1],
        down=down,
        left=left,
        wall_hit_x=hit[0],
        wall_hit_y=hit[1],
        distance=distance,
        type=kind,
    )


def test_wall_span_near_fills_column():
    assert wall_span(1.0) == (0, HEIGHT - 1)


def test_wall_span_zero_distance_fills_column():
    assert wall_span(0.0) == (0, HEIGHT - 1)


@pytest.mark.parametrize("distance", [5.0, 20.0, 50.0, 200.0, 9999.0])
def test_wall_span_within_screen_and_centred(distance):
    top, bottom = wall_span(distance)
    assert 0 <= top <= bottom <= HEIGHT - 1
    assert top <= HEIGHT // 2 <= bottom


def test_wall_span_shrinks_with_distance():
    heights = [b - t for t, b in (wall_span(d) for d in (10.0, 30.0, 90.0, 270.0))]
    assert heights == sorted(heights, reverse=True)
    assert heights[0] > heights[-1]


def test_wall_color_shaded_for_upward_horizontal_hit():
    assert wall_color(make_ray(down=False, kind=2)) == SHADED_WALL_COLOR


@pytest.mark.parametrize("down,kind", [(True, 2), (False, 1), (True, 1)])
def test_wall_color_plain(down, kind):
    assert wall_color(make_ray(down=down, kind=kind)) == WALL_COLOR


def test_paint_background_clears_surface():
    renderer = Renderer()
    renderer.surface.fill((10, 20, 30))
    renderer.paint_background()
    assert pixel(renderer, 0, 0) == BACKGROUND_COLOR
    assert pixel(renderer, WIDTH - 1, HEIGHT - 1) == BACKGROUND_COLOR


def test_paint_walls_columns():
    renderer = Renderer()
    rays = [
        make_ray(distance=1.0),
        make_ray(distance=9999.0),
        make_ray(distance=1.0, down=False, kind=2),
    ]
    renderer.paint_walls(rays)
    assert pixel(renderer, 0, HEIGHT // 2) == WALL_COLOR
    assert pixel(renderer, 0, 0) == WALL_COLOR
    assert pixel(renderer, 0, HEIGHT - 1) == BACKGROUND_COLOR
    assert pixel(renderer, 1, HEIGHT // 2) == BACKGROUND_COLOR
    assert pixel(renderer, 2, HEIGHT // 2) == SHADED_WALL_COLOR
    assert pixel(renderer, 3, HEIGHT // 2) == BACKGROUND_COLOR


def test_render_player_draws_square():
    renderer = Renderer()
    renderer.render_player(Player(x=30.0, y=40.0))
    for x, y in ((30, 40), (31, 40), (30, 41), (31, 41)):
        assert pixel(renderer, x, y) == PLAYER_COLOR
    assert pixel(renderer, 32, 40) == BACKGROUND_COLOR


def test_render_direction_draws_heading():
    renderer = Renderer()
    renderer.surface.fill((0, 0, 255))
    renderer.render_direction(Player(x=100.0, y=100.0, rotation=0.0))
    assert pixel(renderer, 101, 100) == DIRECTION_COLOR
    assert pixel(renderer, 119, 100) == DIRECTION_COLOR
    assert pixel(renderer, 120, 100) == 0x0000FF
    assert pixel(renderer, 100, 101) == 0x0000FF


def test_render_ray_reaches_wall_hit():
    renderer = Renderer()
    player = Player(x=50.0, y=50.0, rotation=0.0)
    ray = make_ray(angle=0.0, hit=(60.0, 50.0))
    renderer.render_ray(player, ray)
    assert pixel(renderer, 51, 50) == RAY_COLOR
    assert pixel(renderer, 60, 50) == RAY_COLOR
    assert pixel(renderer, 70, 50) == BACKGROUND_COLOR
    assert pixel(renderer, 50, 51) == BACKGROUND_COLOR


def test_render_ray_ignores_offscreen_pixels():
    renderer = Renderer()
    player = Player(x=WIDTH - 2.0, y=10.0, rotation=0.0)
    ray = make_ray(angle=0.0, origin=(WIDTH - 2.0, 10.0), hit=(WIDTH + 20.0, 10.0))
    renderer.render_ray(player, ray)
    assert pixel(renderer, WIDTH - 1, 10) == RAY_COLOR


def test_paint_mini_map_tiles():
    renderer = Renderer()
    grid = ["11", "10"]
    player = Player(x=20.0, y=20.0, rotation=0.0)
    ray = make_ray(angle=0.0, origin=(20.0, 20.0), hit=(20.0, 20.0))
    renderer.paint_mini_map(grid, player, [ray])
    assert pixel(renderer, 8, 8) == MINIMAP_WALL_COLOR
    assert pixel(renderer, 8, 24) == MINIMAP_WALL_COLOR
    assert pixel(renderer, 0, 0) == MINIMAP_EMPTY_COLOR
    assert pixel(renderer, 16, 8) == MINIMAP_EMPTY_COLOR
    assert pixel(renderer, 24, 28) == MINIMAP_EMPTY_COLOR
    assert pixel(renderer, 20, 21) == PLAYER_COLOR
    assert pixel(renderer, 25, 20) == DIRECTION_COLOR
    assert pixel(renderer, 40, 40) == BACKGROUND_COLOR


def test_paint_mini_map_short_rows_stop_early():
    renderer = Renderer()
    renderer.surface.fill((0, 0, 255))
    grid = ["111", "1"]
    player = Player(x=200.0, y=200.0, rotation=0.0)
    renderer.paint_mini_map(grid, player, [])
    assert pixel(renderer, 40, 8) == MINIMAP_WALL_COLOR
    assert pixel(renderer, 8, 24) == MINIMAP_WALL_COLOR
    assert pixel(renderer, 40, 24) == 0x0000FF