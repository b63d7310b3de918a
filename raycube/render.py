"""Drawing of the 3D view, the minimap, the player and rays onto a surface."""

import math
from typing import Optional, Sequence, Tuple

import pygame

from raycube.constants import HEIGHT, PI, TILE_SIZE, WIDTH
from raycube.mapgrid import longest_line
from raycube.player import Player
from raycube.rays import Ray

BACKGROUND_COLOR = 0x000000
WALL_COLOR = 0xFF0000
SHADED_WALL_COLOR = 0xFFFF00
MINIMAP_WALL_COLOR = 0xFFFFFF
MINIMAP_EMPTY_COLOR = 0x777777
RAY_COLOR = 0x00FF00
PLAYER_COLOR = 0xFF0000
DIRECTION_COLOR = 0xFF0000

_HORIZONTAL_HIT = 2
_TILE_HEIGHT = 25
_PROJECTION = (WIDTH // 2) * math.tan((PI / 180) * 30)
_DIRECTION_LENGTH = 20


def _rgb(color: int) -> Tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def wall_span(distance: float) -> Tuple[int, int]:
    """Return the first and the end row of the wall slice seen at distance.

    Rows from the first up to, but not including, the end row are painted.
    """
    if distance <= 0:
        return 0, HEIGHT - 1
    wall_height = _TILE_HEIGHT / distance * _PROJECTION
    top = HEIGHT // 2 - math.floor(wall_height / 2)
    bottom = int(top + wall_height)
    return max(top, 0), min(bottom, HEIGHT - 1)


def wall_color(ray: Ray) -> int:
    """Colour of the wall slice a ray hit: shaded for upward horizontal hits."""
    if not ray.down and ray.type == _HORIZONTAL_HIT:
        return SHADED_WALL_COLOR
    return WALL_COLOR


class Renderer:
    """Paints the game onto a pygame surface."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface if surface is not None else pygame.Surface((WIDTH, HEIGHT))

    def _put(self, x: float, y: float, color: int) -> None:
        column, row = int(x), int(y)
        width, height = self.surface.get_size()
        if 0 <= column < width and 0 <= row < height:
            self.surface.set_at((column, row), _rgb(color))

    def paint_background(self) -> None:
        """Fill the whole surface with the background colour."""
        self.surface.fill(_rgb(BACKGROUND_COLOR))

    def paint_walls(self, rays: Sequence[Ray]) -> None:
        """Clear the view and paint one wall slice per ray, column by column."""
        self.paint_background()
        for column, ray in enumerate(rays):
            top, bottom = wall_span(ray.distance)
            color = wall_color(ray)
            for row in range(top, bottom):
                self._put(column, row, color)

    def paint_mini_map(
        self, grid: Sequence[str], player: Player, rays: Sequence[Ray]
    ) -> None:
        """Paint the map tiles, the player, the first ray and the heading."""
        x_size = longest_line(grid) * TILE_SIZE
        y_size = len(grid) * TILE_SIZE
        px, py = math.floor(player.x), math.floor(player.y)
        player_cells = {(px, py), (px + 1, py), (px, py + 1), (px + 1, py + 1)}
        painted = False
        for y in range(y_size):
            row_index = y // TILE_SIZE
            if row_index >= len(grid):
                break
            row = grid[row_index]
            for x in range(x_size):
                column = x // TILE_SIZE
                if column >= len(row):
                    break
                if (x, y) in player_cells:
                    self.render_player(player)
                elif x % TILE_SIZE and y % TILE_SIZE and row[column] == "1":
                    self._put(x, y, MINIMAP_WALL_COLOR)
                else:
                    self._put(x, y, MINIMAP_EMPTY_COLOR)
            painted = True
        if painted:
            if rays:
                self.render_ray(player, rays[0])
            self.render_direction(player)

    def render_ray(self, player: Player, ray: Ray) -> None:
        """Draw a ray from the player towards the point where it hit a wall."""
        cos_a, sin_a = math.cos(ray.angle), math.sin(ray.angle)

        def before_hit(x: float, y: float) -> bool:
            x_ok = x >= ray.wall_hit_x if ray.left else x <= ray.wall_hit_x
            y_ok = y <= ray.wall_hit_y if ray.down else y >= ray.wall_hit_y
            return x_ok and y_ok

        limit = int(abs(ray.wall_hit_x - player.x) + abs(ray.wall_hit_y - player.y)) + 2
        x, y = player.x, player.y
        step = 1
        while step <= limit and before_hit(x, y):
            x = player.x + cos_a * step
            y = player.y + sin_a * step
            self._put(math.floor(x), math.floor(y), RAY_COLOR)
            step += 1

    def render_direction(self, player: Player) -> None:
        """Draw a short line in the direction the player faces."""
        cos_r, sin_r = math.cos(player.rotation), math.sin(player.rotation)
        for step in range(1, _DIRECTION_LENGTH):
            self._put(
                math.floor(player.x + cos_r * step),
                math.floor(player.y + sin_r * step),
                DIRECTION_COLOR,
            )

    def render_player(self, player: Player) -> None:
        """Draw the player as a two by two square of pixels."""
        for dx, dy in ((0, 0), (0, 1), (1, 0), (1, 1)):
            self._put(player.x + dx, player.y + dy, PLAYER_COLOR)