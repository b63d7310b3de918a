"""Ray casting against the map grid."""

import math
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from raycube.constants import PI, TILE_SIZE, WIDTH
from raycube.player import Player, collision, normalize_angle

_NO_HIT = 9999.0
_VERTICAL = 1
_HORIZONTAL = 2
_FIELD_OF_VIEW = (PI / 180) * 60


@dataclass
class Ray:
    """A cast ray: where it started, where it hit a wall and how far that was."""

    angle: float
    origin_x: float
    origin_y: float
    down: bool
    left: bool
    wall_hit_x: float
    wall_hit_y: float
    distance: float = _NO_HIT
    type: int = 0


def ray_direction(angle: float) -> Tuple[bool, bool]:
    """Return (down, left) for a ray cast at angle."""
    down = angle < PI
    left = PI / 2 < angle < 3 * (PI / 2)
    return down, left


def within_limits(x: float, y: float, width: float, height: float) -> bool:
    """True when the point lies inside the map area."""
    return 0 <= x < width and 0 <= y < height


def _march(
    grid: Sequence[str],
    x: float,
    y: float,
    x_step: float,
    y_step: float,
    width: float,
    height: float,
) -> Optional[Tuple[float, float]]:
    while within_limits(x, y, width, height):
        if collision(x, y, grid):
            return x, y
        x += x_step
        y += y_step
    return None


def _new_ray(origin_x: float, origin_y: float, angle: float) -> Ray:
    down, left = ray_direction(angle)
    return Ray(
        angle=angle,
        origin_x=origin_x,
        origin_y=origin_y,
        down=down,
        left=left,
        wall_hit_x=origin_x,
        wall_hit_y=origin_y,
    )


def _record_hit(ray: Ray, hit: Optional[Tuple[float, float]]) -> Ray:
    if hit is not None:
        ray.wall_hit_x, ray.wall_hit_y = hit
        ray.distance = abs(ray.wall_hit_x - ray.origin_x) + abs(
            ray.wall_hit_y - ray.origin_y
        )
    return ray


def cast_horizontal(
    grid: Sequence[str],
    origin_x: float,
    origin_y: float,
    angle: float,
    width: float,
    height: float,
) -> Ray:
    """Cast a ray that checks the horizontal grid lines it crosses."""
    ray = _new_ray(origin_x, origin_y, angle)
    tangent = math.tan(angle)
    if tangent == 0:
        return ray
    y_intercept = math.floor(origin_y / TILE_SIZE) * TILE_SIZE
    if ray.down:
        y_intercept += TILE_SIZE
    x_intercept = origin_x + (y_intercept - origin_y) / tangent
    y_step = TILE_SIZE if ray.down else -TILE_SIZE
    x_step = TILE_SIZE / tangent
    if (ray.left and x_step > 0) or (not ray.left and x_step < 0):
        x_step = -x_step
    if not ray.down:
        y_intercept -= 1
    hit = _march(grid, x_intercept, y_intercept, x_step, y_step, width, height)
    return _record_hit(ray, hit)


def cast_vertical(
    grid: Sequence[str],
    origin_x: float,
    origin_y: float,
    angle: float,
    width: float,
    height: float,
) -> Ray:
    """Cast a ray that checks the vertical grid lines it crosses."""
    ray = _new_ray(origin_x, origin_y, angle)
    tangent = math.tan(angle)
    x_intercept = math.floor(origin_x / TILE_SIZE) * TILE_SIZE
    if not ray.left:
        x_intercept += TILE_SIZE
    y_intercept = origin_y + (x_intercept - origin_x) * tangent
    x_step = -TILE_SIZE if ray.left else TILE_SIZE
    y_step = TILE_SIZE * tangent
    if (not ray.down and y_step > 0) or (ray.down and y_step < 0):
        y_step = -y_step
    if ray.left:
        x_intercept -= 1
    hit = _march(grid, x_intercept, y_intercept, x_step, y_step, width, height)
    return _record_hit(ray, hit)


def cast_ray(
    grid: Sequence[str], player: Player, angle: float, width: float, height: float
) -> Ray:
    """Cast both rays from the player and keep the nearer hit."""
    horizontal = cast_horizontal(grid, player.x, player.y, angle, width, height)
    vertical = cast_vertical(grid, player.x, player.y, angle, width, height)
    if horizontal.distance < vertical.distance:
        return replace(horizontal, type=_HORIZONTAL)
    return replace(vertical, type=_VERTICAL)


def cast_vision(
    grid: Sequence[str], player: Player, width: float, height: float
) -> List[Ray]:
    """Cast one ray per screen column across the player's field of view."""
    step = _FIELD_OF_VIEW / WIDTH
    angle = player.rotation - _FIELD_OF_VIEW / 2
    rays = []
    for _ in range(WIDTH):
        ray = cast_ray(grid, player, angle, width, height)
        angle = normalize_angle(angle + step)
        # Each ray keeps the heading of the column that follows it.
        ray.angle = angle
        rays.append(ray)
    return rays


def normalize_distance(rays: Sequence[Ray], rotation: float) -> List[Ray]:
    """Return the rays with distances corrected for the fish-eye effect."""
    return [
        replace(ray, distance=ray.distance * math.cos(abs(rotation - ray.angle)))
        for ray in rays
    ]