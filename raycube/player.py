"""Player state, angle handling and wall collisions."""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from raycube.constants import ERR_MAP, PI, TILE_SIZE, CubError

_START_ROTATION = 4.5
_MOVE_SPEED = 3
_TURN_SPEED = 3 * (PI / 180)
_PLAYER_CHARS = "NSWE"


def normalize_angle(angle: float) -> float:
    """Bring an angle into the range [0, 2*PI)."""
    angle = math.fmod(angle, 2 * PI)
    if angle < 0:
        angle += 2 * PI
    return angle


def collision(x: float, y: float, grid: Sequence[str]) -> bool:
    """True when the pixel position lies in a wall or outside the grid."""
    x_tile = math.floor(x / TILE_SIZE)
    y_tile = math.floor(y / TILE_SIZE)
    if not 0 <= y_tile < len(grid) or x_tile < 0:
        return True
    row = grid[y_tile]
    return x_tile >= len(row) or row[x_tile] == "1"


@dataclass
class Player:
    """Position, heading and speeds of the player."""

    x: float = 0.0
    y: float = 0.0
    rotation: float = _START_ROTATION
    dest_x: float = 0.0
    dest_y: float = 0.0
    fov: float = 0.0
    move: int = 0
    turn: int = 0
    m_speed: int = _MOVE_SPEED
    t_speed: float = _TURN_SPEED

    def facing(self) -> Tuple[bool, bool]:
        """Return (down, left): whether the player looks down and left."""
        down = self.rotation < PI
        left = PI / 2 < self.rotation < 3 * (PI / 2)
        return down, left

    def reset_stats(self) -> None:
        """Restore heading, movement state and speeds to their start values."""
        self.rotation = _START_ROTATION
        self.dest_x = 0.0
        self.dest_y = 0.0
        self.move = 0
        self.turn = 0
        self.m_speed = _MOVE_SPEED
        self.t_speed = _TURN_SPEED


def find_player(grid: Sequence[str]) -> Player:
    """Place a player at the centre of the last start cell in the grid."""
    starts = [
        (column, row)
        for row, line in enumerate(grid)
        for column, char in enumerate(line)
        if char in _PLAYER_CHARS
    ]
    if not starts:
        raise CubError(ERR_MAP)
    column, row = starts[-1]
    half = TILE_SIZE // 2
    return Player(x=column * TILE_SIZE + half, y=row * TILE_SIZE + half)