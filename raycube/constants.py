"""Shared constants, enumerations and the error type of the scene loader and game."""

from enum import IntEnum

WIDTH = 512
HEIGHT = 256
TILE_SIZE = 16

PI = 3.141592

USAGE = "Usage: raycube filename.cub"
ERR_FORMAT = 'Error: {}: File should be in the ".cub" format'
ERR_OPEN = "Error: {}: No access to the file"
ERR_MEMORY = "Error: {}: Memory error"
ERR_COLOR = "Error: Non-valid RGB value"
ERR_TEXTURE = "Error: Non-valid textures"
ERR_MAP = "Error: Non-valid map"


class TextureType(IntEnum):
    """Which wall a texture belongs to."""

    NON = 0
    NO = 1
    SO = 2
    WE = 3
    EA = 4


class MapChar(IntEnum):
    """Classification of a character in the map grid."""

    NOT_VALID = 0
    OPEN = 1
    WALL = 2
    PLAYER = 3
    SPACE = 4


class KeyCode(IntEnum):
    """Keyboard codes the game reacts to."""

    ESC = 53
    W = 13
    A = 0
    S = 1
    D = 2
    LEFT = 123
    RIGHT = 124


class CubError(Exception):
    """Raised when a scene file cannot be read or is not valid."""