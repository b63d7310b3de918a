"""Extraction and validation of the map grid of a scene file."""

from itertools import takewhile
from typing import Iterable, List, Optional, Sequence

from raycube.constants import ERR_MAP, ERR_OPEN, ERR_TEXTURE, CubError, MapChar
from raycube.header import Scene, Texture
from raycube.textparse import read_lines

_CHAR_KINDS = {
    "1": MapChar.WALL,
    "0": MapChar.OPEN,
    " ": MapChar.SPACE,
    "N": MapChar.PLAYER,
    "S": MapChar.PLAYER,
    "W": MapChar.PLAYER,
    "E": MapChar.PLAYER,
}

_TEXTURE_COUNT = 4


def valid_char(char: str) -> MapChar:
    """Classify a single map character."""
    return _CHAR_KINDS.get(char, MapChar.NOT_VALID)


def map_valid_chars(line: str) -> bool:
    """True when every character before the first newline may appear in a map."""
    content = line.split("\n", 1)[0]
    return all(valid_char(char) is not MapChar.NOT_VALID for char in content)


def extract_map(lines: Iterable[str]) -> List[str]:
    """Return the map rows found in the lines of a scene file.

    The map starts at the first non-blank line made only of map characters
    and ends at the first blank line; only blank lines may follow it.
    """
    all_lines = list(lines)
    start = next(
        (
            index
            for index, line in enumerate(all_lines)
            if line != "\n" and map_valid_chars(line)
        ),
        None,
    )
    if start is None:
        raise CubError(ERR_MAP)
    body = all_lines[start:]
    if not all(map_valid_chars(line) for line in body):
        raise CubError(ERR_MAP)
    rows = list(takewhile(lambda line: line != "\n", body))
    if any(line != "\n" for line in body[len(rows):]):
        raise CubError(ERR_MAP)
    return [row.strip("\n") for row in rows]


def get_map(path: str) -> List[str]:
    """Read the map grid of the scene file at path."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise CubError(ERR_OPEN.format(path)) from exc
    return extract_map(lines)


def longest_line(grid: Sequence[str]) -> int:
    """Length of the longest row of the grid, 0 for an empty grid."""
    return max((len(row) for row in grid), default=0)


def spaced_line(text: Optional[str], length: int) -> str:
    """Pad a row with one leading space and trailing spaces to length + 2.

    With no text, the result is a row of spaces of that width.
    """
    if text is None:
        return " " * (length + 2)
    return (" " + text[: length + 1]).ljust(length + 2)


def spaced_map(grid: Sequence[str]) -> List[str]:
    """Surround the grid with a border of spaces, every row of equal width."""
    width = longest_line(grid)
    border = spaced_line(None, width)
    return [border, *(spaced_line(row, width) for row in grid), border]


def check_player(grid: Sequence[str]) -> bool:
    """True when the grid holds exactly one player start."""
    found = sum(
        valid_char(char) is MapChar.PLAYER for row in grid for char in row
    )
    return found == 1


def check_map(grid: Sequence[str]) -> bool:
    """True when the grid has one player and no open cell touches empty space."""
    if not check_player(grid):
        return False
    padded = spaced_map(grid)
    for above, row, below in zip(padded, padded[1:], padded[2:]):
        for column in range(1, len(row) - 1):
            if row[column] != "0":
                continue
            neighbours = (
                above[column],
                below[column],
                row[column - 1],
                row[column + 1],
            )
            if " " in neighbours:
                return False
    return True


def check_textures(textures: Sequence[Texture]) -> bool:
    """True when there are exactly four textures, one of each type."""
    if len(textures) != _TEXTURE_COUNT:
        return False
    return len({texture.type for texture in textures}) == _TEXTURE_COUNT


def validate(scene: Scene) -> Scene:
    """Check the textures and map of a scene, raising CubError if not valid."""
    if not check_textures(scene.textures):
        raise CubError(ERR_TEXTURE)
    if not check_map(scene.grid):
        raise CubError(ERR_MAP)
    return scene