"""Reading of the texture and colour header of a scene file."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from raycube.constants import ERR_COLOR, ERR_OPEN, ERR_TEXTURE, CubError, TextureType
from raycube.textparse import atoi, read_lines, split_words

Color = Tuple[int, int, int]

_TEXTURE_KEYS = {
    "NO": TextureType.NO,
    "SO": TextureType.SO,
    "WE": TextureType.WE,
    "EA": TextureType.EA,
}

_EXTENSION = ".cub"


@dataclass
class Texture:
    """A wall texture declared in the header."""

    path: str
    type: TextureType


@dataclass
class Scene:
    """Everything read from a scene file."""

    textures: List[Texture] = field(default_factory=list)
    floor: Optional[Color] = None
    ceiling: Optional[Color] = None
    grid: List[str] = field(default_factory=list)


def check_rgb_code(rgb: Sequence[int]) -> bool:
    """True when every component lies between 0 and 255."""
    return all(0 <= component <= 255 for component in rgb)


def only_numbers(text: str) -> bool:
    """True when text holds nothing but ASCII digits and newlines."""
    return all(char == "\n" or char in "0123456789" for char in text)


def check_extension(filename: str) -> bool:
    """True when the file name ends with the scene extension."""
    return filename.endswith(_EXTENSION)


def parse_color(value: str) -> Color:
    """Parse an ``R,G,B`` value, raising CubError if it is not valid."""
    parts = split_words(value, ",")
    if len(parts) != 3 or not all(only_numbers(part) for part in parts):
        raise CubError(ERR_COLOR)
    red, green, blue = (atoi(part) for part in parts)
    if not check_rgb_code((red, green, blue)):
        raise CubError(ERR_COLOR)
    return red, green, blue


def parse_header(lines: Iterable[str]) -> Scene:
    """Collect textures and colours from the lines of a scene file."""
    scene = Scene()
    for line in lines:
        if line == "\n":
            continue
        words = split_words(line, " ")
        if not words:
            continue
        key = words[0]
        if key in ("F", "C"):
            if len(words) < 2:
                raise CubError(ERR_COLOR)
            color = parse_color(words[1])
            if key == "F":
                scene.floor = color
            else:
                scene.ceiling = color
        elif key in _TEXTURE_KEYS:
            if len(words) < 2:
                raise CubError(ERR_TEXTURE)
            scene.textures.append(Texture(words[1].rstrip("\n"), _TEXTURE_KEYS[key]))
    return scene


def read_header(path: str) -> Scene:
    """Read the header of the scene file at path."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return parse_header(read_lines(stream))
    except OSError as exc:
        raise CubError(ERR_OPEN.format(path)) from exc