# raycube

raycube reads a `.cub` scene description and shows it in a 512 × 256 pygame
window as a first-person raycast view, with a mini map of the level drawn in
the top-left corner.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
raycube path/to/level.cub
```

The command takes exactly one argument. It prints a message and exits with
status 1 when the argument is missing or there is more than one, when the file
name does not end in `.cub`, when the file cannot be opened, or when the scene
it holds is not valid.

The view is drawn on the first key press and again after every move or turn.

## Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn by 3 degrees   |
| Esc          | quit                |

Closing the window also quits. A move is refused when the new position lies
in a wall or outside the map.

## The `.cub` format

A file starts with a header and ends with a map. Blank lines are ignored in
the header, and lines whose first word is not one of the keys below are
skipped.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA` give the four wall textures; there must be exactly
  four, one of each.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  whole numbers from 0 to 255.
- The map starts at the first non-blank line made only of map characters:
  `1` for walls, `0` for open floor, spaces for nothing, and `N`, `S`, `E` or
  `W` for the player's start. There must be exactly one player, and no `0`
  cell may touch a space or the edge of the map.
- The map ends at the first blank line; only blank lines may follow it.

## What it does not do

- Textures are checked in the header but never loaded or drawn: walls are
  painted in plain colours (red, or yellow where a ray struck a horizontal
  grid line while looking up).
- The floor and ceiling colours are checked and stored but not drawn; the
  background is black.
- The player always starts with the same heading (4.5 radians), whichever of
  `N`, `S`, `E`, `W` marks the start.

## Using it as a library

```python
from raycube.constants import CubError, KeyCode
from raycube.game import Game, load_scene

try:
    scene = load_scene("level.cub")
except CubError as exc:
    print(exc)
else:
    game = Game(scene)            # draws onto an off-screen pygame.Surface
    game.handle_key(KeyCode.W)    # step forward and redraw
    print(len(game.rays))         # 512, one ray per screen column
```

The parts can also be used on their own:

- `raycube.header.read_header(path)` / `parse_header(lines)` return a `Scene`
  with its `textures`, `floor` and `ceiling`; `parse_color("R,G,B")` parses one
  colour.
- `raycube.mapgrid.get_map(path)` / `extract_map(lines)` return the map rows,
  and `validate(scene)` checks a scene's textures and map.
- `raycube.player.find_player(grid)` places a `Player`, and `collision(x, y,
  grid)` tells whether a pixel position is blocked.
- `raycube.rays.cast_vision(grid, player, width, height)` casts the 60-degree
  field of view, and `cast_ray` casts a single ray.
- `raycube.render.Renderer` paints walls, the mini map, the player and rays
  onto a pygame surface.

All reading and validation errors are raised as
`raycube.constants.CubError`.