"""Scene loading, keyboard handling and the main game loop."""

import math
import sys
from typing import List, Optional, Sequence

import pygame

from raycube.constants import (
    ERR_FORMAT,
    HEIGHT,
    PI,
    TILE_SIZE,
    USAGE,
    WIDTH,
    CubError,
    KeyCode,
)
from raycube.header import Scene, check_extension, read_header
from raycube.mapgrid import get_map, longest_line, validate
from raycube.player import collision, find_player, normalize_angle
from raycube.rays import Ray, cast_vision
from raycube.render import Renderer

_DEST_LENGTH = 50

# key -> (move direction, heading offset from the player's rotation)
_STEPS = {
    KeyCode.W: (1, 0.0),
    KeyCode.S: (-1, 0.0),
    KeyCode.A: (1, -PI / 2),
    KeyCode.D: (1, PI / 2),
}
_TURNS = {KeyCode.LEFT: -1, KeyCode.RIGHT: 1}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KeyCode.ESC,
    pygame.K_w: KeyCode.W,
    pygame.K_a: KeyCode.A,
    pygame.K_s: KeyCode.S,
    pygame.K_d: KeyCode.D,
    pygame.K_LEFT: KeyCode.LEFT,
    pygame.K_RIGHT: KeyCode.RIGHT,
}


def load_scene(filename: str) -> Scene:
    """Read and validate the scene file, raising CubError if it is not valid."""
    if not check_extension(filename):
        raise CubError(ERR_FORMAT.format(filename))
    scene = read_header(filename)
    scene.grid = get_map(filename)
    return validate(scene)


class Game:
    """A running game: the map, the player and what they currently see."""

    def __init__(self, scene: Scene, renderer: Optional[Renderer] = None) -> None:
        self.scene = scene
        self.grid = scene.grid
        self.player = find_player(self.grid)
        self.player.reset_stats()
        self.map_width = longest_line(self.grid) * TILE_SIZE
        self.map_height = len(self.grid) * TILE_SIZE
        self.renderer = renderer if renderer is not None else Renderer()
        self.rays: List[Ray] = []
        self.running = True

    def handle_key(self, key: int) -> None:
        """React to a key press: quit on escape, otherwise move or turn."""
        if key == KeyCode.ESC:
            self.running = False
        else:
            self.move(key)

    def move(self, key: int) -> None:
        """Step or turn the player for a movement key, then redraw."""
        player = self.player
        if key in _STEPS:
            direction, offset = _STEPS[key]
            heading = player.rotation + offset
            player.move = direction
            new_x = player.x + direction * math.cos(heading) * player.m_speed
            new_y = player.y + direction * math.sin(heading) * player.m_speed
            if not collision(new_x, new_y, self.grid):
                player.x, player.y = new_x, new_y
        elif key in _TURNS:
            player.turn = _TURNS[key]
            player.rotation = normalize_angle(
                player.rotation + player.turn * player.t_speed
            )
            heading = player.rotation
        else:
            return
        player.dest_x = player.x + math.cos(heading) * _DEST_LENGTH
        player.dest_y = player.y + math.sin(heading) * _DEST_LENGTH
        self.refresh()

    def refresh(self) -> None:
        """Cast the rays again and redraw the view and the minimap."""
        self.rays = cast_vision(self.grid, self.player, self.map_width, self.map_height)
        self.renderer.paint_walls(self.rays)
        self.renderer.paint_mini_map(self.grid, self.player, self.rays)

    def run(self) -> None:
        """Open a window and process events until the game is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption("raycube")
            pygame.key.set_repeat(150, 30)
            self.renderer = Renderer(screen)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = _PYGAME_KEYS.get(event.key)
                        if key is not None:
                            self.handle_key(key)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        scene = load_scene(args[0])
    except CubError as exc:
        print(exc)
        return 1
    Game(scene).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())