"""Command-line entry point: validate a map, then play it in a window."""

from __future__ import annotations

import sys
from os import PathLike
from typing import Sequence

from pacmaze.game import TITLE, Direction, Game, Sprite
from pacmaze.mapfile import MapError, MapInfo, load_map
from pacmaze.physics import TILE

BONUS_FLAG = "--bonus"
FPS = 60
_LOAD_FAILURE = "Fail to load (texture\\image)"


class _AssetError(RuntimeError):
    """An image needed by the game could not be loaded."""


def validate(path: str | PathLike[str], with_enemies: bool) -> MapInfo:
    """Check the map at ``path`` and return its description.

    Raises MapError with the reason when the map cannot be played.
    """
    return load_map(path, with_enemies)


class _Images:
    """Loads each image once and keeps the surface for later frames."""

    def __init__(self, pygame_module) -> None:
        self._pygame = pygame_module
        self._surfaces: dict[str, object] = {}

    def get(self, path: str):
        surface = self._surfaces.get(path)
        if surface is None:
            try:
                surface = self._pygame.image.load(path).convert_alpha()
            except (self._pygame.error, OSError) as exc:
                raise _AssetError(path) from exc
            self._surfaces[path] = surface
        return surface


def _held_direction(pressed, pygame_module) -> Direction | None:
    for key, direction in (
        (pygame_module.K_RIGHT, Direction.RIGHT),
        (pygame_module.K_LEFT, Direction.LEFT),
        (pygame_module.K_UP, Direction.UP),
        (pygame_module.K_DOWN, Direction.DOWN),
    ):
        if pressed[key]:
            return direction
    return None


def _sprites(game: Game) -> tuple[Sprite, ...]:
    return (game.wall, game.player, game.collect, game.exit, game.enemy)


def run(info: MapInfo, with_enemies: bool) -> None:
    """Open a window for the map and play until it is closed or won."""
    import pygame

    game = Game.from_map(info, with_enemies)
    pygame.init()
    try:
        screen = pygame.display.set_mode((info.rows * TILE, info.lines * TILE))
        pygame.display.set_caption(TITLE)
        images = _Images(pygame)
        for sprite in _sprites(game):
            if sprite.instances:
                images.get(sprite.image)
        font = pygame.font.Font(None, 24) if with_enemies else None
        clock = pygame.time.Clock()
        while not game.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.close()
            if game.closed:
                break
            pressed = pygame.key.get_pressed()
            if pressed[pygame.K_ESCAPE]:
                game.close()
                break
            game.update(_held_direction(pressed, pygame))
            screen.fill((0, 0, 0))
            try:
                for sprite in _sprites(game):
                    enabled = [inst for inst in sprite.instances if inst.enabled]
                    if not enabled:
                        continue
                    surface = images.get(sprite.image)
                    for inst in enabled:
                        screen.blit(surface, (inst.x, inst.y))
            except _AssetError:
                game.close()
                break
            if font is not None:
                screen.blit(font.render("Steps", True, (255, 255, 255)), (10, 10))
                if game.steps_label is not None:
                    label = font.render(game.steps_label, True, (255, 255, 255))
                    screen.blit(label, (10, 30))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the map named on the command line and play it.

    ``--bonus`` before the path turns on enemies and animations.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    with_enemies = bool(args) and args[0] == BONUS_FLAG
    if with_enemies:
        args = args[1:]
    if len(args) != 1:
        return 1
    try:
        info = validate(args[0], with_enemies)
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    try:
        run(info, with_enemies)
    except _AssetError:
        sys.stderr.write(f"Error\n{_LOAD_FAILURE}\n")
    return 0