"""Game state and per-frame rules: movement, steps, pickups and animation."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from pacmaze.mapfile import COLLECTIBLE, ENEMY, EXIT, PLAYER, WALL, MapInfo
from pacmaze.physics import TILE, Instance, collision_check, collision_collect

STEP = 5
SPEED_FRAME = 50
TITLE = "PAC MAN"
HIDDEN_X = -100

_IMAGE_DIR = "mandatory/images"
_BONUS_DIR = "bonus/image_bonus"

IMAGES = {
    WALL: f"{_IMAGE_DIR}/wall.png",
    PLAYER: f"{_IMAGE_DIR}/player.png",
    COLLECTIBLE: f"{_IMAGE_DIR}/collect.png",
    EXIT: f"{_IMAGE_DIR}/exit.png",
}

BONUS_IMAGES = {
    WALL: f"{_BONUS_DIR}/wall_bonus.png",
    PLAYER: f"{_BONUS_DIR}/p_right_bonus.png",
    COLLECTIBLE: f"{_BONUS_DIR}/collect_bonus.png",
    EXIT: f"{_BONUS_DIR}/exit_bonus.png",
    ENEMY: f"{_BONUS_DIR}/enemy_2_bonus.png",
}

EXIT_OPEN_IMAGE = f"{_BONUS_DIR}/exit_open_bonus.png"
ENEMY_FRAMES = (
    f"{_BONUS_DIR}/enemy_2_bonus.png",
    f"{_BONUS_DIR}/enemy_bonus.png",
)


class Direction(Enum):
    """A movement key: its pixel offset and the player frame it shows."""

    RIGHT = (STEP, 0, f"{_BONUS_DIR}/p_right_bonus.png")
    LEFT = (-STEP, 0, f"{_BONUS_DIR}/p_left_bonus.png")
    UP = (0, -STEP, f"{_BONUS_DIR}/p_up_bonus.png")
    DOWN = (0, STEP, f"{_BONUS_DIR}/p_down_bonus.png")

    def __init__(self, dx: int, dy: int, image: str) -> None:
        self.dx = dx
        self.dy = dy
        self.image = image


@dataclass
class Sprite:
    """An image drawn at one or more places on screen."""

    image: str
    instances: list[Instance] = field(default_factory=list)


@dataclass
class Game:
    """The running state of one play session."""

    wall: Sprite
    player: Sprite
    collect: Sprite
    exit: Sprite
    enemy: Sprite
    collect_left: int
    with_enemies: bool = False
    steps_counter: int = 1
    counter: int = 0
    enemy_state: bool = False
    steps_label: str | None = None
    closed: bool = False
    out: TextIO | None = None

    @classmethod
    def from_map(cls, info: MapInfo, with_enemies: bool) -> Game:
        """Lay out the sprites of a validated map, one tile per cell."""
        images = BONUS_IMAGES if with_enemies else IMAGES
        sprites = {
            kind: Sprite(images.get(kind, BONUS_IMAGES[ENEMY]))
            for kind in (WALL, PLAYER, COLLECTIBLE, EXIT, ENEMY)
        }
        for row, line in enumerate(info.grid):
            for col, cell in enumerate(line):
                if cell == ENEMY and not with_enemies:
                    continue
                sprite = sprites.get(cell)
                if sprite is not None:
                    sprite.instances.append(Instance(col * TILE, row * TILE))
        if not sprites[PLAYER].instances:
            raise ValueError("map has no player")
        return cls(
            wall=sprites[WALL],
            player=sprites[PLAYER],
            collect=sprites[COLLECTIBLE],
            exit=sprites[EXIT],
            enemy=sprites[ENEMY],
            collect_left=info.collectibles,
            with_enemies=with_enemies,
        )

    @property
    def player_position(self) -> tuple[int, int]:
        """Pixel position of the player."""
        body = self.player.instances[0]
        return body.x, body.y

    def update(self, direction: Direction | None = None) -> None:
        """Advance one frame with ``direction`` held, or no key at all."""
        if self.closed:
            return
        x, y = self.player_position
        if self.with_enemies:
            self.counter += 1
            self._enemy_frame_change()
        if direction is not None:
            if self.with_enemies:
                self.player.image = direction.image
            x += direction.dx
            y += direction.dy
            if collision_check(x, y, self.wall.instances):
                self._record_step()
        self._collide(x, y)

    def close(self) -> None:
        """Stop the game; further updates do nothing."""
        self.closed = True

    def _record_step(self) -> None:
        if self.with_enemies:
            self.steps_label = str(self.steps_counter)
        else:
            (self.out or sys.stdout).write(f"steps: {self.steps_counter}\n")
        self.steps_counter += 1

    def _enemy_frame_change(self) -> None:
        if self.counter > SPEED_FRAME:
            self.enemy.image = ENEMY_FRAMES[not self.enemy_state]
            self.enemy_state = not self.enemy_state
            self.counter = 0

    def _collide(self, x: int, y: int) -> None:
        if collision_check(x, y, self.wall.instances):
            body = self.player.instances[0]
            body.x, body.y = x, y
        picked = collision_collect(x, y, self.collect.instances)
        if picked is not None:
            coin = self.collect.instances[picked]
            coin.x = HIDDEN_X
            if not self.with_enemies:
                coin.y = HIDDEN_X
            coin.enabled = False
            self.collect_left -= 1
        if self.with_enemies and self.collect_left == 0:
            self.exit.image = EXIT_OPEN_IMAGE
        if not collision_check(x, y, self.exit.instances[:1]) and self.collect_left <= 0:
            self.close()
        if self.with_enemies and not collision_check(x, y, self.enemy.instances):
            self.close()