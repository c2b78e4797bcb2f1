"""Sprite records and their construction helpers."""

from dataclasses import dataclass, field
from enum import Enum

from ..constants import BEAM_OFFSET_X, BOMB_OFFSET_X


class SpriteKind(Enum):
    """Every kind of entity that can appear in a frame."""
    CANNON = "cannon"
    BEAM = "beam"
    BOMB = "bomb"
    ENEMY_TOP = "enemy_top"
    ENEMY_MIDDLE = "enemy_middle"
    ENEMY_BOTTOM = "enemy_bottom"


class Variant(Enum):
    """Visual variant of a sprite, picked by the compositor each frame."""
    NORMAL = "normal"
    ALTERNATE = "alternate"
    EXPLODED = "exploded"


ENEMY_KINDS = (SpriteKind.ENEMY_TOP, SpriteKind.ENEMY_MIDDLE, SpriteKind.ENEMY_BOTTOM)

Region = tuple[int, int, int, int]

_ENEMY_EXPLOSION: Region = (0, 60, 16, 68)

# Sprite sheet coordinates as (left, top, right, bottom)
SPRITE_REGIONS: dict[tuple[SpriteKind, Variant], Region] = {
    (SpriteKind.CANNON, Variant.NORMAL): (20, 47, 38, 59),
    (SpriteKind.CANNON, Variant.EXPLODED): (0, 47, 16, 57),
    (SpriteKind.BEAM, Variant.NORMAL): (20, 60, 22, 65),
    (SpriteKind.BOMB, Variant.NORMAL): (0, 70, 10, 79),
    (SpriteKind.ENEMY_TOP, Variant.NORMAL): (0, 0, 20, 14),
    (SpriteKind.ENEMY_TOP, Variant.ALTERNATE): (20, 0, 40, 14),
    (SpriteKind.ENEMY_TOP, Variant.EXPLODED): _ENEMY_EXPLOSION,
    (SpriteKind.ENEMY_MIDDLE, Variant.NORMAL): (0, 14, 20, 26),
    (SpriteKind.ENEMY_MIDDLE, Variant.ALTERNATE): (20, 14, 40, 26),
    (SpriteKind.ENEMY_MIDDLE, Variant.EXPLODED): _ENEMY_EXPLOSION,
    (SpriteKind.ENEMY_BOTTOM, Variant.NORMAL): (0, 27, 20, 40),
    (SpriteKind.ENEMY_BOTTOM, Variant.ALTERNATE): (20, 27, 40, 40),
    (SpriteKind.ENEMY_BOTTOM, Variant.EXPLODED): _ENEMY_EXPLOSION,
}


def sprite_size(kind: SpriteKind) -> tuple[int, int]:
    """Bounding box of a sprite kind, taken from its normal region."""
    left, top, right, bottom = SPRITE_REGIONS[(kind, Variant.NORMAL)]
    return right - left, bottom - top


@dataclass(eq=False, slots=True)
class Sprite:
    """
    A single entity on screen.

    Only position and liveness change after creation; the bounding box is
    fixed by the sprite kind.
    """
    kind: SpriteKind
    x: int
    y: int
    width: int = field(init=False)
    height: int = field(init=False)
    alive: bool = True
    points: int = 0
    destroyed_tick: int | None = None

    def __post_init__(self) -> None:
        self.width, self.height = sprite_size(self.kind)

    @property
    def bounds(self) -> Region:
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def is_enemy(self) -> bool:
        return self.kind in ENEMY_KINDS

    def destroy(self, tick: int) -> None:
        """Mark the sprite dead, remembering the tick for the explosion frame."""
        self.alive = False
        self.destroyed_tick = tick


def create_enemy(x: int, y: int, kind: SpriteKind, points: int) -> Sprite:
    """Create a live enemy worth ``points`` when destroyed."""
    return Sprite(kind, x, y, points=points)


def create_bomb(enemy: Sprite, offset_x: int = BOMB_OFFSET_X) -> Sprite:
    """Create a bomb leaving the middle of ``enemy``."""
    return Sprite(SpriteKind.BOMB, enemy.x + offset_x, enemy.y)


def create_cannon(x: int, y: int) -> Sprite:
    return Sprite(SpriteKind.CANNON, x, y)


def create_beam(cannon: Sprite, offset_x: int = BEAM_OFFSET_X) -> Sprite:
    """Create the player's beam, inactive and resting on the cannon."""
    return Sprite(SpriteKind.BEAM, cannon.x + offset_x, cannon.y, alive=False)
