"""Enemy formation sweeping left and right while stepping down."""

from typing import List

from ..config import GameConfig
from ..constants import ENEMY_ROW_PITCH, ENEMY_ROW_POINTS, ENEMY_START_Y
from .sprite import ENEMY_KINDS, Sprite, create_enemy


class Formation:
    """
    Ordered grid of enemies moved as one rigid body.

    Enemies are stored row by row, front row first. Destroyed enemies stay
    in the sequence so the grid keeps its shape. ``drops`` counts the
    vertical steps taken so far, one per flip.
    """

    def __init__(
        self,
        enemies: List[Sprite],
        row_size: int,
        frame_width: int,
        margin: int,
        step_x: int,
        drop_y: int,
    ):
        """
        Initialize a formation from already created enemies.

        Args:
            enemies: Enemy sprites in row-major order
            row_size: Number of enemies per row
            frame_width: Width of the frame the formation sweeps across
            margin: Distance from either edge that triggers a flip
            step_x: Horizontal pixels moved per tick
            drop_y: Vertical pixels dropped on every flip
        """
        self.enemies = enemies
        self.row_size = row_size
        self.frame_width = frame_width
        self.margin = margin
        self.step_x = step_x
        self.drop_y = drop_y
        self.direction = 1
        self.drops = 0

    @classmethod
    def create(cls, config: GameConfig) -> "Formation":
        """Lay out ``enemy_columns x enemy_rows`` enemies from the configured constants."""
        enemies: List[Sprite] = []
        for row in range(config.enemy_rows):
            kind = ENEMY_KINDS[min(row, len(ENEMY_KINDS) - 1)]
            points = ENEMY_ROW_POINTS[min(row, len(ENEMY_ROW_POINTS) - 1)]
            y = ENEMY_START_Y + row * ENEMY_ROW_PITCH
            for column in range(config.enemy_columns):
                x = config.enemy_start_x + column * config.enemy_size
                enemies.append(create_enemy(x, y, kind, points))
        return cls(
            enemies,
            row_size=config.enemy_columns,
            frame_width=config.width,
            margin=config.enemy_size,
            step_x=config.enemy_step,
            drop_y=config.enemy_drop,
        )

    @property
    def leading_enemy(self) -> Sprite:
        """First enemy of the front row, used for boundary and ground checks."""
        return self.enemies[0]

    @property
    def trailing_enemy(self) -> Sprite:
        """Last enemy of the front row."""
        return self.enemies[self.row_size - 1]

    def live_enemies(self) -> List[Sprite]:
        return [enemy for enemy in self.enemies if enemy.alive]

    def advance(self) -> None:
        """Move every enemy, dead or alive, one step in the sweep direction."""
        delta = self.step_x * self.direction
        for enemy in self.enemies:
            enemy.x += delta

    def check_and_flip(self) -> bool:
        """
        Reverse the sweep and drop one step when the front row crosses an edge.

        Back rows are assumed to be aligned with the front row, so only its
        first and last members are checked.

        Returns:
            True if the formation flipped this call
        """
        right_limit = self.frame_width - 2 * self.margin
        if self.leading_enemy.x < self.margin or self.trailing_enemy.x > right_limit:
            self.direction = -self.direction
            self.drops += 1
            for enemy in self.enemies:
                enemy.y += self.drop_y
            return True
        return False

    def has_invaded(self, ground_y: int) -> bool:
        """Check if the leading enemy has passed the defense line."""
        return self.leading_enemy.y > ground_y
