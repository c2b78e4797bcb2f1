"""Game session aggregate: everything one play-through owns."""

import logging
from dataclasses import dataclass
from enum import Enum

from ..config import GameConfig
from ..constants import CANNON_START_X, CANNON_Y
from .formation import Formation
from .projectiles import ProjectileSet
from .sprite import Sprite, create_cannon

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final result handed to the end screen."""
    score: int
    ticks: int
    quit: bool = False


class GameSession:
    """Manages the state of one play-through, from start to game over."""

    def __init__(self, config: GameConfig):
        """
        Create a fresh session with the original layout and a zero score.

        Args:
            config: Validated game configuration
        """
        self.config = config
        self.formation = Formation.create(config)
        self.cannon = create_cannon(CANNON_START_X, CANNON_Y)
        self.projectiles = ProjectileSet(
            self.cannon,
            frame_height=config.height,
            beam_speed=config.beam_speed,
            bomb_speed=config.bomb_speed,
        )
        self.score = 0
        self.tick = 0
        self.state = SessionState.RUNNING
        self.game_over_tick: int | None = None
        self.quit_requested = False

    @property
    def is_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    def destroy_enemy(self, enemy: Sprite) -> bool:
        """
        Kill an enemy and award its points.

        Points are only ever awarded once per enemy.

        Returns:
            True if the enemy was alive before this call
        """
        if not enemy.alive:
            return False
        enemy.destroy(self.tick)
        self.score += enemy.points
        return True

    def destroy_cannon(self) -> None:
        if self.cannon.alive:
            self.cannon.destroy(self.tick)
        self.end("cannon destroyed")

    def request_quit(self) -> None:
        self.quit_requested = True
        self.end("quit")

    def end(self, reason: str = "") -> None:
        """Move to GAME_OVER; later calls keep the first game-over tick."""
        if self.is_over:
            return
        self.state = SessionState.GAME_OVER
        self.game_over_tick = self.tick
        logger.debug("Session over at tick %d (%s), score %d", self.tick, reason, self.score)

    def summary(self) -> SessionSummary:
        return SessionSummary(score=self.score, ticks=self.tick, quit=self.quit_requested)
