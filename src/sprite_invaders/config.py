"""Runtime configuration for a game session."""

import os
from dataclasses import dataclass, fields
from typing import Mapping

from .constants import (
    BEAM_SPEED,
    BOMB_PROBABILITY,
    BOMB_SPEED,
    CANNON_STEP,
    ENEMY_COLUMNS,
    ENEMY_DROP_Y,
    ENEMY_ROWS,
    ENEMY_SIZE,
    ENEMY_START_X,
    ENEMY_STEP_X,
    EVENT_QUEUE_SIZE,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    GAME_OVER_PAUSE_MS,
    GROUND_Y,
    TICK_DELAY_MS,
)

ENV_PREFIX = "INVADERS_"


class ConfigError(ValueError):
    """Raised when a configuration cannot start a session."""
    pass


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Constants supplied by the outer layer when a session starts."""
    width: int = FRAME_WIDTH
    height: int = FRAME_HEIGHT
    tick_delay_ms: int = TICK_DELAY_MS
    game_over_pause_ms: int = GAME_OVER_PAUSE_MS
    enemy_columns: int = ENEMY_COLUMNS
    enemy_rows: int = ENEMY_ROWS
    enemy_start_x: int = ENEMY_START_X
    enemy_size: int = ENEMY_SIZE
    enemy_step: int = ENEMY_STEP_X
    enemy_drop: int = ENEMY_DROP_Y
    ground_y: int = GROUND_Y
    bomb_probability: float = BOMB_PROBABILITY
    bomb_speed: int = BOMB_SPEED
    cannon_step: int = CANNON_STEP
    beam_speed: int = BEAM_SPEED
    event_queue_size: int = EVENT_QUEUE_SIZE

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def tick_delay(self) -> float:
        """Tick delay in seconds."""
        return self.tick_delay_ms / 1000

    @property
    def game_over_pause(self) -> float:
        return self.game_over_pause_ms / 1000

    def validate(self) -> "GameConfig":
        """
        Reject configurations that cannot produce a playable session.

        Returns:
            The same config, so calls can be chained

        Raises:
            ConfigError: If any value is degenerate
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Frame size must be positive, got {self.width}x{self.height}")
        if self.enemy_columns <= 0 or self.enemy_rows <= 0:
            raise ConfigError(
                f"Formation needs at least one enemy, got {self.enemy_columns}x{self.enemy_rows}"
            )
        if self.enemy_size <= 0:
            raise ConfigError("enemy_size must be positive")
        if self.tick_delay_ms < 0 or self.game_over_pause_ms < 0:
            raise ConfigError("Delays cannot be negative")
        if not 0.0 <= self.bomb_probability <= 1.0:
            raise ConfigError(f"bomb_probability must be within [0, 1], got {self.bomb_probability}")
        for name in ("enemy_step", "enemy_drop", "bomb_speed", "cannon_step", "beam_speed"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.event_queue_size <= 0:
            raise ConfigError("event_queue_size must be positive")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "GameConfig":
        """
        Build a config from ``INVADERS_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            overrides: Explicit values that win over the environment

        Raises:
            ConfigError: If a variable cannot be parsed or the result is degenerate
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for field in fields(cls):
            raw = environ.get(ENV_PREFIX + field.name.upper())
            if raw is None:
                continue
            parse = float if field.type in (float, "float") else int
            try:
                values[field.name] = parse(raw)
            except ValueError as exc:
                raise ConfigError(f"Invalid value for {ENV_PREFIX}{field.name.upper()}: {raw!r}") from exc
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values).validate()
