"""Shared fixtures for sprite-invaders tests."""

import random
from typing import Callable

import pytest

from sprite_invaders.config import GameConfig
from sprite_invaders.game.atlas import SpriteAtlas
from sprite_invaders.game.controller import GameLoopController
from sprite_invaders.game.events import EventQueue
from sprite_invaders.game.game_state import GameSession
from sprite_invaders.game.renderer import FrameCompositor
from sprite_invaders.sinks import LatestFrameSink, RecordingCueSink


class Harness:
    """A controller wired to in-memory sinks, with no sleeping."""

    def __init__(self, config: GameConfig, seed: int = 0):
        self.config = config
        self.events = EventQueue(config.event_queue_size)
        self.frames = LatestFrameSink()
        self.cues = RecordingCueSink()
        self.summaries: list = []
        self.sleeps: list[float] = []
        self.controller = GameLoopController(
            config,
            FrameCompositor(SpriteAtlas.placeholder(), config.size),
            self.events,
            frame_sink=self.frames,
            cue_sink=self.cues,
            summary_sink=self.summaries.append,
            rng=random.Random(seed),
            sleep=self.sleeps.append,
        )

    def session(self) -> GameSession:
        return self.controller.new_session()

    def ticks(self, session: GameSession, count: int) -> None:
        for _ in range(count):
            self.controller.tick(session)


@pytest.fixture
def quiet_config() -> GameConfig:
    """Default layout with bomb drops switched off."""
    return GameConfig(bomb_probability=0.0)


@pytest.fixture
def single_enemy_config() -> GameConfig:
    """One enemy at (100, 30), no bomb drops."""
    return GameConfig(enemy_columns=1, enemy_rows=1, bomb_probability=0.0)


@pytest.fixture
def make_harness() -> Callable[..., Harness]:
    return Harness


@pytest.fixture
def harness(quiet_config: GameConfig) -> Harness:
    return Harness(quiet_config)


@pytest.fixture
def atlas() -> SpriteAtlas:
    return SpriteAtlas.placeholder()
