"""Tests for autopilot strategies."""

import random

import pytest

from sprite_invaders.config import GameConfig
from sprite_invaders.game.events import InputEvent
from sprite_invaders.game.game_state import GameSession
from sprite_invaders.game.strategies import (
    HunterStrategy,
    RandomStrategy,
    create_strategy,
    supported_strategy_names,
)


class TestRegistry:
    """Tests for the strategy registry."""

    def test_names(self) -> None:
        assert supported_strategy_names() == ("hunter", "random")

    def test_create_by_name(self) -> None:
        assert isinstance(create_strategy("random"), RandomStrategy)

    def test_unknown_name_falls_back_to_default(self) -> None:
        assert isinstance(create_strategy("nope", default="hunter"), HunterStrategy)

    def test_unknown_name_without_default(self) -> None:
        with pytest.raises(ValueError, match="Unknown strategy 'nope'"):
            create_strategy("nope")


class TestHunterStrategy:
    """Tests for HunterStrategy.next_event()."""

    def test_moves_towards_lowest_nearest_enemy(self) -> None:
        session = GameSession(GameConfig())
        assert HunterStrategy().next_event(session) is InputEvent.MOVE_RIGHT

        session.cannon.x = 400
        assert HunterStrategy().next_event(session) is InputEvent.MOVE_LEFT

    def test_fires_when_aligned(self) -> None:
        session = GameSession(GameConfig())
        # Beam leaves at cannon.x + 8; the first bottom-row enemy is centred on 110
        # and sweeps 51px right while the beam climbs 170px
        session.cannon.x = 153
        assert HunterStrategy().next_event(session) is InputEvent.FIRE

    def test_waits_for_beam_when_aligned(self) -> None:
        session = GameSession(GameConfig())
        session.cannon.x = 153
        session.projectiles.fire(session.cannon)
        assert HunterStrategy().next_event(session) is None

    def test_idle_without_enemies(self) -> None:
        session = GameSession(GameConfig())
        for enemy in session.formation.enemies:
            session.destroy_enemy(enemy)
        assert HunterStrategy().next_event(session) is None


class TestRandomStrategy:
    """Tests for RandomStrategy.next_event()."""

    def test_same_seed_same_inputs(self) -> None:
        session = GameSession(GameConfig())
        a = RandomStrategy(random.Random(3))
        b = RandomStrategy()
        b.set_rng(random.Random(3))

        assert [a.next_event(session) for _ in range(50)] == [b.next_event(session) for _ in range(50)]

    def test_only_player_inputs(self) -> None:
        session = GameSession(GameConfig())
        strategy = RandomStrategy(random.Random(9))
        seen = {strategy.next_event(session) for _ in range(500)}
        assert seen <= {None, InputEvent.FIRE, InputEvent.MOVE_LEFT, InputEvent.MOVE_RIGHT}
        assert InputEvent.FIRE in seen
