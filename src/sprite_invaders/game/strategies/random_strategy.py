"""Random strategy: mash keys with a bias towards firing."""

import random
from typing import TYPE_CHECKING

from ..events import InputEvent
from .base_strategy import BaseStrategy

if TYPE_CHECKING:
    from ..game_state import GameSession


class RandomStrategy(BaseStrategy):
    """Picks a weighted random input every tick."""
    _CHOICES: tuple[InputEvent | None, ...] = (
        None,
        InputEvent.FIRE,
        InputEvent.MOVE_LEFT,
        InputEvent.MOVE_RIGHT,
    )
    _WEIGHTS = (6, 2, 1, 1)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def next_event(self, session: "GameSession") -> InputEvent | None:
        return self._rng.choices(self._CHOICES, weights=self._WEIGHTS, k=1)[0]
