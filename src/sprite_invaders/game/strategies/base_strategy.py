"""Base strategy interface for autopilot players."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..events import InputEvent

if TYPE_CHECKING:
    from ..game_state import GameSession


class BaseStrategy(ABC):
    """Abstract base class for strategies that play a session without a human."""

    def set_rng(self, rng: random.Random) -> None:
        """Inject RNG source for deterministic simulations."""
        del rng

    @abstractmethod
    def next_event(self, session: "GameSession") -> InputEvent | None:
        """
        Decide the input for the coming tick.

        Args:
            session: The current session, read only

        Returns:
            The event to post, or None to leave the controls alone
        """
        raise NotImplementedError
