"""Random bomb release for live enemies."""

import random

from ..constants import BOMB_PROBABILITY


class SpawnPolicy:
    """Decides, once per live enemy per tick, whether that enemy drops a bomb."""

    def __init__(self, rng: random.Random, probability: float = BOMB_PROBABILITY):
        self.rng = rng
        self.probability = probability

    def should_drop(self) -> bool:
        return self.rng.random() < self.probability
