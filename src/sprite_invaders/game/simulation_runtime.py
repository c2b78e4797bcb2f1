"""Seed helpers for live sessions and reproducible recordings."""

import hashlib
import json
import logging
import random
import time
from dataclasses import asdict
from typing import TYPE_CHECKING

from ..config import GameConfig
from ..constants import DEFAULT_SEED

if TYPE_CHECKING:
    from .strategies.base_strategy import BaseStrategy

logger = logging.getLogger(__name__)


def time_seed() -> int:
    """Seed from the wall clock, falling back to a fixed seed if the clock is unusable."""
    try:
        return time.time_ns()
    except (OSError, OverflowError) as exc:
        logger.warning("Clock unavailable for seeding (%s), using default seed", exc)
        return DEFAULT_SEED


def create_rng(seed: int | None = None) -> random.Random:
    """Create the random source for a process, time-seeded unless ``seed`` is given."""
    return random.Random(time_seed() if seed is None else seed)


def derive_simulation_seed(config: GameConfig, strategy: "BaseStrategy") -> int:
    """Create a stable seed based on simulation inputs."""
    payload = {
        "strategy": strategy.__class__.__name__,
        "config": asdict(config),
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(encoded).digest()
    return int.from_bytes(digest[:8], "big")


def split_rng(seed: int) -> tuple[random.Random, random.Random]:
    """Create independent RNG streams for the autopilot and the game world."""
    master_rng = random.Random(seed)
    strategy_rng = random.Random(master_rng.getrandbits(64))
    game_rng = random.Random(master_rng.getrandbits(64))
    return strategy_rng, game_rng
