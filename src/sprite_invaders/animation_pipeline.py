"""Shared animation orchestration used by CLI entry points."""

from .config import GameConfig
from .game.animator import Animator
from .game.atlas import SpriteAtlas
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider
from .output.base import OutputProvider


def encode_animation(
    config: GameConfig,
    strategy: BaseStrategy,
    output_path: str,
    *,
    max_frames: int | None,
    seed: int | None = None,
    atlas: SpriteAtlas | None = None,
    provider: OutputProvider | None = None,
) -> tuple[bytes, Animator]:
    """
    Record a headless session and encode it for the given output path.

    Returns:
        Encoded bytes and the animator, whose ``summary`` holds the final score
    """
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(config, strategy, atlas=atlas, seed=seed)
    encoded = target_provider.encode(
        animator.iter_frames(max_frames), frame_duration=animator.frame_duration
    )
    return encoded, animator
