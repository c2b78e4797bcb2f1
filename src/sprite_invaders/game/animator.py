"""Animator for recording headless sessions played by a strategy."""

from typing import Callable, Iterator, List

from PIL import Image

from ..config import GameConfig
from ..constants import MAX_SIMULATION_TICKS
from ..end_screen import render_end_screen
from ..sinks import RecordingCueSink
from .atlas import SpriteAtlas
from .controller import GameLoopController
from .events import EventQueue
from .game_state import GameSession, SessionSummary
from .renderer import FrameCompositor
from .simulation_runtime import derive_simulation_seed, split_rng
from .strategies.base_strategy import BaseStrategy


def _no_sleep(seconds: float) -> None:
    del seconds


class Animator:
    """Generates animation frames from a strategy playing one session."""

    def __init__(
        self,
        config: GameConfig,
        strategy: BaseStrategy,
        atlas: SpriteAtlas | None = None,
        background: Image.Image | None = None,
        seed: int | None = None,
        seed_factory: Callable[[GameConfig, BaseStrategy], int] = derive_simulation_seed,
        end_screen: bool = True,
        max_ticks: int = MAX_SIMULATION_TICKS,
    ):
        """
        Initialize animator.

        Args:
            config: Game configuration
            strategy: The autopilot producing input events
            atlas: Sprite atlas, the flat-colour placeholder when omitted
            background: Optional background image
            seed: Optional deterministic seed for random-driven behavior
            seed_factory: Seed policy callable used when seed is not provided
            end_screen: Whether to append the game-over pause and end screen
            max_ticks: Hard stop for sessions that never end
        """
        self.config = config.validate()
        self.strategy = strategy
        self.atlas = atlas or SpriteAtlas.placeholder()
        self.background = background
        self.seed = seed if seed is not None else seed_factory(config, strategy)
        self.end_screen = end_screen
        self.max_ticks = max_ticks
        self.frame_duration = max(1, config.tick_delay_ms)
        self.summary: SessionSummary | None = None
        self.cues: List[str] = []

    def iter_frames(self, max_frames: int | None = None) -> Iterator[Image.Image]:
        """Yield one frame per tick, then the end screen, stopping at ``max_frames``."""
        strategy_rng, game_rng = split_rng(self.seed)
        self.strategy.set_rng(strategy_rng)
        events = EventQueue(self.config.event_queue_size)
        cue_sink = RecordingCueSink()
        controller = GameLoopController(
            self.config,
            FrameCompositor(self.atlas, self.config.size, self.background),
            events,
            cue_sink=cue_sink,
            rng=game_rng,
            sleep=_no_sleep,
        )
        session = controller.new_session()
        self.cues = cue_sink.cues

        rendered = 0
        for frame in self._frames(controller, session, events):
            if max_frames is not None and rendered >= max_frames:
                break
            yield frame
            rendered += 1
        self.summary = session.summary()

    def _frames(
        self, controller: GameLoopController, session: GameSession, events: EventQueue
    ) -> Iterator[Image.Image]:
        last_frame: Image.Image | None = None
        while not session.is_over and session.tick < self.max_ticks:
            event = self.strategy.next_event(session)
            if event is not None:
                events.post(event)
            result = controller.tick(session)
            if result.frame is not None:
                last_frame = result.frame
                yield result.frame

        session.end("tick limit")
        if not self.end_screen or last_frame is None:
            return

        pause_frames = max(1, self.config.game_over_pause_ms // self.frame_duration)
        for _ in range(pause_frames):
            yield last_frame
        final = render_end_screen(session.summary(), self.config.size)
        for _ in range(pause_frames):
            yield final
