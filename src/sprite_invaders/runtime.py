"""Background runner connecting the tick loop to a display shell."""

import logging
import threading

from PIL import Image

from .config import GameConfig
from .end_screen import render_end_screen
from .game.atlas import SpriteAtlas
from .game.controller import GameLoopController
from .game.events import EventQueue, InputEvent
from .game.game_state import SessionSummary
from .game.renderer import FrameCompositor
from .sinks import CueQueueSink, LatestFrameSink

logger = logging.getLogger(__name__)


class GameRunner:
    """Runs the controller on a daemon thread and exposes its outputs."""

    def __init__(
        self,
        config: GameConfig,
        atlas: SpriteAtlas | None = None,
        background: Image.Image | None = None,
        end_background: Image.Image | None = None,
    ):
        """
        Initialize the runner.

        Args:
            config: Game configuration
            atlas: Decoded sprite atlas, the placeholder when omitted
            background: Decoded background drawn behind every frame
            end_background: Decoded artwork behind the end screen text
        """
        self.config = config.validate()
        self.events = EventQueue(config.event_queue_size)
        self.frames = LatestFrameSink()
        self.cues = CueQueueSink()
        self.end_background = end_background
        self.last_summary: SessionSummary | None = None
        self.controller = GameLoopController(
            config,
            FrameCompositor(atlas or SpriteAtlas.placeholder(), config.size, background),
            self.events,
            frame_sink=self.frames,
            cue_sink=self.cues,
            summary_sink=self._show_end_screen,
        )
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """
        Start playing unless a game thread is already alive.

        Returns:
            True if a new thread was started
        """
        with self._lock:
            if self.running:
                return False
            self.events.clear()
            self._thread = threading.Thread(target=self._run, name="tick-loop", daemon=True)
            self._thread.start()
            return True

    def post(self, token: str) -> bool:
        return self.events.post(token)

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to quit and wait for the thread to finish."""
        self.events.post(InputEvent.QUIT)
        if self._thread is not None:
            self._thread.join(timeout)

    def frame_data_url(self) -> str:
        return self.frames.data_url()

    def drain_cues(self) -> list[str]:
        return self.cues.drain()

    def _run(self) -> None:
        summary = self.controller.run()
        logger.info("Game loop stopped, final score %d", summary.score)

    def _show_end_screen(self, summary: SessionSummary) -> None:
        self.last_summary = summary
        self.frames.publish(render_end_screen(summary, self.config.size, self.end_background))
