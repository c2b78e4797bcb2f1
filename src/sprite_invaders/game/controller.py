"""Game loop controller: runs fixed-duration ticks over a game session."""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

from PIL import Image

from ..config import GameConfig
from ..constants import EXPLOSION_CUE, INVADER_KILLED_CUE, SHOOT_CUE
from ..sinks import CueSink, FrameSink
from .collision import collides
from .events import EventQueue, InputEvent
from .game_state import GameSession, SessionState, SessionSummary
from .renderer import FrameCompositor
from .simulation_runtime import create_rng
from .spawn import SpawnPolicy

logger = logging.getLogger(__name__)

SummarySink = Callable[[SessionSummary], None]


@dataclass(frozen=True, slots=True)
class TickResult:
    """What one tick produced. ``frame`` is None when a quit skipped compositing."""
    frame: Image.Image | None
    cues: tuple[str, ...]
    state: SessionState


class GameLoopController:
    """Owns the tick loop; the only writer of session state."""

    def __init__(
        self,
        config: GameConfig,
        compositor: FrameCompositor,
        events: EventQueue,
        frame_sink: FrameSink | None = None,
        cue_sink: CueSink | None = None,
        summary_sink: SummarySink | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the controller.

        Args:
            config: Game configuration, validated here
            compositor: Renders one frame per tick
            events: Queue the input layer posts tokens into
            frame_sink: Receives every rendered frame
            cue_sink: Receives sound cue names
            summary_sink: Receives the final summary of each finished session
            rng: Random source for bomb spawning, time-seeded when omitted
            sleep: Blocking sleep used between ticks
        """
        self.config = config.validate()
        self.compositor = compositor
        self.events = events
        self.frame_sink = frame_sink
        self.cue_sink = cue_sink
        self.summary_sink = summary_sink
        self.spawn_policy = SpawnPolicy(rng or create_rng(), config.bomb_probability)
        self._sleep = sleep

    def new_session(self) -> GameSession:
        return GameSession(self.config)

    def tick(self, session: GameSession) -> TickResult:
        """
        Advance the session by one tick and render it.

        Args:
            session: Session to mutate

        Returns:
            The frame and cues produced by this tick
        """
        cues: list[str] = []
        if session.is_over:
            return TickResult(self.compositor.render(session), (), session.state)

        event = self.events.poll()
        if event is not None:
            self._apply_input(session, event, cues)
        if session.quit_requested:
            self._emit_cues(cues)
            return TickResult(None, tuple(cues), session.state)

        formation = session.formation
        projectiles = session.projectiles
        formation.advance()
        formation.check_and_flip()

        for enemy in formation.live_enemies():
            if projectiles.beam_active and collides(enemy, projectiles.beam):
                session.destroy_enemy(enemy)
                projectiles.deactivate_beam()
                cues.append(INVADER_KILLED_CUE)
            elif self.spawn_policy.should_drop():
                projectiles.drop_bomb(enemy)

        projectiles.advance_bombs()
        for bomb in projectiles.bombs:
            if session.cannon.alive and collides(bomb, session.cannon):
                session.destroy_cannon()
                cues.append(EXPLOSION_CUE)
        projectiles.prune_bombs()

        projectiles.advance_beam()

        if formation.has_invaded(self.config.ground_y):
            session.end("formation reached the ground")

        frame = self.compositor.render(session)
        self._emit_frame(frame)
        self._emit_cues(cues)
        session.tick += 1
        return TickResult(frame, tuple(cues), session.state)

    def run_session(self, session: GameSession) -> SessionSummary:
        """
        Tick at the configured cadence until the session ends.

        After a game over the final frame stays up for a short pause; a quit
        returns straight away.
        """
        logger.debug("Session started")
        while not session.is_over:
            self._sleep(self.config.tick_delay)
            self.tick(session)

        summary = session.summary()
        if not summary.quit:
            self._sleep(self.config.game_over_pause)
            if self.summary_sink is not None:
                self.summary_sink(summary)
        logger.info("Session finished after %d ticks with score %d", summary.ticks, summary.score)
        return summary

    def run(self) -> SessionSummary:
        """Play sessions until the player quits, restarting on request."""
        while True:
            summary = self.run_session(self.new_session())
            if summary.quit or not self.wait_for_restart():
                return summary

    def wait_for_restart(self, timeout: float | None = None) -> bool:
        """
        Block until the player restarts or quits; other input is ignored.

        Returns:
            True to start a new session, False to stop
        """
        while True:
            event = self.events.wait(timeout)
            if event is InputEvent.RESTART:
                return True
            if event is InputEvent.QUIT or event is None:
                return False

    def _apply_input(self, session: GameSession, event: InputEvent, cues: list[str]) -> None:
        if event is InputEvent.QUIT:
            session.request_quit()
        elif event is InputEvent.FIRE:
            session.projectiles.fire(session.cannon)
            cues.append(SHOOT_CUE)
        elif event is InputEvent.MOVE_LEFT:
            session.cannon.x -= self.config.cannon_step
        elif event is InputEvent.MOVE_RIGHT:
            session.cannon.x += self.config.cannon_step
        # RESTART only means something once the session is over

    def _emit_frame(self, frame: Image.Image) -> None:
        if self.frame_sink is None:
            return
        try:
            self.frame_sink.publish(frame)
        except Exception:
            logger.warning("Frame sink rejected a frame", exc_info=True)

    def _emit_cues(self, cues: list[str]) -> None:
        if self.cue_sink is None:
            return
        for cue in cues:
            try:
                self.cue_sink.play(cue)
            except Exception:
                logger.warning("Cue sink rejected %r", cue, exc_info=True)
