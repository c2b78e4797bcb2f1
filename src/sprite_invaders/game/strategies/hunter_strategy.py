"""Hunter strategy: chase the lowest enemy and shoot where it is going to be."""

from typing import TYPE_CHECKING

from ...constants import BEAM_OFFSET_X
from ..events import InputEvent
from .base_strategy import BaseStrategy

if TYPE_CHECKING:
    from ..game_state import GameSession
    from ..sprite import Sprite


class HunterStrategy(BaseStrategy):
    """
    Steers the cannon under the lowest live enemy closest to it.

    The aim point leads the target by the distance the formation sweeps
    while the beam climbs to it. Fires once the beam is free and the aim
    point is within half a cannon step of the beam's origin.
    """

    def next_event(self, session: "GameSession") -> InputEvent | None:
        origin = self._beam_origin(session)
        target = self._choose_target(session, origin)
        if target is None:
            return None

        offset = self._aim_point(session, target) - origin
        if abs(offset) <= session.config.cannon_step // 2:
            return None if session.projectiles.beam_active else InputEvent.FIRE
        return InputEvent.MOVE_RIGHT if offset > 0 else InputEvent.MOVE_LEFT

    def _beam_origin(self, session: "GameSession") -> int:
        return session.cannon.x + BEAM_OFFSET_X + session.projectiles.beam.width // 2

    def _aim_point(self, session: "GameSession", target: "Sprite") -> int:
        formation = session.formation
        travel_ticks = max(0, session.cannon.y - target.y) // session.config.beam_speed
        lead = formation.direction * formation.step_x * travel_ticks
        return target.x + target.width // 2 + lead

    def _choose_target(self, session: "GameSession", origin: int) -> "Sprite | None":
        enemies = session.formation.live_enemies()
        if not enemies:
            return None
        return min(
            enemies,
            key=lambda enemy: (-enemy.y, abs(self._aim_point(session, enemy) - origin)),
        )
