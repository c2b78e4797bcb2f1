"""The player's beam and the bombs dropped by enemies."""

from typing import List

from ..constants import BEAM_OFFSET_X, BOMB_OFFSET_X
from .sprite import Sprite, create_beam, create_bomb


class ProjectileSet:
    """Owns the single beam and every bomb in flight."""

    def __init__(
        self,
        cannon: Sprite,
        frame_height: int,
        beam_speed: int,
        bomb_speed: int,
    ):
        self.beam = create_beam(cannon)
        self.bombs: List[Sprite] = []
        self.frame_height = frame_height
        self.beam_speed = beam_speed
        self.bomb_speed = bomb_speed

    @property
    def beam_active(self) -> bool:
        return self.beam.alive

    def fire(self, cannon: Sprite) -> bool:
        """
        Launch the beam from the cannon.

        Only one beam may be in flight, so firing while it is active does
        nothing.

        Returns:
            True if the beam was launched
        """
        if self.beam.alive:
            return False
        self.beam.x = cannon.x + BEAM_OFFSET_X
        self.beam.y = cannon.y
        self.beam.alive = True
        return True

    def deactivate_beam(self) -> None:
        """Switch the beam off and park it below the frame."""
        self.beam.alive = False
        self.beam.y = self.frame_height

    def advance_beam(self) -> None:
        """Move an active beam up, switching it off once it leaves the top."""
        if not self.beam.alive:
            return
        self.beam.y -= self.beam_speed
        if self.beam.y < 0:
            self.deactivate_beam()

    def drop_bomb(self, enemy: Sprite) -> Sprite:
        bomb = create_bomb(enemy, BOMB_OFFSET_X)
        self.bombs.append(bomb)
        return bomb

    def advance_bombs(self) -> None:
        for bomb in self.bombs:
            bomb.y += self.bomb_speed

    def prune_bombs(self) -> int:
        """
        Forget bombs that fell past the bottom of the frame.

        Returns:
            Number of bombs removed
        """
        remaining = [bomb for bomb in self.bombs if bomb.y < self.frame_height]
        removed = len(self.bombs) - len(remaining)
        self.bombs = remaining
        return removed
