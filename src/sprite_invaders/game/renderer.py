"""Frame compositor drawing a session into a Pillow image."""

from PIL import Image

from ..constants import BACKGROUND_COLOR
from .atlas import SpriteAtlas
from .game_state import GameSession
from .sprite import Sprite, Variant


def enemy_variant(enemy: Sprite, tick: int) -> Variant | None:
    """
    Pick how an enemy is drawn on ``tick``.

    Live enemies alternate between their two frames by tick parity. A dead
    enemy shows its explosion on the tick it died and is skipped afterwards.
    """
    if enemy.alive:
        return Variant.NORMAL if tick % 2 == 0 else Variant.ALTERNATE
    if enemy.destroyed_tick == tick:
        return Variant.EXPLODED
    return None


def cannon_variant(session: GameSession) -> Variant | None:
    """Pick how the cannon is drawn, or None once the game ended on an earlier tick."""
    cannon = session.cannon
    if not cannon.alive:
        return Variant.EXPLODED if cannon.destroyed_tick == session.tick else None
    if session.is_over and session.game_over_tick is not None and session.game_over_tick < session.tick:
        return None
    return Variant.NORMAL


class FrameCompositor:
    """Renders game sessions as RGBA Pillow images."""

    def __init__(
        self,
        atlas: SpriteAtlas,
        size: tuple[int, int],
        background: Image.Image | None = None,
    ):
        """
        Initialize compositor.

        Args:
            atlas: Source of sprite images
            size: Output frame size (width, height)
            background: Optional decoded background, drawn unscaled at the origin
        """
        self.atlas = atlas
        self.size = size
        self.background = background.convert("RGBA") if background is not None else None

    def render(self, session: GameSession) -> Image.Image:
        """
        Draw the session without changing it.

        Painter order: background, enemies, bombs, cannon, beam.

        Returns:
            RGBA image of the configured frame size
        """
        frame = Image.new("RGBA", self.size, BACKGROUND_COLOR)
        if self.background is not None:
            self._blit(frame, self.background, 0, 0)

        for enemy in session.formation.enemies:
            variant = enemy_variant(enemy, session.tick)
            if variant is not None:
                self._draw(frame, enemy, variant)

        for bomb in session.projectiles.bombs:
            self._draw(frame, bomb, Variant.NORMAL)

        variant = cannon_variant(session)
        if variant is not None:
            self._draw(frame, session.cannon, variant)

        if session.projectiles.beam_active:
            self._draw(frame, session.projectiles.beam, Variant.NORMAL)

        return frame

    def _draw(self, frame: Image.Image, sprite: Sprite, variant: Variant) -> None:
        self._blit(frame, self.atlas.sprite(sprite.kind, variant), sprite.x, sprite.y)

    def _blit(self, frame: Image.Image, source: Image.Image, x: int, y: int) -> None:
        # Clip to the frame, sprites may hang off any edge
        left, top = max(x, 0), max(y, 0)
        right = min(x + source.width, frame.width)
        bottom = min(y + source.height, frame.height)
        if right <= left or bottom <= top:
            return
        frame.alpha_composite(
            source, dest=(left, top), source=(left - x, top - y, right - x, bottom - y)
        )
