"""Sprite atlas: crops individual sprites out of a decoded sprite sheet."""

from pathlib import Path

from PIL import Image, ImageDraw

from .sprite import SPRITE_REGIONS, SpriteKind, Variant

# Flat colours for the built-in sheet
PLACEHOLDER_COLORS: dict[SpriteKind, tuple[int, int, int, int]] = {
    SpriteKind.CANNON: (0, 255, 0, 255),
    SpriteKind.BEAM: (255, 255, 255, 255),
    SpriteKind.BOMB: (255, 80, 80, 255),
    SpriteKind.ENEMY_TOP: (255, 0, 255, 255),
    SpriteKind.ENEMY_MIDDLE: (0, 255, 255, 255),
    SpriteKind.ENEMY_BOTTOM: (255, 255, 0, 255),
}
EXPLOSION_COLOR = (255, 160, 0, 255)
PLACEHOLDER_SHEET_SIZE = (40, 80)


class SpriteAtlas:
    """Hands out RGBA sprite images for every (kind, variant) pair."""

    def __init__(self, sheet: Image.Image):
        """
        Initialize the atlas.

        Args:
            sheet: Decoded sprite sheet laid out like the original artwork
        """
        self.sheet = sheet.convert("RGBA")
        self._cache: dict[tuple[SpriteKind, Variant], Image.Image] = {}

    def sprite(self, kind: SpriteKind, variant: Variant = Variant.NORMAL) -> Image.Image:
        """
        Get the image for a sprite variant.

        Raises:
            KeyError: If the kind has no such variant
        """
        key = (kind, variant)
        image = self._cache.get(key)
        if image is None:
            image = self.sheet.crop(SPRITE_REGIONS[key])
            self._cache[key] = image
        return image

    @classmethod
    def from_file(cls, path: str | Path) -> "SpriteAtlas":
        """Decode a sprite sheet from disk."""
        with Image.open(path) as sheet:
            return cls(sheet.convert("RGBA"))

    @classmethod
    def placeholder(cls) -> "SpriteAtlas":
        """Build an atlas of flat-coloured blocks, for running without artwork."""
        sheet = Image.new("RGBA", PLACEHOLDER_SHEET_SIZE, (0, 0, 0, 0))
        draw = ImageDraw.Draw(sheet, "RGBA")
        for (kind, variant), (left, top, right, bottom) in SPRITE_REGIONS.items():
            color = EXPLOSION_COLOR if variant is Variant.EXPLODED else PLACEHOLDER_COLORS[kind]
            if variant is Variant.ALTERNATE:
                # Hollow block so the walking animation is visible
                draw.rectangle([left, top, right - 1, bottom - 1], outline=color)
            else:
                draw.rectangle([left, top, right - 1, bottom - 1], fill=color)
        return cls(sheet)
