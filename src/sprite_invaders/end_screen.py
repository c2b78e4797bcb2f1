"""End screen shown once a session is over."""

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from .constants import END_SCREEN_BACKGROUND, END_SCREEN_COLOR, END_SCREEN_LINE_HEIGHT

if TYPE_CHECKING:
    from .game.game_state import SessionSummary

PLAY_AGAIN_TEXT = "Press 's' to play again"
QUIT_TEXT = "Press 'q' to quit"


def end_screen_lines(summary: "SessionSummary") -> list[str]:
    return [f"Your score is {summary.score}", PLAY_AGAIN_TEXT, QUIT_TEXT]


def render_end_screen(
    summary: "SessionSummary",
    size: tuple[int, int],
    background: Image.Image | None = None,
) -> Image.Image:
    """
    Draw the final score and the replay prompts.

    Args:
        summary: Result of the finished session
        size: Frame size (width, height)
        background: Optional game-over artwork drawn behind the text

    Returns:
        RGBA image of ``size``
    """
    width, height = size
    img = Image.new("RGBA", size, (*END_SCREEN_BACKGROUND, 255))
    if background is not None:
        img.paste(background.convert("RGBA"), (0, 0))

    draw = ImageDraw.Draw(img, "RGBA")
    font = ImageFont.load_default()
    lines = end_screen_lines(summary)
    top = max(0, height - (len(lines) + 1) * END_SCREEN_LINE_HEIGHT)
    for index, text in enumerate(lines):
        # Centre each line horizontally
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        x = (width - text_width) // 2
        y = top + index * END_SCREEN_LINE_HEIGHT
        draw.text((x, y), text, font=font, fill=END_SCREEN_COLOR)
    return img
