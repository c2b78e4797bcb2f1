"""GIF output provider."""

from PIL import Image

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Output provider for GIF format."""

    @property
    def output_format(self) -> str:
        return "gif"

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        # Frames are opaque, drop alpha before palette quantization
        return frame.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False}
