"""WebP output provider."""

from PIL import Image

from .base import PillowSequenceOutputProvider


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Output provider for lossless animated WebP."""

    @property
    def output_format(self) -> str:
        return "webp"

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        # Composited frames are fully opaque; keep alpha only if a frame uses it
        if frame.mode == "RGBA" and frame.getextrema()[3][0] == 255:
            return frame.convert("RGB")
        return frame

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 100, "method": 4}
