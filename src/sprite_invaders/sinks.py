"""Destinations for frames and sound cues produced by the tick loop."""

import base64
import threading
from collections import deque
from io import BytesIO
from typing import List, Protocol

from PIL import Image


class FrameSink(Protocol):
    def publish(self, frame: Image.Image) -> None: ...


class CueSink(Protocol):
    def play(self, cue: str) -> None: ...


def encode_png_data_url(frame: Image.Image) -> str:
    """Encode a frame as a ``data:image/png;base64,...`` URL."""
    buffer = BytesIO()
    frame.save(buffer, format="png")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


class LatestFrameSink:
    """
    Keeps only the most recent frame.

    The tick loop never waits for a consumer; a slow reader simply sees the
    latest frame.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._frame: Image.Image | None = None
        self.published = 0

    def publish(self, frame: Image.Image) -> None:
        with self._lock:
            self._frame = frame
            self.published += 1

    def latest(self) -> Image.Image | None:
        with self._lock:
            return self._frame

    def data_url(self) -> str:
        """Latest frame as a PNG data URL, or an empty string before the first frame."""
        frame = self.latest()
        return encode_png_data_url(frame) if frame is not None else ""


class CueQueueSink:
    """Bounded buffer of cue names waiting for an audio layer to pick them up."""

    def __init__(self, maxlen: int = 64) -> None:
        self._lock = threading.Lock()
        self._cues: deque[str] = deque(maxlen=maxlen)

    def play(self, cue: str) -> None:
        with self._lock:
            self._cues.append(cue)

    def drain(self) -> List[str]:
        with self._lock:
            cues = list(self._cues)
            self._cues.clear()
        return cues


class RecordingCueSink:
    """Remembers every cue, in order."""

    def __init__(self) -> None:
        self.cues: List[str] = []

    def play(self, cue: str) -> None:
        self.cues.append(cue)
