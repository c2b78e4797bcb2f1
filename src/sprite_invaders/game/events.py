"""Input events and the bounded queue that carries them into the tick loop."""

import logging
import queue
import time
from enum import Enum

from ..constants import EVENT_QUEUE_SIZE

logger = logging.getLogger(__name__)


class InputEvent(Enum):
    """The semantic input classes the game understands."""
    QUIT = "quit"
    FIRE = "fire"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    RESTART = "restart"


# Browser key codes plus readable names
KEY_BINDINGS: dict[str, InputEvent] = {
    "81": InputEvent.QUIT,  # q
    "32": InputEvent.FIRE,  # space
    "37": InputEvent.MOVE_LEFT,  # left arrow
    "39": InputEvent.MOVE_RIGHT,  # right arrow
    "83": InputEvent.RESTART,  # s
    **{event.value: event for event in InputEvent},
}


def parse_event(token: "str | InputEvent | None") -> InputEvent | None:
    """Map an input token to an event, returning None for anything unknown."""
    if isinstance(token, InputEvent):
        return token
    if not isinstance(token, str):
        return None
    return KEY_BINDINGS.get(token.strip().lower())


class EventQueue:
    """
    Thread-safe bounded queue between the input source and the tick loop.

    Producers never block: when the queue is full the token is dropped.
    The tick loop consumes at most one token per tick with ``poll``.
    """

    def __init__(self, maxsize: int = EVENT_QUEUE_SIZE):
        self._queue: "queue.Queue[str | InputEvent]" = queue.Queue(maxsize=maxsize)

    def post(self, token: "str | InputEvent") -> bool:
        """
        Enqueue a raw token without blocking.

        Returns:
            False if the queue was full and the token was dropped
        """
        try:
            self._queue.put_nowait(token)
        except queue.Full:
            logger.warning("Input queue full, dropping %r", token)
            return False
        return True

    def poll(self) -> InputEvent | None:
        """Take one pending token if there is one; unknown tokens come back as None."""
        try:
            token = self._queue.get_nowait()
        except queue.Empty:
            return None
        return parse_event(token)

    def wait(self, timeout: float | None = None) -> InputEvent | None:
        """
        Block until a recognised event arrives, used only between sessions.

        Unknown tokens are discarded while waiting.

        Returns:
            The event, or None if ``timeout`` seconds passed first
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            try:
                token = self._queue.get(timeout=remaining)
            except queue.Empty:
                return None
            event = parse_event(token)
            if event is not None:
                return event

    def clear(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def __len__(self) -> int:
        return self._queue.qsize()
