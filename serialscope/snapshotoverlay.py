"""A fading frame flashed around a plot when a snapshot is taken."""

from __future__ import annotations

import time
from collections.abc import Callable

LINE_WIDTH = 10
ANIM_LENGTH_MS = 500
UPDATE_PERIOD_MS = 20


def _now_ms() -> float:
    return time.monotonic() * 1000.0


def fade_alpha(remaining_ms: float) -> int:
    """Alpha of the frame colour with ``remaining_ms`` of the animation left."""
    ratio = remaining_ms / ANIM_LENGTH_MS
    return max(0, min(255, int(255 * ratio)))


def overlay_rect(width: int, height: int) -> tuple[int, int, int, int]:
    """Rectangle (left, top, width, height) of the frame line on a widget."""
    half = LINE_WIDTH // 2
    return (half, half, width - LINE_WIDTH, height - LINE_WIDTH)


class SnapshotFlash:
    """A flash animation that fades out over ``ANIM_LENGTH_MS`` after creation.

    ``color`` is an (r, g, b) tuple; ``clock`` returns time in milliseconds.
    """

    def __init__(
        self,
        color: tuple[int, int, int],
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.color = tuple(color[:3])
        self._clock = clock or _now_ms
        self._start = self._clock()

    def _remaining_ms(self) -> float:
        return ANIM_LENGTH_MS - (self._clock() - self._start)

    def active(self) -> bool:
        """Whether the animation is still running."""
        return self._remaining_ms() > 0

    def frame(
        self, width: int, height: int
    ) -> tuple[tuple[int, int, int, int], tuple[int, int, int, int]] | None:
        """The (r, g, b, a) colour and rectangle to draw now, or ``None`` when done."""
        remaining = self._remaining_ms()
        if remaining <= 0:
            return None
        return ((*self.color, fade_alpha(remaining)), overlay_rect(width, height))