"""Counts incoming samples and reports samples per second."""

from __future__ import annotations

import time
from collections.abc import Callable

from serialscope.samplepack import SamplePack

_REPORT_PERIOD_MS = 1000


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class SampleCounter:
    """Reports the sample rate roughly once a second through ``on_sps``.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        on_sps: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._on_sps = on_sps
        self._clock = clock or _now_ms
        self._prev_ms = self._clock()
        self._count = 0

    def feed_in(self, pack: SamplePack) -> None:
        """Count the samples of ``pack`` and report when a second has passed."""
        self._count += pack.num_samples
        current = self._clock()
        diff = current - self._prev_ms
        if diff > _REPORT_PERIOD_MS:
            if self._on_sps is not None:
                self._on_sps(1000.0 * self._count / diff)
            self._prev_ms = current
            self._count = 0