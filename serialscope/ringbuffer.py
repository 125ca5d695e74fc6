"""A fixed-size circular buffer of samples."""

from __future__ import annotations

from collections.abc import Iterable

from serialscope.framebuffer import Range, WFrameBuffer


class RingBuffer(WFrameBuffer):
    """Circular storage where new samples push the oldest ones out.

    Index 0 is always the oldest sample, the last index the newest.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"buffer size cannot be negative: {n}")
        self._data = [0.0] * n
        self._head = 0
        self._limits: Range | None = Range(0.0, 0.0)

    def __len__(self) -> int:
        return len(self._data)

    def sample(self, i: int) -> float:
        size = len(self._data)
        if not 0 <= i < size:
            raise IndexError(f"sample index {i} out of range for size {size}")
        index = self._head + i
        if index >= size:
            index -= size
        return self._data[index]

    def limits(self) -> Range:
        if self._limits is None:
            if self._data:
                self._limits = Range(min(self._data), max(self._data))
            else:
                self._limits = Range(0.0, 0.0)
        return self._limits

    def resize(self, n: int) -> None:
        size = len(self._data)
        if n == size:
            raise ValueError(f"buffer already has size {n}")
        if n < 0:
            raise ValueError(f"buffer size cannot be negative: {n}")
        offset = n - size
        fill_start = max(offset, 0)
        kept = [self.sample(i - offset) for i in range(fill_start, n)]
        self._data = [0.0] * fill_start + kept
        self._head = 0
        self._limits = None

    def add_samples(self, samples: Iterable[float]) -> None:
        values = [float(v) for v in samples]
        n = len(values)
        size = len(self._data)
        if n >= size:
            self._data = values[n - size:]
            self._head = 0
        else:
            room = size - self._head
            if n <= room:
                self._data[self._head:self._head + n] = values
                self._head = (self._head + n) % size
            else:
                self._data[self._head:] = values[:room]
                self._data[:n - room] = values[room:]
                self._head = n - room
        self._limits = None

    def clear(self) -> None:
        self._data = [0.0] * len(self._data)
        self._limits = Range(0.0, 0.0)