"""Abstract interfaces shared by all frame buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """A closed interval of values, usually the minimum and maximum of a buffer."""

    start: float
    end: float


class FrameBuffer(ABC):
    """Read access to a fixed-size sequence of samples."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of samples in the buffer."""

    @abstractmethod
    def sample(self, i: int) -> float:
        """Sample at index ``i``."""

    @abstractmethod
    def limits(self) -> Range:
        """Minimum and maximum of the buffer values."""

    def __iter__(self) -> Iterator[float]:
        for i in range(len(self)):
            yield self.sample(i)


class ResizableBuffer(FrameBuffer):
    """A frame buffer whose size can be changed."""

    @abstractmethod
    def resize(self, n: int) -> None:
        """Resize the buffer to ``n`` samples; resizing to the current size is an error."""


class WFrameBuffer(ResizableBuffer):
    """A writable frame buffer."""

    @abstractmethod
    def add_samples(self, samples: Iterable[float]) -> None:
        """Append samples to the buffer."""

    @abstractmethod
    def clear(self) -> None:
        """Reset all data to zero."""


class XFrameBuffer(ResizableBuffer):
    """A buffer of X values, each greater than or equal to the one before it."""

    @abstractmethod
    def find_index(self, value: float) -> int | None:
        """Index of ``value``.

        Returns ``None`` when the value lies outside the buffer's range. For a
        value between two samples the smaller index is returned.
        """