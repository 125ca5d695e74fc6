"""A block of samples for several channels, with optional X values."""

from __future__ import annotations


class SamplePack:
    """Holds ``num_samples`` zero-initialised samples for each of ``num_channels``."""

    def __init__(self, num_samples: int, num_channels: int, has_x: bool = False) -> None:
        if num_samples <= 0 or num_channels <= 0:
            raise ValueError(
                "number of samples and channels must be positive, "
                f"got {num_samples} and {num_channels}"
            )
        self._num_samples = num_samples
        self._y = [[0.0] * num_samples for _ in range(num_channels)]
        self._x = [0.0] * num_samples if has_x else None

    @property
    def num_samples(self) -> int:
        return self._num_samples

    @property
    def num_channels(self) -> int:
        return len(self._y)

    @property
    def has_x(self) -> bool:
        return self._x is not None

    def data(self, channel: int) -> list[float]:
        """The mutable sample list of ``channel``."""
        if not 0 <= channel < len(self._y):
            raise IndexError(f"channel {channel} out of range for {len(self._y)} channels")
        return self._y[channel]

    def x_data(self) -> list[float]:
        """The mutable X value list; the pack must have been created with X."""
        if self._x is None:
            raise ValueError("sample pack has no X data")
        return self._x

    def copy(self) -> SamplePack:
        """An independent copy of this pack."""
        other = SamplePack(self._num_samples, len(self._y), self.has_x)
        other._y = [list(channel) for channel in self._y]
        if self._x is not None:
            other._x = list(self._x)
        return other