"""Picking a range on a plot axis by dragging along its scale."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

MIN_PICK_SIZE = 2
"""A drag must be longer than this many pixels to start a pick."""

SNAP_DISTANCE = 5
"""The cursor snaps to a tick closer than this many pixels."""

TEXT_MARGIN = 4
"""Margin in pixels between tracker text and the canvas edge."""


class ScaleAlignment(enum.Enum):
    """Side of the plot where a scale is placed."""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"

    @property
    def horizontal(self) -> bool:
        return self in (ScaleAlignment.BOTTOM, ScaleAlignment.TOP)


@dataclass(frozen=True)
class ScaleMap:
    """Linear mapping between scale values ``s1..s2`` and pixels ``p1..p2``."""

    s1: float
    s2: float
    p1: float
    p2: float

    def __post_init__(self) -> None:
        if self.s1 == self.s2:
            raise ValueError("scale interval cannot be empty")
        if self.p1 == self.p2:
            raise ValueError("pixel interval cannot be empty")

    def transform(self, value: float) -> float:
        """Pixel position of scale ``value``."""
        return self.p1 + (value - self.s1) * (self.p2 - self.p1) / (self.s2 - self.s1)

    def inv_transform(self, pixel: float) -> float:
        """Scale value at ``pixel``."""
        return self.s1 + (pixel - self.p1) * (self.s2 - self.s1) / (self.p2 - self.p1)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class ScalePicker:
    """Tracks mouse presses, moves and releases on a scale widget.

    Positions are pixels along the scale. A completed drag calls ``on_picked``
    with the first and last positions in scale coordinates. Unless Shift is
    held the cursor snaps to nearby ticks.
    """

    def __init__(
        self,
        scale_map: ScaleMap,
        alignment: ScaleAlignment = ScaleAlignment.BOTTOM,
        on_picked: Callable[[float, float], None] | None = None,
    ) -> None:
        self.scale_map = scale_map
        self.alignment = alignment
        self._on_picked = on_picked
        self.pressed = False
        self.started = False
        self.first_pos = 0.0
        self.first_pos_px = 0
        self.current_pos_px = 0
        self._snap_points: list[int] = []
        # precise tick values, since snap points are rounded to pixels
        self._snap_point_map: dict[int, float] = {}

    def update_snap_points(self, ticks: Iterable[float]) -> None:
        """Set the ticks to snap to, major ticks first."""
        self._snap_points = []
        self._snap_point_map = {}
        for tick in ticks:
            p = _round_half_away(self.scale_map.transform(tick))
            self._snap_points.append(p)
            self._snap_point_map[p] = tick

    def _locate(self, pos_px: float, shift: bool) -> float:
        pos_px = int(pos_px)
        if not shift:
            pos_px = next(
                (sp for sp in self._snap_points if abs(pos_px - sp) <= SNAP_DISTANCE),
                pos_px,
            )
        self.current_pos_px = pos_px
        return self.scale_map.inv_transform(pos_px)

    def press(self, pos_px: float, shift: bool = False) -> None:
        """Left button pressed at ``pos_px``."""
        pos = self._locate(pos_px, shift)
        self.pressed = True
        self.first_pos = pos
        self.first_pos_px = self.current_pos_px

    def move(self, pos_px: float, shift: bool = False) -> None:
        """Mouse moved to ``pos_px``; starts a pick once the drag is long enough."""
        self._locate(pos_px, shift)
        if (
            not self.started
            and self.pressed
            and abs(self.current_pos_px - self.first_pos_px) > MIN_PICK_SIZE
        ):
            self.started = True

    def release(self, pos_px: float, shift: bool = False) -> None:
        """Button released at ``pos_px``; finishes a started pick."""
        pos = self._locate(pos_px, shift)
        self.pressed = False
        if self.started:
            self.started = False
            if self.first_pos != pos and self._on_picked is not None:
                self._on_picked(self.first_pos, pos)

    def tracker_text(self) -> str:
        """Scale value under the cursor, exact when snapped to a tick."""
        pos = self._snap_point_map.get(self.current_pos_px)
        if pos is None:
            pos = self.scale_map.inv_transform(self.current_pos_px)
        return f"{pos:g}"

    def tracker_text_rect(
        self,
        canvas_width: float,
        canvas_height: float,
        text_width: float,
        text_height: float,
        offset: float = 0,
    ) -> tuple[float, float, float, float]:
        """Where the tracker text is drawn on the canvas, as (left, top, width, height).

        ``offset`` is the position of the scale widget relative to the canvas
        along the scale direction. The text is centred on the cursor and kept
        on the canvas.
        """
        canvas_pos_px = int(self.current_pos_px + offset)
        if self.alignment.horizontal:
            left = int(canvas_pos_px - text_width / 2)
            left = max(TEXT_MARGIN, left)
            left = int(min(float(left), canvas_width - text_width - TEXT_MARGIN))
            top = 0
            if self.alignment is ScaleAlignment.BOTTOM:
                top = int(canvas_height - text_height)
        else:
            top = int(canvas_pos_px - text_height / 2)
            top = max(0, top)
            top = int(min(float(top), canvas_height - text_height))
            left = TEXT_MARGIN
            if self.alignment is ScaleAlignment.RIGHT:
                left = int(canvas_width - text_width)
        return (float(left), float(top), float(text_width), float(text_height))