import pytest

from serialscope.snapshotoverlay import (
    ANIM_LENGTH_MS,
    LINE_WIDTH,
    SnapshotFlash,
    fade_alpha,
    overlay_rect,
)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_fade_alpha_full_at_start():
    assert fade_alpha(ANIM_LENGTH_MS) == 255


def test_fade_alpha_zero_at_end():
    assert fade_alpha(0) == 0


def test_fade_alpha_decreases():
    values = [fade_alpha(ms) for ms in range(ANIM_LENGTH_MS, -1, -50)]
    assert values == sorted(values, reverse=True)
    assert all(0 <= v <= 255 for v in values)


def test_overlay_rect_fits_line_inside_widget():
    left, top, width, height = overlay_rect(300, 200)
    assert left == LINE_WIDTH // 2
    assert top == LINE_WIDTH // 2
    assert width == 300 - LINE_WIDTH
    assert height == 200 - LINE_WIDTH


def test_flash_active_then_done():
    clock = FakeClock()
    flash = SnapshotFlash((255, 0, 0), clock)
    assert flash.active()
    clock.now += ANIM_LENGTH_MS - 1
    assert flash.active()
    clock.now += 1
    assert not flash.active()
    assert flash.frame(100, 100) is None


def test_flash_frame_color_and_rect():
    clock = FakeClock()
    flash = SnapshotFlash((10, 20, 30), clock)
    color, rect = flash.frame(100, 80)
    assert color == (10, 20, 30, 255)
    assert rect == overlay_rect(100, 80)


@pytest.mark.parametrize("elapsed", [100, 250, 400])
def test_flash_alpha_follows_remaining_time(elapsed):
    clock = FakeClock()
    flash = SnapshotFlash((0, 0, 0), clock)
    clock.now += elapsed
    color, _ = flash.frame(50, 50)
    assert color[3] == fade_alpha(ANIM_LENGTH_MS - elapsed)
    assert color[3] < 255