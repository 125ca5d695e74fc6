import pytest

from serialscope.scalepicker import (
    MIN_PICK_SIZE,
    SNAP_DISTANCE,
    TEXT_MARGIN,
    ScaleAlignment,
    ScaleMap,
    ScalePicker,
)


@pytest.fixture
def scale_map():
    return ScaleMap(0.0, 10.0, 0.0, 100.0)


def make_picker(scale_map, alignment=ScaleAlignment.BOTTOM):
    picks = []
    picker = ScalePicker(scale_map, alignment, lambda a, b: picks.append((a, b)))
    return picker, picks


def test_scale_map_transform_value(scale_map):
    assert scale_map.transform(5.0) == pytest.approx(50.0)


@pytest.mark.parametrize("value", [-3.0, 0.0, 2.5, 7.25, 12.0])
def test_scale_map_round_trip(scale_map, value):
    assert scale_map.inv_transform(scale_map.transform(value)) == pytest.approx(value)


def test_scale_map_rejects_empty_intervals():
    with pytest.raises(ValueError):
        ScaleMap(1.0, 1.0, 0.0, 100.0)
    with pytest.raises(ValueError):
        ScaleMap(0.0, 1.0, 50.0, 50.0)


def test_drag_emits_pick(scale_map):
    picker, picks = make_picker(scale_map)
    picker.press(10)
    picker.move(20)
    assert picker.started
    picker.release(20)
    assert picks == [(scale_map.inv_transform(10), scale_map.inv_transform(20))]
    assert not picker.started
    assert not picker.pressed


def test_click_without_drag_does_not_pick(scale_map):
    picker, picks = make_picker(scale_map)
    picker.press(10)
    picker.release(10)
    assert picks == []


def test_short_drag_does_not_start(scale_map):
    picker, picks = make_picker(scale_map)
    picker.press(10)
    picker.move(10 + MIN_PICK_SIZE)
    assert not picker.started
    picker.release(10 + MIN_PICK_SIZE)
    assert picks == []


def test_move_without_press_does_not_start(scale_map):
    picker, picks = make_picker(scale_map)
    picker.move(10)
    picker.move(40)
    picker.release(40)
    assert not picker.started
    assert picks == []


def test_zero_width_pick_is_ignored(scale_map):
    picker, picks = make_picker(scale_map)
    picker.press(10)
    picker.move(30)
    picker.move(10)
    picker.release(10)
    assert picks == []


def test_snaps_to_tick(scale_map):
    picker, _ = make_picker(scale_map)
    picker.update_snap_points([0.0, 5.0])
    picker.press(50 - SNAP_DISTANCE)
    assert picker.current_pos_px == 50
    assert picker.first_pos == pytest.approx(5.0)


def test_no_snap_outside_distance(scale_map):
    picker, _ = make_picker(scale_map)
    picker.update_snap_points([5.0])
    picker.press(50 - SNAP_DISTANCE - 1)
    assert picker.current_pos_px == 50 - SNAP_DISTANCE - 1


def test_shift_disables_snapping(scale_map):
    picker, _ = make_picker(scale_map)
    picker.update_snap_points([5.0])
    picker.press(47, shift=True)
    assert picker.current_pos_px == 47
    assert picker.first_pos == pytest.approx(scale_map.inv_transform(47))


def test_tracker_text_uses_precise_tick_value():
    picker, _ = make_picker(ScaleMap(0.0, 1.0, 0.0, 300.0))
    picker.update_snap_points([1 / 3])
    picker.move(101)
    assert picker.tracker_text() == "0.333333"


def test_tracker_text_unsnapped(scale_map):
    picker, _ = make_picker(scale_map)
    picker.move(30)
    assert float(picker.tracker_text()) == pytest.approx(scale_map.inv_transform(30))


def test_tracker_rect_clamped_to_left_margin(scale_map):
    picker, _ = make_picker(scale_map, ScaleAlignment.TOP)
    picker.move(0)
    left, top, width, height = picker.tracker_text_rect(200, 100, 40, 12)
    assert left == TEXT_MARGIN
    assert top == 0
    assert (width, height) == (40, 12)


def test_tracker_rect_clamped_to_right_edge(scale_map):
    picker, _ = make_picker(scale_map)
    picker.move(99, shift=True)
    left, top, width, _ = picker.tracker_text_rect(120, 80, 40, 12, offset=15)
    assert left + width + TEXT_MARGIN <= 120
    assert top == 80 - 12


def test_tracker_rect_vertical_clamped(scale_map):
    picker, _ = make_picker(scale_map, ScaleAlignment.LEFT)
    picker.move(2, shift=True)
    left, top, _, _ = picker.tracker_text_rect(200, 100, 40, 12)
    assert top >= 0
    assert left == TEXT_MARGIN

    picker.move(99, shift=True)
    _, top, _, height = picker.tracker_text_rect(200, 100, 40, 12)
    assert top + height <= 100


def test_tracker_rect_right_scale(scale_map):
    picker, _ = make_picker(scale_map, ScaleAlignment.RIGHT)
    picker.move(50, shift=True)
    left, _, width, _ = picker.tracker_text_rect(200, 100, 40, 12)
    assert left + width == 200