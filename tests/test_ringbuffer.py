import pytest

from serialscope.framebuffer import Range
from serialscope.ringbuffer import RingBuffer

VALUES = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


def test_sizing():
    buf = RingBuffer(10)
    assert len(buf) == 10
    buf.resize(5)
    assert len(buf) == 5
    buf.resize(15)
    assert len(buf) == 15


def test_initial_values_are_zero():
    buf = RingBuffer(10)
    assert [buf.sample(i) for i in range(10)] == [0.0] * 10


def test_data_access():
    buf = RingBuffer(10)
    buf.add_samples(VALUES)
    assert len(buf) == 10
    for i in range(10):
        assert buf.sample(i) == VALUES[i]

    buf.add_samples(VALUES[:5])
    assert len(buf) == 10
    for i in range(5):
        assert buf.sample(i) == VALUES[i + 5]
    for i in range(5, 10):
        assert buf.sample(i) == VALUES[i - 5]


def test_growing_keeps_end_values():
    buf = RingBuffer(5)
    buf.add_samples(VALUES[:5])
    buf.resize(10)
    assert len(buf) == 10
    for i in range(5):
        assert buf.sample(i) == 0
    for i in range(5, 10):
        assert buf.sample(i) == VALUES[i - 5]


def test_shrinking_keeps_end_values():
    buf = RingBuffer(10)
    buf.add_samples(VALUES)
    buf.resize(5)
    assert len(buf) == 5
    for i in range(5):
        assert buf.sample(i) == VALUES[i + 5]


def test_limits():
    buf = RingBuffer(10)
    assert buf.limits() == Range(0.0, 0.0)

    buf.add_samples(VALUES)
    assert buf.limits() == Range(1.0, 10.0)

    buf.add_samples(VALUES[9:10])
    assert buf.limits() == Range(2.0, 10.0)

    buf.add_samples(VALUES[:9])
    buf.add_samples(VALUES[:1])
    assert buf.limits() == Range(1.0, 9.0)


def test_clear():
    buf = RingBuffer(10)
    buf.add_samples(VALUES)
    buf.clear()
    assert len(buf) == 10
    assert list(buf) == [0.0] * 10
    assert buf.limits() == Range(0.0, 0.0)


def test_adding_more_than_size_keeps_newest():
    buf = RingBuffer(4)
    buf.add_samples(VALUES)
    assert list(buf) == VALUES[-4:]


def test_wrapping_write_preserves_order():
    buf = RingBuffer(5)
    buf.add_samples(VALUES[:3])
    buf.add_samples(VALUES[3:7])
    assert list(buf) == VALUES[2:7]


def test_resize_to_same_size_is_an_error():
    buf = RingBuffer(10)
    with pytest.raises(ValueError):
        buf.resize(10)


def test_sample_out_of_range():
    buf = RingBuffer(3)
    with pytest.raises(IndexError):
        buf.sample(3)