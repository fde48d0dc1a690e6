import pytest

from zrxid.errors import LengthError
from zrxid.span import Span, init_spans


def test_shift_moves_both_ends():
    span = Span(0, 2)
    span.shift(2)
    assert span.as_range() == range(2, 4)


def test_shift_start_negative():
    span = Span(2, 4)
    span.shift_start(-2)
    assert span.as_range() == range(0, 4)


def test_shift_end_positive():
    span = Span(0, 2)
    span.shift_end(2)
    assert span.as_range() == range(0, 4)


def test_shift_negative_keeps_length():
    span = Span(3, 5)
    span.shift(-3)
    assert span.as_range() == range(0, 2)
    assert len(span) == 2


def test_shift_round_trip():
    span = Span(4, 9)
    span.shift(7)
    span.shift(-7)
    assert span == Span(4, 9)


def test_len_and_is_empty():
    span = Span(3, 3)
    assert len(span) == 0
    assert span.is_empty()
    span.shift_end(1)
    assert len(span) == 1
    assert not span.is_empty()


def test_shift_start_underflow_raises():
    span = Span(0, 2)
    with pytest.raises(LengthError):
        span.shift_start(-1)
    assert span == Span(0, 2)


def test_shift_end_overflow_raises():
    span = Span(0, 0xFFFF)
    with pytest.raises(LengthError):
        span.shift_end(1)
    assert span.end == 0xFFFF


def test_shift_overflow_leaves_span_unchanged():
    span = Span(1, 0xFFFF)
    with pytest.raises(LengthError):
        span.shift(1)
    assert span == Span(1, 0xFFFF)


def test_shift_end_before_start_raises():
    span = Span(2, 3)
    with pytest.raises(LengthError):
        span.shift_end(-2)


def test_invalid_bounds_rejected():
    with pytest.raises(ValueError):
        Span(5, 2)


def test_init_spans():
    spans = init_spans(3)
    assert spans == [Span(0, 0), Span(1, 1), Span(2, 2)]
    assert all(span.is_empty() for span in spans)


def test_init_spans_empty():
    assert init_spans(0) == []