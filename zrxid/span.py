"""Half-open byte ranges inside a formatted string."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import LengthError

_MAX = 0xFFFF


@dataclass
class Span:
    """A half-open range ``[start, end)`` limited to 16-bit offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not (0 <= self.start <= self.end <= _MAX):
            raise ValueError(
                f"invalid span bounds: start={self.start}, end={self.end}"
            )

    def shift(self, by: int) -> None:
        """Move both ends of the span by ``by``."""
        if by >= 0:
            self.shift_end(by)
            self.shift_start(by)
        else:
            self.shift_start(by)
            self.shift_end(by)

    def shift_start(self, by: int) -> None:
        """Move the start of the span by ``by``."""
        value = self.start + by
        if not 0 <= value <= _MAX or value > self.end:
            raise LengthError()
        self.start = value

    def shift_end(self, by: int) -> None:
        """Move the end of the span by ``by``."""
        value = self.end + by
        if not 0 <= value <= _MAX or value < self.start:
            raise LengthError()
        self.end = value

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        """Return whether the span covers nothing."""
        return len(self) == 0

    def as_range(self) -> range:
        """Return the span as a ``range`` of offsets."""
        return range(self.start, self.end)


def init_spans(count: int) -> list[Span]:
    """Return ``count`` empty spans, each placed after one separator."""
    return [Span(index, index) for index in range(count)]