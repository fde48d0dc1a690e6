"""Strings made of a fixed number of ``:``-separated, percent-encoded values."""

from __future__ import annotations

import dataclasses
from functools import total_ordering
from urllib.parse import unquote_to_bytes

from .errors import CardinalityError, LengthError
from .span import Span, init_spans

_MAX_SPANS = 64
_MAX_LENGTH = 0xFFFF
_MIN_SHIFT = -0x8000
_MAX_SHIFT = 0x7FFF
_SEPARATOR = ord(":")
_PERCENT = ord("%")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _as_text(value: str | bytes) -> str:
    return value.decode("utf-8") if isinstance(value, (bytes, bytearray)) else value


def encode(value: str | bytes) -> str:
    """Percent-encode every ``:`` in ``value``.

    The same string is returned unchanged when it holds no separator.
    """
    text = _as_text(value)
    return text.replace(":", "%3A") if ":" in text else text


def decode(value: str | bytes) -> str:
    """Percent-decode ``value``, replacing invalid UTF-8 sequences."""
    return unquote_to_bytes(value).decode("utf-8", errors="replace")


def _is_hex_pair(chunk: bytes) -> bool:
    return len(chunk) == 2 and all(byte in _HEX_DIGITS for byte in chunk)


@total_ordering
class Format:
    """A string holding ``count`` values separated by ``:``.

    Values that contain ``:`` are stored percent-encoded and flagged, so that
    reading them back decodes them transparently. Equality, ordering and
    hashing only consider the string representation.
    """

    __slots__ = ("_count", "_value", "_spans", "_flags")

    def __init__(self, count: int) -> None:
        if not 1 <= count <= _MAX_SPANS:
            raise ValueError(f"span count must be between 1 and {_MAX_SPANS}")
        self._count = count
        self._value = b":" * (count - 1)
        self._spans: list[Span] = init_spans(count)
        self._flags = 0

    @classmethod
    def from_str(cls, value: str, count: int) -> Format:
        """Parse ``value``, which must hold exactly ``count`` values."""
        data = value.encode("utf-8")
        if len(data) > _MAX_LENGTH:
            raise LengthError()

        spans: list[Span] = []
        flags = 0
        start = 0
        for position, byte in enumerate(data):
            if byte == _SEPARATOR:
                if len(spans) == count - 1:
                    raise CardinalityError()
                spans.append(Span(start, position))
                start = position + 1
            elif byte == _PERCENT:
                flag = 1 << len(spans)
                if not flags & flag and _is_hex_pair(data[position + 1 : position + 3]):
                    flags |= flag
        spans.append(Span(start, len(data)))

        if len(spans) != count:
            raise CardinalityError()

        result = cls(count)
        result._value = data
        result._spans = spans
        result._flags = flags
        return result

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"span index out of range: {index}")

    def get(self, index: int) -> str:
        """Return the value at ``index``, decoded if it was percent-encoded."""
        self._check_index(index)
        span = self._spans[index]
        raw = self._value[span.start : span.end]
        if self._flags & (1 << index):
            return decode(raw)
        return raw.decode("utf-8")

    def set(self, index: int, value: str | bytes) -> None:
        """Replace the value at ``index``.

        Raises :class:`LengthError` if the change would overflow a span.
        """
        self._check_index(index)
        text = _as_text(value)
        encoded = encode(text)
        data = encoded.encode("utf-8")

        span = self._spans[index]
        by = len(data) - len(span)
        if not _MIN_SHIFT <= by <= _MAX_SHIFT:
            raise LengthError()

        spans = [dataclasses.replace(item) for item in self._spans]
        spans[index].shift_end(by)
        for following in spans[index + 1 :]:
            following.shift(by)

        if ":" in text:
            self._flags |= 1 << index
        else:
            self._flags &= ~(1 << index)
        self._value = self._value[: span.start] + data + self._value[span.end :]
        self._spans = spans

    def as_str(self) -> str:
        """Return the string representation."""
        return self._value.decode("utf-8")

    def copy(self) -> Format:
        """Return an independent copy."""
        result = Format(self._count)
        result._value = self._value
        result._spans = [dataclasses.replace(item) for item in self._spans]
        result._flags = self._flags
        return result

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        spans = [(span.start, span.end) for span in self._spans]
        return f"Format(value={self.as_str()!r}, spans={spans}, flags={self._flags})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)