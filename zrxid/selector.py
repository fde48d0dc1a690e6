"""Selectors of the form ``zrs:scheme:binding:context:path:fragment``."""

from __future__ import annotations

from functools import total_ordering

from .errors import PrefixError
from .format import Format
from .path import validate

_COUNT = 6
_PREFIX = "zrs"
_EMPTY = "zrs:::::"

_SCHEME = 1
_BINDING = 2
_CONTEXT = 3
_PATH = 4
_FRAGMENT = 5


@total_ordering
class Selector:
    """A pattern over identifiers, with an optional glob for each component.

    Its string form is ``zrs:<scheme>:<binding>:<context>:<path>:<fragment>``.
    Empty components act as wildcards. Backslashes are rejected with
    :class:`BackslashError`.
    """

    __slots__ = ("_format",)

    def __init__(self) -> None:
        self._format = Format.from_str(_EMPTY, _COUNT)

    @classmethod
    def parse(cls, value: str) -> Selector:
        """Parse a selector from its string form."""
        fmt = Format.from_str(validate(value), _COUNT)
        if fmt.get(0) != _PREFIX:
            raise PrefixError()
        result = cls.__new__(cls)
        result._format = fmt
        return result

    def __copy__(self) -> Selector:
        result = Selector.__new__(Selector)
        result._format = self._format.copy()
        return result

    def _set(self, index: int, value: str | bytes) -> Selector:
        self._format.set(index, validate(value))
        return self

    def set_scheme(self, scheme: str | bytes) -> Selector:
        """Replace the scheme and return the selector."""
        return self._set(_SCHEME, scheme)

    def set_binding(self, binding: str | bytes) -> Selector:
        """Replace the binding and return the selector."""
        return self._set(_BINDING, binding)

    def set_context(self, context: str | bytes) -> Selector:
        """Replace the context and return the selector."""
        return self._set(_CONTEXT, context)

    def set_path(self, path: str | bytes) -> Selector:
        """Replace the path and return the selector."""
        return self._set(_PATH, path)

    def set_fragment(self, fragment: str | bytes) -> Selector:
        """Replace the fragment and return the selector."""
        return self._set(_FRAGMENT, fragment)

    def _get(self, index: int) -> str | None:
        return self._format.get(index) or None

    def scheme(self) -> str | None:
        """Return the scheme, or ``None`` if it is empty."""
        return self._get(_SCHEME)

    def binding(self) -> str | None:
        """Return the binding, or ``None`` if it is empty."""
        return self._get(_BINDING)

    def context(self) -> str | None:
        """Return the context, or ``None`` if it is empty."""
        return self._get(_CONTEXT)

    def path(self) -> str | None:
        """Return the path, or ``None`` if it is empty."""
        return self._get(_PATH)

    def fragment(self) -> str | None:
        """Return the fragment, or ``None`` if it is empty."""
        return self._get(_FRAGMENT)

    def __str__(self) -> str:
        return self._format.as_str()

    def __repr__(self) -> str:
        return (
            f"Selector(scheme={self.scheme()!r}, binding={self.binding()!r}, "
            f"context={self.context()!r}, path={self.path()!r}, "
            f"fragment={self.fragment()!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._format == other._format

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self._format < other._format

    def __hash__(self) -> int:
        return hash(self._format)


def to_selector(value: Selector | str) -> Selector:
    """Return ``value`` if it is a selector, or parse it from a string."""
    if isinstance(value, Selector):
        return value
    if isinstance(value, str):
        return Selector.parse(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Selector")