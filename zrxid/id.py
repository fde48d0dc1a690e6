"""Structured identifiers of the form ``zri:scheme:binding:context:path:fragment``."""

from __future__ import annotations

from functools import total_ordering

from .errors import ComponentError, PrefixError
from .format import Format, encode
from .path import validate

_COUNT = 6
_PREFIX = "zri"

_SCHEME = 1
_BINDING = 2
_CONTEXT = 3
_PATH = 4
_FRAGMENT = 5


@total_ordering
class Id:
    """An identifier made of scheme, binding, context, path and fragment.

    Its string form is ``zri:<scheme>:<binding>:<context>:<path>:<fragment>``.
    Values containing ``:`` are stored percent-encoded and read back decoded.
    Backslashes are rejected with :class:`BackslashError`.
    """

    __slots__ = ("_format",)

    def __init__(
        self, scheme: str | bytes, context: str | bytes, path: str | bytes
    ) -> None:
        scheme_text = encode(validate(scheme))
        context_text = encode(validate(context))
        path_text = encode(validate(path))
        self._format = Format.from_str(
            f"{_PREFIX}:{scheme_text}::{context_text}:{path_text}:", _COUNT
        )

    @classmethod
    def parse(cls, value: str) -> Id:
        """Parse an identifier from its string form.

        Scheme, context and path must be present; binding and fragment may be
        empty.
        """
        fmt = Format.from_str(validate(value), _COUNT)
        if fmt.get(0) != _PREFIX:
            raise PrefixError()
        for index, name in ((_SCHEME, "scheme"), (_CONTEXT, "context"), (_PATH, "path")):
            if not fmt.get(index):
                raise ComponentError(name)
        result = cls.__new__(cls)
        result._format = fmt
        return result

    def __copy__(self) -> Id:
        result = Id.__new__(Id)
        result._format = self._format.copy()
        return result

    def _set(self, index: int, value: str | bytes) -> Id:
        self._format.set(index, validate(value))
        return self

    def set_scheme(self, scheme: str | bytes) -> Id:
        """Replace the scheme and return the identifier."""
        return self._set(_SCHEME, scheme)

    def set_binding(self, binding: str | bytes) -> Id:
        """Replace the binding and return the identifier."""
        return self._set(_BINDING, binding)

    def set_context(self, context: str | bytes) -> Id:
        """Replace the context and return the identifier."""
        return self._set(_CONTEXT, context)

    def set_path(self, path: str | bytes) -> Id:
        """Replace the path and return the identifier."""
        return self._set(_PATH, path)

    def set_fragment(self, fragment: str | bytes) -> Id:
        """Replace the fragment and return the identifier."""
        return self._set(_FRAGMENT, fragment)

    def scheme(self) -> str:
        """Return the scheme."""
        return self._format.get(_SCHEME)

    def binding(self) -> str | None:
        """Return the binding, or ``None`` if it is empty."""
        return self._format.get(_BINDING) or None

    def context(self) -> str:
        """Return the context."""
        return self._format.get(_CONTEXT)

    def path(self) -> str:
        """Return the path."""
        return self._format.get(_PATH)

    def fragment(self) -> str | None:
        """Return the fragment, or ``None`` if it is empty."""
        return self._format.get(_FRAGMENT) or None

    def __str__(self) -> str:
        return self._format.as_str()

    def __repr__(self) -> str:
        return (
            f"Id(scheme={self.scheme()!r}, binding={self.binding()!r}, "
            f"context={self.context()!r}, path={self.path()!r}, "
            f"fragment={self.fragment()!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Id):
            return NotImplemented
        return self._format == other._format

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Id):
            return NotImplemented
        return self._format < other._format

    def __hash__(self) -> int:
        return hash(self._format)


def to_id(value: Id | str) -> Id:
    """Return ``value`` if it is an identifier, or parse it from a string."""
    if isinstance(value, Id):
        return value
    if isinstance(value, str):
        return Id.parse(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Id")