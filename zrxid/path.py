"""Validating path-like values and turning identifiers into relative paths."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import TYPE_CHECKING, TypeVar

from .errors import BackslashError, ParentDirError, RootDirError

if TYPE_CHECKING:
    from .id import Id

_Value = TypeVar("_Value", str, bytes, bytearray)


def validate(value: _Value) -> _Value:
    """Return ``value`` unchanged, or raise :class:`BackslashError` if it holds a backslash.

    Values must use forward slashes so that identifiers stay portable.
    """
    backslash = "\\" if isinstance(value, str) else b"\\"
    if backslash in value:
        raise BackslashError()
    return value


def to_path(id: Id) -> Path:
    """Return the relative path made of the context and path of ``id``.

    Raises :class:`RootDirError` for absolute paths and
    :class:`ParentDirError` for paths that contain ``..``.
    """
    joined = PurePath(id.context()) / id.path()
    if joined.drive or joined.root:
        raise RootDirError()
    if ".." in joined.parts:
        raise ParentDirError()
    return Path(*joined.parts)