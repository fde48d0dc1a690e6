"""Exceptions raised while building and matching identifiers and selectors."""

from __future__ import annotations


class ZrxIdError(Exception):
    """Base class of every error raised by this package."""

    message = "identifier error"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.message,)))


# Format errors -------------------------------------------------------------


class FormatError(ZrxIdError):
    """A formatted string could not be built or updated."""

    message = "format error"


class CardinalityError(FormatError):
    """The number of spans in a formatted string is wrong."""

    message = "invalid span count"


class LengthError(FormatError):
    """A span grew or shrank beyond the supported range."""

    message = "invalid span length"


# Path errors ---------------------------------------------------------------


class PathError(ZrxIdError):
    """A path value is not acceptable."""

    message = "path error"


class RootDirError(PathError):
    """The path is absolute."""

    message = "path must not start at '/'"


class ParentDirError(PathError):
    """The path would traverse to a parent directory."""

    message = "path must not contain '..'"


class BackslashError(PathError):
    """The value contains a backslash."""

    message = "path must not contain '\\'"


# Identifier and matcher errors ---------------------------------------------


class IdError(ZrxIdError):
    """An identifier is invalid."""

    message = "invalid identifier"


class MatcherError(ZrxIdError):
    """A selector or matcher is invalid."""

    message = "invalid matcher"


class PrefixError(IdError, MatcherError):
    """The leading prefix of an identifier or selector is wrong."""

    message = "invalid prefix"


class ComponentError(IdError):
    """A required identifier component is missing."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"missing component: {component}")


class GlobError(MatcherError):
    """A selector component could not be compiled into a glob."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"error parsing glob '{pattern}': {reason}")