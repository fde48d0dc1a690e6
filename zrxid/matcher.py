"""Matching identifiers against sets of selectors with compiled globs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from .errors import GlobError
from .id import Id, to_id
from .selector import Selector, to_selector

_SEPARATOR = "/"
_WILDCARD = "**"
# A non-character that never appears in proper text. It stands in for an
# absent component, so that only globs compiled from a wildcard accept it.
_ABSENT = "\ufffe"


class _Kind(Enum):
    LITERAL = auto()
    ANY = auto()
    ZERO_OR_MORE = auto()
    RECURSIVE_PREFIX = auto()
    RECURSIVE_SUFFIX = auto()
    RECURSIVE_ZERO_OR_MORE = auto()
    CLASS = auto()
    ALTERNATES = auto()


@dataclass
class _Token:
    kind: _Kind
    value: object = None


@dataclass
class _Parser:
    """Turns a glob pattern into a list of tokens."""

    pattern: str
    pos: int = 0
    prev: str | None = None
    cur: str | None = None
    stack: list[list[list[_Token]]] = field(default_factory=lambda: [[[]]])

    @property
    def tokens(self) -> list[_Token]:
        return self.stack[-1][-1]

    def error(self, reason: str) -> GlobError:
        return GlobError(self.pattern, reason)

    def bump(self) -> str | None:
        self.prev = self.cur
        if self.pos >= len(self.pattern):
            self.cur = None
        else:
            self.cur = self.pattern[self.pos]
            self.pos += 1
        return self.cur

    def peek(self) -> str | None:
        return self.pattern[self.pos] if self.pos < len(self.pattern) else None

    def push(self, kind: _Kind, value: object = None) -> None:
        self.tokens.append(_Token(kind, value))

    def parse(self) -> list[_Token]:
        while (char := self.bump()) is not None:
            if char == "?":
                self.push(_Kind.ANY)
            elif char == "*":
                self._star()
            elif char == "[":
                self._class()
            elif char == "{":
                self.stack.append([[]])
            elif char == "}":
                if len(self.stack) == 1:
                    raise self.error(
                        "unopened alternate group; missing '{' "
                        "(maybe escape '}' with '[}]'?)"
                    )
                branches = self.stack.pop()
                self.push(_Kind.ALTERNATES, branches)
            elif char == "," and len(self.stack) > 1:
                self.stack[-1].append([])
            elif char == "\\":
                escaped = self.bump()
                if escaped is None:
                    raise self.error("dangling '\\'")
                self.push(_Kind.LITERAL, escaped)
            else:
                self.push(_Kind.LITERAL, char)
        if len(self.stack) > 1:
            raise self.error(
                "unclosed alternate group; missing '}' "
                "(maybe escape '{' with '[{]'?)"
            )
        return self.stack[0][0]

    def _double_star(self) -> None:
        self.push(_Kind.ZERO_OR_MORE)
        self.push(_Kind.ZERO_OR_MORE)

    def _star(self) -> None:
        prev = self.prev
        if self.peek() != "*":
            self.push(_Kind.ZERO_OR_MORE)
            return
        self.bump()

        if not self.tokens:
            following = self.peek()
            if following is not None and following != _SEPARATOR:
                self._double_star()
            else:
                self.push(_Kind.RECURSIVE_PREFIX)
                self.bump()
            return

        if prev != _SEPARATOR:
            self._double_star()
            return

        following = self.peek()
        if following is None:
            is_suffix = True
        elif following in ",}" and len(self.stack) > 1:
            is_suffix = True
        elif following == _SEPARATOR:
            self.bump()
            is_suffix = False
        else:
            self._double_star()
            return

        last = self.tokens.pop()
        if last.kind in (_Kind.RECURSIVE_PREFIX, _Kind.RECURSIVE_SUFFIX):
            self.tokens.append(last)
        elif is_suffix:
            self.push(_Kind.RECURSIVE_SUFFIX)
        else:
            self.push(_Kind.RECURSIVE_ZERO_OR_MORE)

    def _class(self) -> None:
        negated = False
        if self.peek() in ("!", "^"):
            self.bump()
            negated = True

        ranges: list[list[str]] = []
        first = True
        in_range = False
        while True:
            char = self.bump()
            if char is None:
                raise self.error("unclosed character class; missing ']'")
            if char == "]":
                if not first:
                    break
                ranges.append(["]", "]"])
            elif char == "-":
                if first:
                    ranges.append(["-", "-"])
                elif in_range:
                    self._extend_range(ranges[-1], "-")
                    in_range = False
                else:
                    in_range = True
            else:
                if in_range:
                    self._extend_range(ranges[-1], char)
                else:
                    ranges.append([char, char])
                in_range = False
            first = False

        if in_range:
            ranges.append(["-", "-"])
        self.push(_Kind.CLASS, (negated, [tuple(item) for item in ranges]))

    def _extend_range(self, bounds: list[str], char: str) -> None:
        bounds[1] = char
        if bounds[1] < bounds[0]:
            raise self.error(f"invalid range; '{bounds[0]}' > '{bounds[1]}'")


def _to_regex(tokens: list[_Token]) -> str:
    parts = []
    for token in tokens:
        kind = token.kind
        if kind is _Kind.LITERAL:
            parts.append(re.escape(token.value))
        elif kind is _Kind.ANY:
            parts.append(".")
        elif kind is _Kind.ZERO_OR_MORE:
            parts.append(".*")
        elif kind is _Kind.RECURSIVE_PREFIX:
            parts.append("(?:/?|.*/)")
        elif kind is _Kind.RECURSIVE_SUFFIX:
            parts.append("/.*")
        elif kind is _Kind.RECURSIVE_ZERO_OR_MORE:
            parts.append("(?:/|/.*/)")
        elif kind is _Kind.CLASS:
            negated, ranges = token.value
            body = "".join(
                re.escape(low) if low == high else f"{re.escape(low)}-{re.escape(high)}"
                for low, high in ranges
            )
            parts.append(f"[{'^' if negated else ''}{body}]")
        else:
            branches = "|".join(_to_regex(branch) for branch in token.value)
            parts.append(f"(?:{branches})")
    return "".join(parts)


class Glob:
    """A compiled shell-style glob.

    ``*`` and ``?`` also match ``/``; ``**`` next to separators matches any
    number of path segments, and ``**`` alone matches everything.
    """

    __slots__ = ("pattern", "_regex")

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        tokens = _Parser(pattern).parse()
        if len(tokens) == 1 and tokens[0].kind is _Kind.RECURSIVE_PREFIX:
            source = ".*"
        else:
            source = _to_regex(tokens)
        self._regex = re.compile(source, re.DOTALL)

    def is_match(self, value: str) -> bool:
        """Return whether the whole of ``value`` matches the glob."""
        return self._regex.fullmatch(value) is not None

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"


class GlobSet:
    """An ordered collection of globs matched together."""

    __slots__ = ("_globs",)

    def __init__(self, globs: Iterable[Glob]) -> None:
        self._globs = tuple(globs)

    def __len__(self) -> int:
        return len(self._globs)

    def is_match(self, value: str) -> bool:
        """Return whether any glob matches ``value``."""
        return any(glob.is_match(value) for glob in self._globs)

    def matches(self, value: str) -> list[int]:
        """Return the indexes of all globs matching ``value``, in ascending order."""
        return [index for index, glob in enumerate(self._globs) if glob.is_match(value)]

    def __repr__(self) -> str:
        return f"GlobSet({list(self._globs)!r})"


def _parse(component: str | None) -> Glob:
    # Empty components are wildcards; every selector must add one glob to each
    # component so that indexes line up across components.
    return Glob(_WILDCARD if component is None else component)


class Builder:
    """Collects selectors and builds a :class:`Matcher` from them."""

    __slots__ = ("_scheme", "_binding", "_context", "_path", "_fragment")

    def __init__(self) -> None:
        self._scheme: list[Glob] = []
        self._binding: list[Glob] = []
        self._context: list[Glob] = []
        self._path: list[Glob] = []
        self._fragment: list[Glob] = []

    def add(self, selector: Selector | str) -> Builder:
        """Add a selector and return the builder.

        Raises an error if the selector or one of its globs is invalid.
        """
        selector = to_selector(selector)
        globs = [
            _parse(selector.scheme()),
            _parse(selector.binding()),
            _parse(selector.context()),
            _parse(selector.path()),
            _parse(selector.fragment()),
        ]
        for target, glob in zip(
            (self._scheme, self._binding, self._context, self._path, self._fragment),
            globs,
        ):
            target.append(glob)
        return self

    def build(self) -> Matcher:
        """Return a matcher over all selectors added so far."""
        return Matcher(
            GlobSet(self._scheme),
            GlobSet(self._binding),
            GlobSet(self._context),
            GlobSet(self._path),
            GlobSet(self._fragment),
        )


def _compare(component: GlobSet, value: str | None) -> bool:
    return component.is_match(_ABSENT if value is None else value)


class Matcher:
    """Matches identifiers against a set of selectors."""

    __slots__ = ("_scheme", "_binding", "_context", "_path", "_fragment")

    def __init__(
        self,
        scheme: GlobSet,
        binding: GlobSet,
        context: GlobSet,
        path: GlobSet,
        fragment: GlobSet,
    ) -> None:
        self._scheme = scheme
        self._binding = binding
        self._context = context
        self._path = path
        self._fragment = fragment

    @classmethod
    def builder(cls) -> Builder:
        """Return a new, empty builder."""
        return Builder()

    @classmethod
    def parse(cls, value: str) -> Matcher:
        """Return a matcher for the single selector given in string form."""
        return Builder().add(value).build()

    def is_match(self, id: Id | str) -> bool:
        """Return whether any selector matches the identifier."""
        ident = to_id(id)
        return (
            _compare(self._path, ident.path())
            and _compare(self._context, ident.context())
            and _compare(self._scheme, ident.scheme())
            and _compare(self._binding, ident.binding())
            and _compare(self._fragment, ident.fragment())
        )

    def matches(self, id: Id | str) -> list[int]:
        """Return the indexes of all selectors matching the identifier.

        Indexes follow the order in which the selectors were added.
        """
        ident = to_id(id)
        slots = [0] * len(self._scheme)
        for component, value in (
            (self._path, ident.path()),
            (self._context, ident.context()),
            (self._scheme, ident.scheme()),
            (self._binding, ident.binding()),
            (self._fragment, ident.fragment()),
        ):
            if value is None:
                slots = [count + 1 for count in slots]
                continue
            found = component.matches(value)
            if not found:
                return []
            for index in found:
                slots[index] += 1
        return [index for index, count in enumerate(slots) if count == 5]

    def __repr__(self) -> str:
        return (
            f"Matcher(scheme={self._scheme!r}, binding={self._binding!r}, "
            f"context={self._context!r}, path={self._path!r}, "
            f"fragment={self._fragment!r})"
        )