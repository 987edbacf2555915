"""Document IR: layout-agnostic formatting algebra with deferred line breaks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Concat:
    """Sequential composition, no breaking semantics of its own."""

    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Group:
    """One atomic flat/break decision for every line inside `contents`."""

    contents: Doc
    should_break: bool = False


@dataclass(frozen=True, slots=True)
class Indent:
    contents: Doc


@dataclass(frozen=True, slots=True)
class Dedent:
    contents: Doc


@dataclass(frozen=True, slots=True)
class Line:
    """Space-or-break (default), nothing-or-break (soft) or always-break (hard).

    A `literal` hard line starts the next line at column zero, ignoring the
    current indentation. `keep_if_lonely` marks whitespace-only text that held
    a blank line and must survive even when it is the only doc of an inline run.
    """

    soft: bool = False
    hard: bool = False
    literal: bool = False
    keep_if_lonely: bool = False


@dataclass(frozen=True, slots=True)
class Fill:
    """Alternating content/separator parts, each separator decided on its own."""

    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class BreakParent:
    pass


type Doc = str | Concat | Group | Indent | Dedent | Line | Fill | BreakParent


BREAK_PARENT: Final[BreakParent] = BreakParent()
LINE: Final[Line] = Line()
SOFTLINE: Final[Line] = Line(soft=True)
HARDLINE: Final[Concat] = Concat((Line(hard=True), BREAK_PARENT))
LITERALLINE: Final[Concat] = Concat((Line(hard=True, literal=True), BREAK_PARENT))


def concat(parts: Iterable[Doc]) -> Concat:
    return Concat(tuple(parts))


def join(separator: Doc, docs: Iterable[Doc]) -> Concat:
    parts: list[Doc] = []
    for index, doc in enumerate(docs):
        if index > 0:
            parts.append(separator)
        parts.append(doc)
    return Concat(tuple(parts))


def group(contents: Doc, *, should_break: bool = False) -> Group:
    return Group(contents, should_break=should_break)


def indent(contents: Doc) -> Indent:
    return Indent(contents)


def dedent(contents: Doc) -> Dedent:
    return Dedent(contents)


def fill(parts: Iterable[Doc]) -> Fill:
    return Fill(tuple(parts))


def line(*, keep_if_lonely: bool = False) -> Line:
    return Line(keep_if_lonely=keep_if_lonely)
