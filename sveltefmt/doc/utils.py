"""Doc traversal helpers used by the printer and the layout."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sveltefmt.doc.builders import (
    HARDLINE,
    LITERALLINE,
    BreakParent,
    Concat,
    Dedent,
    Doc,
    Fill,
    Group,
    Indent,
    Line,
    concat,
)
from sveltefmt.text import TextRange


def map_doc(doc: Doc, fn: Callable[[Doc], Doc]) -> Doc:
    """Rebuild `doc` bottom-up, applying `fn` to every node after its children."""
    match doc:
        case Concat(parts=parts):
            return fn(Concat(tuple(map_doc(part, fn) for part in parts)))
        case Fill(parts=parts):
            return fn(Fill(tuple(map_doc(part, fn) for part in parts)))
        case Group(contents=contents, should_break=should_break):
            return fn(Group(map_doc(contents, fn), should_break=should_break))
        case Indent(contents=contents):
            return fn(Indent(map_doc(contents, fn)))
        case Dedent(contents=contents):
            return fn(Dedent(map_doc(contents, fn)))
    return fn(doc)


def remove_lines(doc: Doc) -> Doc:
    """Flatten every breakable line; hard lines are kept."""

    def _remove(node: Doc) -> Doc:
        if isinstance(node, Line) and not node.hard:
            return "" if node.soft else " "
        if isinstance(node, Group):
            return Group(node.contents)
        return node

    return map_doc(doc, _remove)


def has_forced_break(doc: Doc, cache: dict[int, bool] | None = None) -> bool:
    """True when a break-parent marker sits anywhere inside `doc`.

    Break-parents propagate through every enclosing group, so nested groups
    are searched too.
    """
    if cache is None:
        cache = {}
    key = id(doc)
    cached = cache.get(key)
    if cached is not None:
        return cached

    result = False
    match doc:
        case BreakParent():
            result = True
        case Concat(parts=parts) | Fill(parts=parts):
            result = any(has_forced_break(part, cache) for part in parts)
        case Group(contents=contents, should_break=should_break):
            result = should_break or has_forced_break(contents, cache)
        case Indent(contents=contents) | Dedent(contents=contents):
            result = has_forced_break(contents, cache)
    cache[key] = result
    return result


def _skip_blank(parts: tuple[Doc, ...]) -> int:
    for index in range(len(parts) - 1, -1, -1):
        if isinstance(parts[index], BreakParent):
            continue
        return index
    return -1


def nuke_last_line(doc: Doc) -> Doc:
    """Drop the trailing line of a doc so no blank line precedes a closing tag."""
    if isinstance(doc, Concat):
        end = _skip_blank(doc.parts)
        if end > -1:
            return concat(
                [
                    *doc.parts[:end],
                    nuke_last_line(doc.parts[end]),
                    *doc.parts[end + 1 :],
                ]
            )
        return doc
    if isinstance(doc, Line):
        return ""
    return doc


def join_lines(
    text: str,
    separator: Doc,
    literal_ranges: Sequence[TextRange] = (),
) -> Concat:
    """Lines of `text` joined by `separator`.

    A line break inside one of `literal_ranges` (a multi-line string literal)
    becomes a literal line instead, and the line before it keeps its trailing
    whitespace.
    """
    parts: list[Doc] = []
    offset = 0
    for index, text_line in enumerate(text.split("\n")):
        if index > 0:
            parts.append(LITERALLINE if _in_literal(offset - 1, literal_ranges) else separator)
        end = offset + len(text_line)
        parts.append(text_line if _in_literal(end, literal_ranges) else text_line.rstrip())
        offset = end + 1
    return concat(parts)


def _in_literal(offset: int, literal_ranges: Sequence[TextRange]) -> bool:
    return any(literal_range.contains(offset) for literal_range in literal_ranges)


def text_to_doc(text: str, literal_ranges: Sequence[TextRange] = ()) -> Concat:
    """Formatted sub-language text as hard lines, ending in a hardline.

    `literal_ranges` index `text` after its surrounding newlines are stripped.
    """
    text = text.strip("\n")
    if not text:
        return concat([])
    return concat([join_lines(text, HARDLINE, literal_ranges), HARDLINE])
