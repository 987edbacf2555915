"""Children grouping and whitespace policy.

Runs of inline nodes (text and mustache tags) are collected into a single
`fill` so that the structural breaks around sibling block nodes never split
them prematurely; text directly wrapping a mustache tag keeps its exact
whitespace. Block nodes are printed on their own, separated by hard lines.
"""

from __future__ import annotations

from sveltefmt.ast import TemplateNode, is_inline_node
from sveltefmt.doc import (
    BREAK_PARENT,
    HARDLINE,
    SOFTLINE,
    Doc,
    Fill,
    Line,
    concat,
    dedent,
    fill,
    join,
)
from sveltefmt.printer.context import PrintContext, PrintFn


def is_empty_group(docs: list[Doc]) -> bool:
    """No docs, or one lonely line that did not hold a blank line."""
    if len(docs) == 0:
        return True
    if len(docs) > 1:
        return False
    lonely = docs[0]
    if not isinstance(lonely, Line):
        return False
    return not lonely.keep_if_lonely


def _is_blank_part(part: Doc) -> bool:
    if isinstance(part, str):
        return part == ""
    return isinstance(part, Line)


def _first_content_index(parts: tuple[Doc, ...] | list[Doc]) -> int:
    for index, part in enumerate(parts):
        if not _is_blank_part(part):
            return index
    return -1


def trim_left(docs: list[Doc]) -> list[Doc]:
    """Drop leading whitespace of an inline run.

    Text with leading whitespace prints to a fill starting with an empty string
    and a line; those parts would duplicate the break already implied by the
    parent's opening tag or a preceding sibling block.
    """
    if not docs:
        return docs
    first = docs[0]
    if isinstance(first, Line):
        return docs[1:]
    if not isinstance(first, Fill):
        return docs
    index = _first_content_index(first.parts)
    if index <= 0:
        return docs
    return [Fill(first.parts[index:]), *docs[1:]]


def trim_right(docs: list[Doc]) -> list[Doc]:
    """Mirror of `trim_left` for trailing whitespace."""
    if not docs:
        return docs
    last = docs[-1]
    if isinstance(last, Line):
        return docs[:-1]
    if not isinstance(last, Fill):
        return docs
    reversed_parts = last.parts[::-1]
    index = _first_content_index(reversed_parts)
    if index <= 0:
        return docs
    return [*docs[:-1], Fill(reversed_parts[index:][::-1])]


def print_children(
    children: tuple[TemplateNode, ...],
    ctx: PrintContext,
    print_node: PrintFn,
    surrounding_lines: bool = True,
) -> Doc:
    child_docs: list[Doc] = []
    current_group: list[Doc] = []

    def flush() -> None:
        nonlocal current_group
        if not is_empty_group(current_group):
            child_docs.append(fill(trim_right(trim_left(current_group))))
        current_group = []

    for child in children:
        child_doc = print_node(child, ctx)
        if is_inline_node(child):
            current_group.append(child_doc)
        else:
            flush()
            child_docs.append(concat([BREAK_PARENT, child_doc]))
    flush()

    return concat(
        [
            SOFTLINE if surrounding_lines else "",
            join(HARDLINE, child_docs),
            dedent(SOFTLINE) if surrounding_lines else "",
        ]
    )
