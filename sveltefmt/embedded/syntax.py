"""Syntax checks and literal rewrites for embedded code, backed by tree-sitter."""

from __future__ import annotations

from functools import cache

from tree_sitter import Language, Node, Parser, Tree

from sveltefmt.diagnostics import EmbeddedFormatError
from sveltefmt.text import TextRange, offset_to_line_col


@cache
def typescript_parser() -> Parser:
    import tree_sitter_typescript as tsts

    return Parser(Language(tsts.language_typescript()))


def parse_typescript(text: str) -> tuple[bytes, Tree]:
    source = text.encode("utf-8")
    return source, typescript_parser().parse(source)


def check_syntax(text: str, language: str) -> tuple[bytes, Tree]:
    """Parse `text` and raise EmbeddedFormatError at the first syntax error."""
    source, tree = parse_typescript(text)
    if not tree.root_node.has_error:
        return source, tree

    error_node = _first_error(tree.root_node)
    start_byte = error_node.start_byte if error_node is not None else 0
    end_byte = error_node.end_byte if error_node is not None else len(source)
    start = _char_offset(source, start_byte)
    end = max(start, _char_offset(source, end_byte))
    line, column = offset_to_line_col(text, start)
    raise EmbeddedFormatError.invalid(
        language,
        f"unexpected syntax at {line}:{column}",
        TextRange(start, end),
    )


def _first_error(root: Node) -> Node | None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _char_offset(source: bytes, byte_offset: int) -> int:
    return len(source[:byte_offset].decode("utf-8", errors="ignore"))


def template_literal_ranges(text: str) -> list[TextRange]:
    """Character ranges of the outermost template literals in `text`."""
    source, tree = parse_typescript(text)
    ranges: list[TextRange] = []
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "template_string":
            ranges.append(
                TextRange(_char_offset(source, node.start_byte), _char_offset(source, node.end_byte))
            )
            continue
        stack.extend(node.children)
    return sorted(ranges)


def prefer_single_quotes(source: bytes, tree: Tree) -> str:
    """Rewrite double-quoted string literals to single quotes when that adds no escapes."""
    edits: list[tuple[int, int, bytes]] = []
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "string":
            literal = source[node.start_byte : node.end_byte].decode("utf-8")
            replacement = _single_quoted(literal)
            if replacement != literal:
                edits.append((node.start_byte, node.end_byte, replacement.encode("utf-8")))
            continue
        stack.extend(node.children)

    for start, end, replacement in sorted(edits, reverse=True):
        source = source[:start] + replacement + source[end:]
    return source.decode("utf-8")


def _single_quoted(literal: str) -> str:
    if len(literal) < 2 or not literal.startswith('"'):
        return literal
    body = literal[1:-1]
    if "'" in body:
        return literal
    return "'" + body.replace('\\"', '"') + "'"
