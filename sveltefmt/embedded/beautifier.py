"""Default sub-language formatter: jsbeautifier/cssbeautifier behind a syntax check."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import cssbeautifier
import jsbeautifier

from sveltefmt.diagnostics import EmbeddedFormatError
from sveltefmt.embedded.base import EmbeddedLanguage
from sveltefmt.embedded.syntax import (
    check_syntax,
    parse_typescript,
    prefer_single_quotes,
    template_literal_ranges,
)

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"[ \t]*\r?\n\s*")


@dataclass(frozen=True, slots=True)
class BeautifierFormatter:
    indent_size: int = 2

    def format(self, text: str, language: EmbeddedLanguage) -> str:
        logger.debug("formatting %d chars of %s", len(text), language)
        match language:
            case "css":
                return self._format_css(text)
            case "typescript":
                return self._format_script(text)
            case "expression":
                return self._format_expression(text)
        raise ValueError(f"Unsupported embedded language: {language}")

    def _js_options(self) -> jsbeautifier.BeautifierOptions:
        options = jsbeautifier.default_options()
        options.indent_size = self.indent_size
        options.end_with_newline = False
        return options

    def _format_script(self, text: str) -> str:
        check_syntax(text, "typescript")
        return jsbeautifier.beautify(text, self._js_options())

    def _format_css(self, text: str) -> str:
        options = cssbeautifier.default_options()
        options.indent_size = self.indent_size
        return cssbeautifier.beautify(text, options)

    def _format_expression(self, text: str) -> str:
        # parenthesised so object literals parse as expressions, not blocks
        wrapped = f"({text})"
        try:
            source, tree = check_syntax(wrapped, "expression")
        except EmbeddedFormatError as exc:
            raise exc.shifted(-1) from None
        normalized = prefer_single_quotes(source, tree)
        beautified = jsbeautifier.beautify(normalized, self._js_options())
        return strip_wrapping_parens(collapse_line_breaks(beautified.strip()))


def collapse_line_breaks(text: str) -> str:
    """Join `text` onto one line, leaving breaks inside template literals alone."""
    literal_ranges = template_literal_ranges(text)

    def _replace(match: re.Match[str]) -> str:
        if any(literal_range.contains(match.start()) for literal_range in literal_ranges):
            return match.group(0)
        return " "

    return _LINE_BREAK_RE.sub(_replace, text)


def strip_wrapping_parens(text: str) -> str:
    """Drop one pair of parentheses when it encloses the whole expression."""
    source, tree = parse_typescript(text)
    statements = tree.root_node.named_children
    if len(statements) != 1 or statements[0].type != "expression_statement":
        return text
    expressions = statements[0].named_children
    if len(expressions) != 1:
        return text
    wrapped = expressions[0]
    if (
        wrapped.type != "parenthesized_expression"
        or wrapped.start_byte != 0
        or wrapped.end_byte != len(source)
    ):
        return text
    return source[wrapped.start_byte + 1 : wrapped.end_byte - 1].decode("utf-8").strip()
