"""Formatters for script, style and expression regions embedded in templates."""

from sveltefmt.embedded.base import EmbeddedFormatter, EmbeddedLanguage
from sveltefmt.embedded.beautifier import (
    BeautifierFormatter,
    collapse_line_breaks,
    strip_wrapping_parens,
)
from sveltefmt.embedded.syntax import check_syntax, prefer_single_quotes, template_literal_ranges

__all__ = [
    "BeautifierFormatter",
    "EmbeddedFormatter",
    "EmbeddedLanguage",
    "check_syntax",
    "collapse_line_breaks",
    "prefer_single_quotes",
    "strip_wrapping_parens",
    "template_literal_ranges",
]
