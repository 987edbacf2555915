"""Diagnostics helpers."""

from __future__ import annotations

from sveltefmt.diagnostics.diagnostic import Diagnostic


def render_diagnostic(diagnostic: Diagnostic, source: str | None = None) -> str:
    """Single-line rendering, with line/column when the source is known."""
    from sveltefmt.text import offset_to_line_col

    location = f"{diagnostic.range.start}-{diagnostic.range.end}"
    if source is not None:
        line, column = offset_to_line_col(source, diagnostic.range.start)
        location = f"{line}:{column}"
    rendered = f"{diagnostic.severity}[{diagnostic.code}] {location}: {diagnostic.message}"
    if diagnostic.hint:
        rendered += f" ({diagnostic.hint})"
    return rendered
